# backend/main.py
# role: App Entry Point
# content: FastAPI 앱을 만들고 일기 분석/해시태그 라우터를 연결한다.

# 환경변수 사전호출(.env) -> 설정 모듈보다 먼저 실행되어야 한다.
from dotenv import load_dotenv
load_dotenv()

# 프론트엔드(다른 포트/도메인)에서의 요청이 브라우저 정책에 막히지 않도록 CORS 허용
from fastapi.middleware.cors import CORSMiddleware

# FastAPI 앱 생성
from fastapi import FastAPI

# 라우터 정의를 갖고 있는 파일을 임포팅
from backend.api.routes import router

# 앱 인스턴스 생성
app = FastAPI(title="Voice Diary Tags")

# 현재는 개발 용도로 모든 도메인과 메서드를 "*"로 열어두었음
# -> 실제 서비스 단계에서는 앱 도메인과 필요한 메서드만 허용할 것
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# 라우터 등록 -> api/routes.py에서 정의된 엔드포인트들을 앱에 연결
app.include_router(router, prefix="/api/diary")

# 루트 엔드포인트 -> 기본 서버 상태 확인용
@app.get("/")
def root():
    return {"message": "FASTAPI 서버가 작동중 입니다!"}
