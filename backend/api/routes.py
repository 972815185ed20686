# routes.py
# role : 일기 분석/해시태그 API 라우터
# content: main.py에서 /api/diary 로 붙는 엔드포인트 모음
#   - POST /hashtags           : 텍스트 -> 해시태그 (엔진 직접 호출)
#   - POST /hashtags/sanitize  : AI 키워드 -> 정리된 해시태그
#   - POST /analyze            : LLM 분석 + 엔진 대체
#   - GET  /health             : 상태 확인
import time
from typing import List, Optional

# 1.라우터 관련 모듈 임포트
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

# 2.서비스 모듈 임포트
from backend.config import DEBUG
from backend.services.analysis.diary_analysis import DiaryAnalysis, analyze_diary
from backend.services.hashtag.engine import extract, sanitize_keywords
from backend.services.hashtag.models import ExtractionOptions, ExtractionResult, SupportedLanguage
from backend.utils.transcript import sanitize_transcript, validate_transcript

# 3.라우터 인스턴스 로드
router = APIRouter()


# 4.pydantic 기반 입력 데이터 모델 정의
# "text" 키가 없거나 str이 아니면 FastAPI가 자동으로 422를 돌려준다.
class HashtagRequest(BaseModel):
    text: str
    preferred_language: Optional[SupportedLanguage] = None
    min_tags: int = 3
    max_tags: int = 6
    force_event: bool = True

    def to_options(self) -> ExtractionOptions:
        return ExtractionOptions(
            preferred_language=self.preferred_language,
            min_tags=self.min_tags,
            max_tags=self.max_tags,
            force_event=self.force_event,
        )


# 기존 클라이언트는 본문 키로 "transcript"를 보낸다. "text"도 그대로 받는다.
class AnalyzeRequest(HashtagRequest):
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(alias="transcript")


class SanitizeRequest(BaseModel):
    keywords: List[str] = Field(default_factory=list)
    preferred_language: Optional[SupportedLanguage] = None
    max_tags: int = 6


@router.get("/health")
def health():
    return {"ok": True, "ts": int(time.time() * 1000)}


@router.post("/hashtags", response_model=ExtractionResult)
def hashtags(request: HashtagRequest):
    # 길이 상한은 엔진이 아니라 여기서 건다.
    text = sanitize_transcript(request.text)
    result = extract(text, request.to_options())
    if DEBUG:
        print(f"[API] /hashtags lang={result.language} tags={result.hashtags}")
    return result


@router.post("/hashtags/sanitize", response_model=ExtractionResult)
def sanitize(request: SanitizeRequest):
    return sanitize_keywords(
        request.keywords,
        preferred_language=request.preferred_language,
        max_tags=request.max_tags,
    )


@router.post("/analyze", response_model=DiaryAnalysis)
def analyze(request: AnalyzeRequest):
    ok, error = validate_transcript(request.text)
    if not ok:
        raise HTTPException(status_code=400, detail=error)

    transcript = sanitize_transcript(request.text)
    if DEBUG:
        print(f"[API] /analyze transcript: {transcript[:100]}")
    return analyze_diary(transcript, request.to_options())
