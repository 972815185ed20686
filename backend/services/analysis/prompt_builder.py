# prompt_builder.py
# role: 일기 분석 프롬프트 구성
# content: 요약 한 문장 + 주/보조 감정 키 + 키워드를 JSON으로만 돌려받도록 지시한다.

# 전사 텍스트는 프롬프트에 이 길이까지만 넣는다 (토큰 절약)
PROMPT_TRANSCRIPT_LIMIT = 2000

ANALYSIS_PROMPT = """일기 텍스트를 분석해서 감정과 키워드를 추출해.

## 출력 형식
JSON만 반환. 다른 텍스트 없이.
{{
  "summary": "한 문장 요약",
  "primaryEmotionKey": "감정키",
  "secondaryEmotionKeys": [],
  "keywords": ["키워드1", "키워드2"]
}}

## 10가지 감정 (영어 키만 사용)
- 긍정: happy(기쁨), grateful(감사), excited(설렘), peaceful(평온)
- 중립: neutral(무난), thoughtful(고민/갈등)
- 부정: sad(슬픔), angry(분노), anxious(불안), exhausted(지침)

## summary 규칙
- 사용자의 하루를 조용히 대신 말해주는 한 문장, 따뜻한 존댓말 ("~네요", "~어요")
- 감정 분석 결과(primary/secondary)를 자연스럽게 녹여낼 것
- 질문, 조언, 반말, 과장된 감탄, 이모지 금지

## 감정 선택 규칙
- 갈등/의사결정 언급 -> thoughtful 우선
- 피로/컨디션 저하 -> exhausted 우선
- neutral 기본값 금지 (명확한 근거 없으면 다른 감정 선택)

### 감정 우선순위
1. 피로/지침/컨디션 저하 -> exhausted
2. 갈등/선택/결정/고민 -> thoughtful
3. 걱정/불안 -> anxious
4. 짜증/답답/분노 -> angry
5. 슬픔/우울 -> sad
6. 감사/고마움 -> grateful
7. 기대/설렘 -> excited
8. 편안/안도 -> peaceful
9. 기쁨/행복 -> happy
10. 순수 사실 나열만 -> neutral (거의 사용 안 함)

## secondaryEmotionKeys 규칙
- 1~2개 적극 추출 (0개는 아주 단순한 경우만)
- primaryEmotionKey와 중복 금지
- 예: 피곤하지만 뿌듯 -> primary: exhausted, secondary: [grateful]
- 예: 걱정되지만 설렘 -> primary: anxious, secondary: [excited]

## keywords 규칙
- 3~5개, 중복 없음
- "오늘 무슨 일이 있었는지" 알 수 있는 구체적 명사/명사구
- 한 기록 = 한 언어 (혼용 금지)
- 감정 단어(행복, 슬픔, 불안, 피곤 등)와 과잉 일반어(하루, 오늘, 일상, 생각, 느낌)는 제외
- 예: "팀 회의에서 일정 밀려서 범위 줄이기로" -> ["회의", "일정", "범위조정"]

## 분석할 텍스트
"{transcript}"
"""


def build_analysis_prompt(transcript: str) -> str:
    return ANALYSIS_PROMPT.format(transcript=transcript[:PROMPT_TRANSCRIPT_LIMIT])
