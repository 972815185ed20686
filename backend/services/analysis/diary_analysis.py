# diary_analysis.py
# role: 일기 분석 총괄 (LLM 우선, 해시태그 엔진 대체)
# content: LLM이 돌려준 요약/감정/키워드를 검증하고, 키워드는 해시태그 엔진 규칙으로 다시 거른다.
#  - LLM이 실패하거나 쓸 만한 키워드가 min_tags개 미만이면 엔진 추출 결과로 대신한다.
#  - 해시태그 언어는 키워드가 아니라 일기 본문 기준 (한 기록 = 한 언어)

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from backend.config import DEBUG
from backend.services.analysis.prompt_builder import build_analysis_prompt
from backend.services.hashtag.engine import extract, sanitize_keywords
from backend.services.hashtag.language import detect_language
from backend.services.hashtag.models import ExtractionOptions, SupportedLanguage
from backend.utils.llm_client import request_json

VALID_EMOTIONS = (
    "happy", "grateful", "excited", "peaceful",
    "neutral", "thoughtful",
    "sad", "angry", "anxious", "exhausted",
)
EMOTION_EMOJI = {
    "happy": "😊",
    "grateful": "🥰",
    "excited": "🤩",
    "peaceful": "😌",
    "neutral": "😐",
    "thoughtful": "🤔",
    "sad": "😢",
    "angry": "😡",
    "anxious": "😰",
    "exhausted": "😫",
}
# neutral 은 기본값으로 쓰지 않는다.
DEFAULT_EMOTION = "peaceful"
DEFAULT_SUMMARY = "오늘 하루의 기록"
SUMMARY_LIMIT = 100
MAX_SECONDARY_EMOTIONS = 2


class DiaryAnalysis(BaseModel):
    summary: str = DEFAULT_SUMMARY
    primary_emotion_key: str = DEFAULT_EMOTION
    secondary_emotion_keys: List[str] = Field(default_factory=list)
    emoji: str = EMOTION_EMOJI[DEFAULT_EMOTION]
    hashtags: List[str] = Field(default_factory=list)
    language: SupportedLanguage = "ko"
    # 키워드 출처: "ai" (LLM 키워드를 정리한 것) / "fallback" (엔진 추출)
    source: str = "fallback"


def _validate_emotion(value: Any) -> str:
    return value if isinstance(value, str) and value in VALID_EMOTIONS else DEFAULT_EMOTION


def _validate_secondary(value: Any, primary: str) -> List[str]:
    # 유효한 감정 키만, primary 와 중복 금지, 최대 2개
    if not isinstance(value, list):
        return []
    keys: List[str] = []
    for key in value:
        if isinstance(key, str) and key in VALID_EMOTIONS and key != primary and key not in keys:
            keys.append(key)
    return keys[:MAX_SECONDARY_EMOTIONS]


def _validate_summary(value: Any) -> str:
    summary = str(value or "").strip()[:SUMMARY_LIMIT]
    return summary or DEFAULT_SUMMARY


def analyze_diary(transcript: str, options: Optional[ExtractionOptions] = None) -> DiaryAnalysis:
    options = options or ExtractionOptions()
    language = detect_language(transcript, options.preferred_language)

    parsed: Optional[Dict[str, Any]] = request_json(build_analysis_prompt(transcript))

    summary = DEFAULT_SUMMARY
    emotion = DEFAULT_EMOTION
    secondary: List[str] = []
    if parsed:
        summary = _validate_summary(parsed.get("summary"))
        emotion = _validate_emotion(parsed.get("primaryEmotionKey"))
        secondary = _validate_secondary(parsed.get("secondaryEmotionKeys"), emotion)

        keywords = parsed.get("keywords")
        cleaned = sanitize_keywords(
            keywords if isinstance(keywords, list) else [],
            preferred_language=language,
            max_tags=options.max_tags,
        )
        if len(cleaned.hashtags) >= options.min_tags:
            if DEBUG:
                print(f"[analysis] AI 키워드 사용: {cleaned.hashtags}")
            return DiaryAnalysis(
                summary=summary,
                primary_emotion_key=emotion,
                secondary_emotion_keys=secondary,
                emoji=EMOTION_EMOJI[emotion],
                hashtags=cleaned.hashtags,
                language=cleaned.language,
                source="ai",
            )
        if DEBUG:
            print(f"[analysis] AI 키워드 부족({len(cleaned.hashtags)}개) -> 엔진 추출로 대체")
    elif DEBUG:
        print("[analysis] LLM 응답 없음 -> 엔진 추출로 대체")

    result = extract(transcript, options.model_copy(update={"preferred_language": language}))
    return DiaryAnalysis(
        summary=summary,
        primary_emotion_key=emotion,
        secondary_emotion_keys=secondary,
        emoji=EMOTION_EMOJI[emotion],
        hashtags=result.hashtags,
        language=result.language,
        source="fallback",
    )
