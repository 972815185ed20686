# transcript.py
# role: 음성 전사 텍스트 정리/검증
# content: 분석/추출 전에 길이 상한(10,000자)을 적용하고 HTML 조각을 제거한다.
#  - 해시태그 엔진은 길이를 다시 자르지 않으므로 상한은 반드시 여기서 건다.

import re
from typing import Optional, Tuple

from backend.config import MAX_TRANSCRIPT_LENGTH, MIN_TEXT_LENGTH

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_JS_URL_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+=", re.IGNORECASE)


def sanitize_transcript(text) -> str:
    if not isinstance(text, str):
        return ""
    cleaned = text.strip()[:MAX_TRANSCRIPT_LENGTH]
    cleaned = _HTML_TAG_RE.sub("", cleaned)
    cleaned = _JS_URL_RE.sub("", cleaned)
    return _EVENT_HANDLER_RE.sub("", cleaned)


def validate_transcript(text) -> Tuple[bool, Optional[str]]:
    """Return (ok, error message)."""
    if not text or not isinstance(text, str):
        return False, "텍스트가 필요합니다."
    trimmed = text.strip()
    if len(trimmed) < MIN_TEXT_LENGTH:
        return False, f"텍스트가 너무 짧습니다. (최소 {MIN_TEXT_LENGTH}자)"
    if len(trimmed) > MAX_TRANSCRIPT_LENGTH:
        return False, f"텍스트가 너무 깁니다. (최대 {MAX_TRANSCRIPT_LENGTH}자)"
    return True, None
