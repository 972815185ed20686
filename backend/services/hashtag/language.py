# language.py
# role: 입력 문장의 지배 언어 판별 (ko / en)
# content: 사용자 설정 언어가 있으면 그대로 따르고, 없으면 한글/라틴 문자 수를 세서 결정한다.

import re
from typing import Optional

from backend.services.hashtag.models import SUPPORTED_LANGUAGES

# 한글 음절 + 자모 + 호환 자모
HANGUL_RE = re.compile(r"[\uAC00-\uD7AF\u1100-\u11FF\u3130-\u318F]")
LATIN_RE = re.compile(r"[a-zA-Z]")

# 라틴 문자 수 대비 이 비율 이상 한글이 있으면 한국어로 본다.
# -> "오늘 meeting에서 project 진행" 처럼 영어 단어가 섞인 한국어 일기를 한국어로 분류하기 위함
KOREAN_RATIO = 0.3


def detect_language(text, preferred_language: Optional[str] = None) -> str:
    if preferred_language in SUPPORTED_LANGUAGES:
        return preferred_language

    if not isinstance(text, str):
        text = ""

    hangul = len(HANGUL_RE.findall(text))
    latin = len(LATIN_RE.findall(text))

    if hangul > 0 and hangul >= latin * KOREAN_RATIO:
        return "ko"
    # 문자가 전혀 없으면(숫자/기호만) 한국어 기본값
    return "en" if latin > 0 else "ko"


def has_hangul(text: str) -> bool:
    return bool(HANGUL_RE.search(text))
