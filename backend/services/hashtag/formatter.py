# formatter.py
# role: 해시태그 문자열 포맷
# content: 한국어는 공백만 제거, 영어는 소문자 + 공백 제거 후 '#'를 붙인다.

import re

_SPACE_RE = re.compile(r"\s+")


def format_hashtag(text: str, language: str) -> str:
    body = _SPACE_RE.sub("", text)
    if language == "en":
        body = body.lower()
    return "#" + body


def strip_hashtag(tag: str) -> str:
    # 저장 스키마가 '#' 없는 키워드를 쓸 때 사용
    return tag[1:] if tag.startswith("#") else tag
