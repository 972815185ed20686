# candidates.py
# role: 후보 토큰 생성기
# content: 전처리(URL/이메일/숫자 제거) -> 언어별 토큰화 -> n-gram 확장
# 설명:
#  - 형태소 분석기 없이 동작해야 하므로 한국어는 "어절 + 조사 떼기", 영어는 "불용어 제거"로 처리한다.
#  - 토큰 위치(position)는 정제된 문장에서의 실제 시작 인덱스 / 문장 길이 (0~1)

import re
from typing import List

from backend.services.hashtag.language import LATIN_RE, has_hangul
from backend.services.hashtag.models import Token

# -----------------------------
# 전처리 패턴
# -----------------------------
_URL_RE = re.compile(r"https?://\S+")
_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
# 단독 숫자만 제거 ("3층", "v2" 처럼 붙어 있는 건 유지)
_NUMBER_RE = re.compile(r"\b\d+\b")
_SPACE_RE = re.compile(r"\s+")

# 공백/문장부호 기준 분리 -> 분리자가 아닌 구간을 그대로 매칭해서 시작 위치를 얻는다.
_SEGMENT_RE = re.compile(r"[^\s,.!?;:'\"()\[\]{}]+")

# 어절 끝에서 떼어낼 조사 (주격/목적격/처소격/보조사). 순서대로 검사, 첫 매칭만 제거.
# -> '에서'가 '에'보다, '으로'가 '로'보다 먼저 와야 한다.
KO_PARTICLES = ("은", "는", "이", "가", "을", "를", "에서", "에", "으로", "로", "와", "과", "의", "도")

EN_STOPWORDS = frozenset([
    "the", "a", "an", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "must", "shall", "can", "need", "dare", "ought", "used",
    "to", "of", "in", "for", "on", "with", "at", "by", "from", "as", "into",
    "through", "during", "before", "after", "above", "below", "between",
    "and", "but", "or", "nor", "so", "yet", "both", "either", "neither",
    "not", "only", "own", "same", "than", "too", "very", "just",
    "about", "against", "again", "further", "then", "once", "here", "there",
    "when", "where", "why", "how", "all", "each", "few", "more", "most",
    "other", "some", "such", "no", "any", "if", "because", "until", "while",
])

# 언어별 n-gram 최대 차수와 결합 문자
# -> 한국어는 "팀회의"처럼 붙여 쓰는 복합어가 자연스럽고, 영어는 "team meeting"처럼 띄어 쓴다.
NGRAM_ORDER = {"ko": 2, "en": 3}
NGRAM_JOINER = {"ko": "", "en": " "}

MIN_KO_TOKEN_LENGTH = 2
MIN_EN_TOKEN_LENGTH = 3


def clean_text(text: str) -> str:
    processed = _URL_RE.sub("", text)
    processed = _EMAIL_RE.sub("", processed)
    processed = _NUMBER_RE.sub("", processed)
    return _SPACE_RE.sub(" ", processed).strip()


def strip_particle(word: str) -> str:
    # 조사를 떼고도 2글자 이상 남을 때만 제거 ("회의" -> "회"가 되는 것 방지)
    for particle in KO_PARTICLES:
        if word.endswith(particle) and len(word) > len(particle) + 1:
            return word[: -len(particle)]
    return word


def tokenize_korean(text: str) -> List[Token]:
    tokens: List[Token] = []
    length = len(text)
    if not length:
        return tokens
    for m in _SEGMENT_RE.finditer(text):
        word = strip_particle(m.group(0))
        # 한글이 남아 있어야 한국어 후보로 인정 ("meeting에서" -> "meeting" 은 제외)
        if has_hangul(word) and len(word) >= MIN_KO_TOKEN_LENGTH:
            tokens.append(Token(text=word, position=m.start() / length))
    return tokens


def tokenize_english(text: str) -> List[Token]:
    tokens: List[Token] = []
    lowered = text.lower()
    length = len(lowered)
    if not length:
        return tokens
    for m in _SEGMENT_RE.finditer(lowered):
        word = m.group(0)
        if word in EN_STOPWORDS or len(word) < MIN_EN_TOKEN_LENGTH:
            continue
        # 영어 후보는 라틴 문자만 ("회의에서", "meeting에서" 제외)
        if has_hangul(word) or not LATIN_RE.search(word):
            continue
        tokens.append(Token(text=word, position=m.start() / length))
    return tokens


def generate_ngrams(tokens: List[Token], max_n: int = 3, joiner: str = " ") -> List[Token]:
    """Return the unigrams followed by every 2..max_n gram of adjacent tokens."""
    ngrams: List[Token] = list(tokens)
    for n in range(2, max_n + 1):
        for i in range(len(tokens) - n + 1):
            window = tokens[i:i + n]
            ngrams.append(Token(
                text=joiner.join(t.text for t in window),
                position=sum(t.position for t in window) / n,
            ))
    return ngrams


def generate_candidates(text: str, language: str) -> List[Token]:
    processed = clean_text(text)
    if language == "ko":
        tokens = tokenize_korean(processed)
    else:
        tokens = tokenize_english(processed)
    return generate_ngrams(tokens, NGRAM_ORDER[language], NGRAM_JOINER[language])
