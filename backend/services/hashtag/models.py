# models.py
# role: 해시태그 엔진 데이터 모델
# content: 토큰/후보/카테고리(내부용 dataclass)와 옵션/결과(외부 계약용 pydantic 모델)

from dataclasses import dataclass
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

# 지원 언어 코드
SupportedLanguage = Literal["ko", "en"]
SUPPORTED_LANGUAGES = ("ko", "en")


class Category(str, Enum):
    EVENT = "event"      # 사건/행위 (회의, 운동, 발표 ...)
    TOPIC = "topic"      # 주제/대상 (가족, 동료, 프로젝트 ...)
    OUTCOME = "outcome"  # 결과/결정 (결정, 연기, 해결 ...)
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    text: str
    # 정제된 문장 안에서의 상대 위치 (0 = 시작, 1 = 끝)
    position: float


@dataclass
class Candidate:
    text: str
    normalized_key: str
    score: float
    position: float
    frequency: int = 1
    category: Category = Category.UNKNOWN


class ExtractionOptions(BaseModel):
    preferred_language: Optional[SupportedLanguage] = None
    min_tags: int = 3
    max_tags: int = 6
    # 이벤트 태그 강제 포함 규칙 (selector 참고)
    force_event: bool = True


class ExtractionResult(BaseModel):
    hashtags: List[str] = Field(default_factory=list)
    language: SupportedLanguage = "en"
