# dictionaries.py
# role: 언어별 정규화 사전 로더
# content: data/<lang>.json 사전 파일을 검증해서 읽고, 별칭 -> 대표어 역색인을 한 번만 만들어 둔다.
# 설명:
#  - 사전은 코드가 아니라 버전이 붙은 설정 데이터다. HASHTAG_DICTIONARY_DIR 로 통째로 교체할 수 있다.
#  - 프로세스당 언어별 1회 로드 (lru_cache), 이후에는 읽기 전용으로만 쓴다.

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from backend.config import DEBUG, DICTIONARY_DIR
from backend.services.hashtag.models import SUPPORTED_LANGUAGES, Category

# 포함 매칭에 쓰는 별칭 최소 길이
MIN_CONTAINMENT_ALIAS_LENGTH = 2


class CategoryIndicators(BaseModel):
    event: List[str] = Field(default_factory=list)
    topic: List[str] = Field(default_factory=list)
    outcome: List[str] = Field(default_factory=list)


class DictionaryFile(BaseModel):
    """Schema of one ``data/<lang>.json`` file."""

    language: str
    version: str
    canonical: Dict[str, List[str]] = Field(default_factory=dict)
    blocklist: List[str] = Field(default_factory=list)
    emotion_blocklist: List[str] = Field(default_factory=list)
    general_blocklist: List[str] = Field(default_factory=list)
    category_indicators: CategoryIndicators = Field(default_factory=CategoryIndicators)


@dataclass(frozen=True)
class HashtagDictionary:
    language: str
    version: str
    canonical: Mapping[str, frozenset]
    blocklist: frozenset
    emotion_blocklist: frozenset
    general_blocklist: frozenset
    # 분류 우선순위 순서: event -> outcome -> topic
    category_indicators: Tuple[Tuple[Category, Tuple[str, ...]], ...]
    # 소문자 대표어/별칭 -> 대표어 (정확 일치용 O(1) 조회)
    alias_index: Mapping[str, str] = field(default_factory=dict)
    # 포함 매칭용 (소문자 별칭, 대표어) - 긴 별칭 우선
    containment_aliases: Tuple[Tuple[str, str], ...] = ()

    def lookup(self, text: str) -> Optional[str]:
        """Return the canonical form for ``text`` or None.

        Exact hits come from the reverse index. Otherwise the longest alias
        contained in ``text`` wins; English aliases must cover whole words.
        """
        lower = text.lower()
        hit = self.alias_index.get(lower)
        if hit is not None:
            return hit
        if self.language == "en":
            padded = f" {lower} "
            for alias, canonical in self.containment_aliases:
                if f" {alias} " in padded:
                    return canonical
            return None
        for alias, canonical in self.containment_aliases:
            if alias in lower:
                return canonical
        return None


def build_dictionary(data: DictionaryFile) -> HashtagDictionary:
    alias_index: Dict[str, str] = {}
    ordered: List[Tuple[str, str]] = []

    # 대표어 자신이 먼저 등록되어야 별칭 충돌 시에도 대표어 정확 일치가 이긴다.
    for canonical in data.canonical:
        alias_index.setdefault(canonical.lower(), canonical)
    for canonical, aliases in data.canonical.items():
        for alias in aliases:
            key = alias.lower()
            # 같은 별칭이 여러 대표어에 걸려 있으면 사전 순서상 먼저 나온 쪽이 이긴다.
            alias_index.setdefault(key, canonical)
            # 한 글자 별칭("일", "끝")은 포함 매칭에서 제외 - "일정", "끝말잇기"까지 끌려온다.
            if len(key) >= MIN_CONTAINMENT_ALIAS_LENGTH:
                ordered.append((key, canonical))

    # 긴 별칭 우선 (같은 길이는 사전 순서 유지 - sorted는 안정 정렬)
    containment = tuple(sorted(ordered, key=lambda pair: len(pair[0]), reverse=True))

    indicators = data.category_indicators
    return HashtagDictionary(
        language=data.language,
        version=data.version,
        canonical=MappingProxyType({k: frozenset(v) for k, v in data.canonical.items()}),
        blocklist=frozenset(w.lower() for w in data.blocklist),
        emotion_blocklist=frozenset(w.lower() for w in data.emotion_blocklist),
        general_blocklist=frozenset(w.lower() for w in data.general_blocklist),
        category_indicators=(
            (Category.EVENT, tuple(w.lower() for w in indicators.event)),
            (Category.OUTCOME, tuple(w.lower() for w in indicators.outcome)),
            (Category.TOPIC, tuple(w.lower() for w in indicators.topic)),
        ),
        alias_index=MappingProxyType(alias_index),
        containment_aliases=containment,
    )


def load_dictionary_file(path: Path) -> HashtagDictionary:
    with open(path, "r", encoding="utf-8") as f:
        data = DictionaryFile(**json.load(f))
    return build_dictionary(data)


@lru_cache(maxsize=None)
def get_dictionary(language: str) -> HashtagDictionary:
    """Load (once per process) the dictionary for ``language``."""
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"unsupported language: {language!r}")
    path = DICTIONARY_DIR / f"{language}.json"
    dictionary = load_dictionary_file(path)
    if DEBUG:
        print(
            f"[hashtag] 사전 로드: {path.name} v{dictionary.version} "
            f"(대표어 {len(dictionary.canonical)}개, 별칭 {len(dictionary.containment_aliases)}개)"
        )
    return dictionary
