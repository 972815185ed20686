# normalizer.py
# role: 후보 정규화 + 필터링 + 카테고리 분류
# content: 점수 순으로 후보를 돌면서
#   (a) 차단어(하드/감정/일반어) 제거 -> (b) 대표어로 치환 -> (c) 치환 결과 재검사
#   -> (d) 대표어 기준 중복 제거 -> (e) Event/Outcome/Topic 분류

import re
from dataclasses import replace
from typing import List

from backend.services.hashtag.dictionaries import HashtagDictionary
from backend.services.hashtag.models import Candidate, Category

_SPACE_RE = re.compile(r"\s+")


def canonical_key(text: str) -> str:
    # "Team Meeting" / "teammeeting" 을 같은 태그로 본다 (포맷 후 동일해지기 때문)
    return _SPACE_RE.sub("", text.lower())


def is_blocked(text: str, dictionary: HashtagDictionary) -> bool:
    """True when ``text`` must never become a tag.

    Hard-blocklist and emotion entries are matched as substrings ("행복한하루"
    is blocked by "행복"); general words only on exact match, because short
    entries such as "일" would otherwise wipe out "일정" and friends.
    """
    lower = text.lower().strip()
    if not lower:
        return True
    # 포맷 후에는 공백이 사라지므로 붙여 쓴 형태도 같이 본다 ("visa dates" -> "visadates")
    compact = canonical_key(lower)
    forms = (lower, compact)
    if any(b in form for b in dictionary.blocklist for form in forms):
        return True
    if any(e in form for e in dictionary.emotion_blocklist for form in forms):
        return True
    if lower in dictionary.general_blocklist or compact in dictionary.general_blocklist:
        return True
    return False


def to_canonical(text: str, dictionary: HashtagDictionary) -> str:
    return dictionary.lookup(text) or text


def classify(text: str, dictionary: HashtagDictionary) -> Category:
    lower = text.lower()
    for category, indicators in dictionary.category_indicators:
        if any(ind in lower for ind in indicators):
            return category
    return Category.UNKNOWN


def normalize_candidates(candidates: List[Candidate], dictionary: HashtagDictionary) -> List[Candidate]:
    normalized: List[Candidate] = []
    seen = set()

    for candidate in candidates:
        # 차단은 정규화보다 먼저 (별칭 치환으로 감정어가 빠져나가지 않도록)
        if is_blocked(candidate.text, dictionary):
            continue

        canonical = to_canonical(candidate.text, dictionary)
        # 정규화가 차단어를 되살리면 안 된다.
        if canonical != candidate.text and is_blocked(canonical, dictionary):
            continue

        key = canonical_key(canonical)
        if key in seen:
            continue
        seen.add(key)

        normalized.append(replace(
            candidate,
            text=canonical,
            normalized_key=key,
            category=classify(canonical, dictionary),
        ))

    return normalized
