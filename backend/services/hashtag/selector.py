# selector.py
# role: 최종 해시태그 선택기
# content: 카테고리 균형(Event -> Topic -> Outcome -> Unknown) + 최소/최대 개수 보장 + 이벤트 태그 강제 포함 규칙
# 설명:
#  - "무슨 일이 있었는지"를 알려주는 행위 태그가 하나는 있어야 요약으로 쓸만하다는 정책 판단.
#  - 이 규칙은 점수 계산과 분리해서 여기서만 적용한다 (force_event=False 로 끌 수 있음).

from dataclasses import replace
from typing import List, Optional, Tuple

from backend.config import SELECTION_POLICY
from backend.services.hashtag.models import Candidate, Category

# 이벤트 다음으로 채우는 순서
_FILL_ORDER = (Category.TOPIC, Category.OUTCOME, Category.UNKNOWN)


def clamp_bounds(min_tags: int, max_tags: int) -> Tuple[int, int]:
    max_tags = max(1, int(max_tags))
    min_tags = min(max(0, int(min_tags)), max_tags)
    return min_tags, max_tags


def _promote_event(selected: List[Candidate], candidates: List[Candidate], max_tags: int) -> List[Candidate]:
    top = replace(candidates[0], category=Category.EVENT)
    rest = [c for c in selected if c.normalized_key != top.normalized_key]
    if len(rest) == len(selected) and len(rest) + 1 > max_tags:
        # 새로 넣는 경우에만 자리가 모자라면 점수가 가장 낮은 태그를 뺀다.
        lowest = min(range(len(rest)), key=lambda i: rest[i].score)
        rest.pop(lowest)
    return [top] + rest


def select_final(
    candidates: List[Candidate],
    min_tags: int = 3,
    max_tags: int = 6,
    force_event: Optional[bool] = None,
    max_event_tags: Optional[int] = None,
) -> List[Candidate]:
    """Pick the final tag set from normalized, score-ordered candidates."""
    min_tags, max_tags = clamp_bounds(min_tags, max_tags)
    if force_event is None:
        force_event = SELECTION_POLICY.force_event
    if max_event_tags is None:
        max_event_tags = SELECTION_POLICY.max_event_tags

    by_category = {category: [] for category in Category}
    for c in candidates:
        by_category[c.category].append(c)

    selected: List[Candidate] = []
    taken = set()

    def take(c: Candidate) -> None:
        selected.append(c)
        taken.add(c.normalized_key)

    # 1) 이벤트 태그 최대 2개
    for c in by_category[Category.EVENT][:max_event_tags]:
        if len(selected) >= max_tags:
            break
        take(c)

    # 2) 주제 -> 결과 -> 기타 순으로 채운다
    for category in _FILL_ORDER:
        for c in by_category[category]:
            if len(selected) >= max_tags:
                break
            if c.normalized_key not in taken:
                take(c)

    # 3) 최소 개수가 안 되면 카테고리 무시하고 점수순으로 보충
    if len(selected) < min_tags:
        for c in candidates:
            if len(selected) >= min_tags:
                break
            if c.normalized_key not in taken:
                take(c)

    # 4) 이벤트 태그가 하나도 없으면 최고 점수 후보를 이벤트로 승격
    if force_event and candidates and not any(c.category == Category.EVENT for c in selected):
        selected = _promote_event(selected, candidates, max_tags)

    selected.sort(key=lambda c: c.score, reverse=True)
    return selected[:max_tags]
