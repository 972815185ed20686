# scorer.py
# role: 후보 점수화
# content: 빈도(TF) x 위치 x 길이 x 구체성 4가지 곱셈 가중치로 후보별 중요도를 계산한다.

import math
from typing import Dict, List, Optional

from backend.config import SCORING_WEIGHTS, ScoringWeights
from backend.services.hashtag.models import Candidate, Token


def term_frequencies(tokens: List[Token]) -> Dict[str, int]:
    freq: Dict[str, int] = {}
    for token in tokens:
        key = token.text.lower()
        freq[key] = freq.get(key, 0) + 1
    return freq


def position_factor(position: float, weights: ScoringWeights) -> float:
    # 일기는 첫머리/끝머리에 주제가 몰리는 경향이 있다.
    edge = weights.edge_ratio
    if position < edge or position > 1 - edge:
        return weights.edge_position_bonus
    return 1.0


def length_factor(text: str, language: str, weights: ScoringWeights) -> float:
    length = len(text)
    if language == "ko":
        low, high, short = weights.ko_length_min, weights.ko_length_max, weights.ko_short_factor
    else:
        low, high, short = weights.en_length_min, weights.en_length_max, weights.en_short_factor
    if low <= length <= high:
        return weights.in_band_factor
    return weights.long_factor if length > high else short


def specificity_factor(text: str, language: str, weights: ScoringWeights) -> float:
    if language == "ko":
        compound = len(text) > weights.ko_compound_length
    else:
        compound = " " in text or len(text) > weights.en_compound_length
    return weights.specificity_bonus if compound else 1.0


def score_token(token: Token, frequency: int, total: int, language: str,
                weights: Optional[ScoringWeights] = None) -> float:
    weights = weights or SCORING_WEIGHTS
    # 반복 등장은 보상하되 짧은 글에서 한두 단어가 독식하지 않도록 전체 후보 수로 정규화
    tf = math.log(1 + frequency) / math.log(1 + total) if total > 0 else 0.0
    return (
        tf
        * position_factor(token.position, weights)
        * length_factor(token.text, language, weights)
        * specificity_factor(token.text, language, weights)
    )


def score_candidates(tokens: List[Token], language: str,
                     weights: Optional[ScoringWeights] = None) -> List[Candidate]:
    """Score each distinct (lower-cased) token and return candidates best-first.

    Duplicates collapse onto their earliest position; ties keep the order of
    first appearance so the ranking stays deterministic.
    """
    weights = weights or SCORING_WEIGHTS
    freq = term_frequencies(tokens)
    total = len(tokens)

    unique: Dict[str, Token] = {}
    for token in tokens:
        key = token.text.lower()
        seen = unique.get(key)
        if seen is None or token.position < seen.position:
            unique[key] = token

    candidates = [
        Candidate(
            text=token.text,
            normalized_key=key,
            score=score_token(token, freq.get(key, 1), total, language, weights),
            position=token.position,
            frequency=freq.get(key, 1),
        )
        for key, token in unique.items()
    ]
    candidates.sort(key=lambda c: c.score, reverse=True)
    return candidates
