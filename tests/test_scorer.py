import math

import pytest

from backend.config import ScoringWeights, load_scoring_weights
from backend.services.hashtag.models import Token
from backend.services.hashtag.scorer import (
    length_factor,
    position_factor,
    score_candidates,
    score_token,
    specificity_factor,
    term_frequencies,
)

WEIGHTS = ScoringWeights()


def test_term_frequencies_are_case_insensitive() -> None:
    tokens = [Token("Meeting", 0.0), Token("meeting", 0.5), Token("scope", 0.9)]
    assert term_frequencies(tokens) == {"meeting": 2, "scope": 1}


@pytest.mark.parametrize("position, expected", [(0.0, 1.2), (0.1, 1.2), (0.5, 1.0), (0.9, 1.2)])
def test_position_factor_rewards_edges(position: float, expected: float) -> None:
    assert position_factor(position, WEIGHTS) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text, language, expected",
    [
        ("회의", "ko", 1.2),
        ("가나다라마바사", "ko", 0.8),
        ("가", "ko", 0.6),
        ("meet", "en", 1.2),
        ("run", "en", 0.7),
        ("internationalization", "en", 0.8),
    ],
)
def test_length_factor_bands(text: str, language: str, expected: float) -> None:
    assert length_factor(text, language, WEIGHTS) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text, language, expected",
    [
        ("프로젝트", "ko", 1.3),
        ("회의", "ko", 1.0),
        ("team meeting", "en", 1.3),
        ("onboarding", "en", 1.3),
        ("flow", "en", 1.0),
    ],
)
def test_specificity_factor(text: str, language: str, expected: float) -> None:
    assert specificity_factor(text, language, WEIGHTS) == pytest.approx(expected)


def test_score_token_single_candidate() -> None:
    # tf = 1, middle position, in-band length, not compound
    assert score_token(Token("회의", 0.5), 1, 1, "ko", WEIGHTS) == pytest.approx(1.2)


def test_score_token_with_no_tokens_is_zero() -> None:
    assert score_token(Token("회의", 0.5), 1, 0, "ko", WEIGHTS) == 0.0


def test_score_candidates_merges_duplicates_and_sorts() -> None:
    tokens = [Token("회의", 0.5), Token("일정", 0.6), Token("회의", 0.1)]
    candidates = score_candidates(tokens, "ko", WEIGHTS)

    assert [c.text for c in candidates] == ["회의", "일정"]
    meeting, schedule = candidates
    assert meeting.frequency == 2
    assert meeting.position == pytest.approx(0.1)
    assert meeting.score == pytest.approx(math.log(3) / math.log(4) * 1.2 * 1.2)
    assert schedule.score == pytest.approx(0.5 * 1.2)


def test_score_candidates_ties_keep_first_appearance() -> None:
    tokens = [Token("회의", 0.5), Token("일정", 0.5), Token("범위", 0.5)]
    assert [c.text for c in score_candidates(tokens, "ko", WEIGHTS)] == ["회의", "일정", "범위"]


def test_custom_weights_change_ranking() -> None:
    tokens = [Token("회의", 0.5), Token("일정", 0.0)]
    flat = ScoringWeights(edge_position_bonus=1.0)
    assert [c.text for c in score_candidates(tokens, "ko", WEIGHTS)] == ["일정", "회의"]
    flat_scored = score_candidates(tokens, "ko", flat)
    assert [c.text for c in flat_scored] == ["회의", "일정"]
    assert flat_scored[0].score == pytest.approx(flat_scored[1].score)


def test_load_scoring_weights_override() -> None:
    weights = load_scoring_weights('{"specificity_bonus": 2.0}')
    assert weights.specificity_bonus == 2.0
    assert weights.edge_position_bonus == 1.2


@pytest.mark.parametrize("raw", ["", "not json", '{"specificity_bonus": "abc"}', "[1, 2]"])
def test_load_scoring_weights_falls_back_to_defaults(raw: str) -> None:
    assert load_scoring_weights(raw) == ScoringWeights()
