import pytest

from backend.services.hashtag.engine import sanitize_keywords


def test_korean_keywords() -> None:
    result = sanitize_keywords(["회의", "#일정", "행복", "오늘", "미팅", "meeting"])
    assert result.language == "ko"
    assert result.hashtags == ["#회의", "#일정"]


def test_english_keywords() -> None:
    result = sanitize_keywords(["Team Meeting", "happy", "Onboarding", "bugs"], preferred_language="en")
    assert result.language == "en"
    assert result.hashtags == ["#meeting", "#onboarding", "#problem"]


def test_compound_alias_is_folded() -> None:
    assert sanitize_keywords(["회의", "일정", "범위조정"]).hashtags == ["#회의", "#일정", "#조정"]


def test_max_tags_truncates() -> None:
    result = sanitize_keywords(["회의", "일정", "범위", "가족"], max_tags=2)
    assert result.hashtags == ["#회의", "#일정"]


@pytest.mark.parametrize("keywords", [None, "회의", [], [1, None, "  ", "#"]])
def test_unusable_input(keywords) -> None:
    result = sanitize_keywords(keywords)
    assert result.hashtags == []
    assert result.language == "en"


def test_unusable_input_keeps_preference() -> None:
    assert sanitize_keywords(None, preferred_language="ko").language == "ko"
