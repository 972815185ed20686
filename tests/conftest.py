from typing import Callable

import pytest

from backend.services.hashtag.dictionaries import HashtagDictionary, get_dictionary
from backend.services.hashtag.models import Candidate, Category


@pytest.fixture
def ko_dictionary() -> HashtagDictionary:
    return get_dictionary("ko")


@pytest.fixture
def en_dictionary() -> HashtagDictionary:
    return get_dictionary("en")


@pytest.fixture
def make_candidate() -> Callable[..., Candidate]:
    def _make(text: str, score: float, category: Category = Category.UNKNOWN, position: float = 0.5) -> Candidate:
        return Candidate(
            text=text,
            normalized_key=text.lower().replace(" ", ""),
            score=score,
            position=position,
            category=category,
        )

    return _make
