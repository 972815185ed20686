import json

import pytest

from backend.services.hashtag.dictionaries import (
    DictionaryFile,
    build_dictionary,
    get_dictionary,
    load_dictionary_file,
)
from backend.services.hashtag.models import Category


def test_dictionaries_are_versioned(ko_dictionary, en_dictionary) -> None:
    assert ko_dictionary.language == "ko"
    assert en_dictionary.language == "en"
    assert ko_dictionary.version == en_dictionary.version == "2025.2"


def test_dictionary_is_loaded_once() -> None:
    assert get_dictionary("ko") is get_dictionary("ko")


def test_unsupported_language_raises() -> None:
    with pytest.raises(ValueError):
        get_dictionary("fr")


def test_korean_exact_lookup(ko_dictionary) -> None:
    assert ko_dictionary.lookup("미팅") == "회의"
    assert ko_dictionary.lookup("회의") == "회의"
    assert ko_dictionary.lookup("일") == "업무"


def test_korean_containment_lookup(ko_dictionary) -> None:
    assert ko_dictionary.lookup("팀미팅") == "회의"
    assert ko_dictionary.lookup("범위조정했다") == "조정"


def test_single_character_alias_is_exact_only(ko_dictionary) -> None:
    assert ko_dictionary.lookup("일정") is None


def test_english_lookup_is_case_insensitive(en_dictionary) -> None:
    assert en_dictionary.lookup("Team Meeting") == "meeting"
    assert en_dictionary.lookup("bugs") == "problem"


def test_english_containment_needs_whole_words(en_dictionary) -> None:
    assert en_dictionary.lookup("weekly team meeting notes") == "meeting"
    assert en_dictionary.lookup("ui") == "design"
    assert en_dictionary.lookup("build") is None


def test_blocklists_are_lowercased(en_dictionary) -> None:
    assert "happy" in en_dictionary.emotion_blocklist
    assert "john doe" in en_dictionary.blocklist


def test_category_indicators_are_ordered(ko_dictionary) -> None:
    order = [category for category, _ in ko_dictionary.category_indicators]
    assert order == [Category.EVENT, Category.OUTCOME, Category.TOPIC]


def test_first_canonical_wins_alias_collisions() -> None:
    data = DictionaryFile(
        language="en",
        version="test",
        canonical={"workout": ["fitness"], "health": ["fitness", "wellness"]},
    )
    dictionary = build_dictionary(data)
    assert dictionary.lookup("fitness") == "workout"
    assert dictionary.lookup("wellness") == "health"


def test_canonical_beats_alias_of_another_entry() -> None:
    data = DictionaryFile(language="en", version="test", canonical={"plan": ["work"], "work": ["job"]})
    assert build_dictionary(data).lookup("work") == "work"


def test_longest_alias_wins_containment() -> None:
    data = DictionaryFile(language="ko", version="test", canonical={"일정": ["일정표"], "조정": ["일정조정"]})
    assert build_dictionary(data).lookup("주간일정조정회의") == "조정"


def test_load_dictionary_file(tmp_path) -> None:
    path = tmp_path / "ko.json"
    path.write_text(json.dumps({
        "language": "ko",
        "version": "custom-1",
        "canonical": {"산책": ["걷기"]},
        "general_blocklist": ["하루"],
    }, ensure_ascii=False), encoding="utf-8")

    dictionary = load_dictionary_file(path)
    assert dictionary.version == "custom-1"
    assert dictionary.lookup("걷기") == "산책"
    assert dictionary.general_blocklist == frozenset({"하루"})
