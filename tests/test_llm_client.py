from types import SimpleNamespace

from backend.utils import llm_client
from backend.utils.llm_client import parse_json_block, request_json


def _fake_client(create):
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def _reply(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_parse_json_block() -> None:
    assert parse_json_block('결과입니다 {"summary": "회의", "keywords": []} 끝') == {"summary": "회의", "keywords": []}
    assert parse_json_block("") is None
    assert parse_json_block("no json here") is None
    assert parse_json_block("{broken") is None
    assert parse_json_block("{not: valid}") is None


def test_request_json_returns_parsed_reply(monkeypatch) -> None:
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        return _reply('```json\n{"summary": "s", "primaryEmotionKey": "happy"}\n```')

    monkeypatch.setattr(llm_client, "get_client", lambda: _fake_client(create))
    assert request_json("prompt") == {"summary": "s", "primaryEmotionKey": "happy"}
    assert len(calls) == 1
    assert calls[0]["messages"] == [{"role": "user", "content": "prompt"}]


def test_request_json_retries_then_gives_up(monkeypatch) -> None:
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        raise RuntimeError("network down")

    monkeypatch.setattr(llm_client, "get_client", lambda: _fake_client(create))
    assert request_json("prompt") is None
    assert len(calls) == 2


def test_request_json_without_json_in_reply(monkeypatch) -> None:
    monkeypatch.setattr(llm_client, "get_client", lambda: _fake_client(lambda **kwargs: _reply("죄송합니다.")))
    assert request_json("prompt") is None
