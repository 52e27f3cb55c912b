from __future__ import annotations

from typing import Any

import pytest

from wiktionary_dictionary.providers import PROVIDERS, MymemoryProvider
from wiktionary_dictionary.providers.mymemory import BASE_URL


def test_translates_ambiguous_word(fake_client) -> None:
    provider = MymemoryProvider(client=fake_client)

    result = provider.translate("лук", "russian", "english")

    assert result.ok is True
    assert result.word == "лук"
    assert result.source_lang == "russian"
    assert result.target_lang == "english"
    assert "onion" in result.variants
    assert "bow" in result.variants
    assert result.variants.index("bow") < result.variants.index("onion")
    assert result.providers_used == ["mymemory"]
    assert result.contexts[0].quality == 100
    assert result.raw_response is not None


def test_request_uses_normalized_language_pair(fake_client) -> None:
    MymemoryProvider(client=fake_client).translate("лук", " Russian ", "EN")

    assert fake_client.calls == [(f"{BASE_URL}/get", {"q": "лук", "langpair": "ru|en"})]


def test_base_url_comes_from_config(fake_client, isolated_config) -> None:
    isolated_config.write_text('{"mymemory": {"base_url": "http://localhost:8080/"}}', encoding="utf-8")

    MymemoryProvider(client=fake_client).translate("hello", "en", "fr")

    assert fake_client.calls[0][0] == "http://localhost:8080/get"


@pytest.mark.parametrize(
    ("source", "target", "message"),
    [
        ("klingon", "english", "Unsupported source language: klingon"),
        ("english", "Elvish", "Unsupported target language: Elvish"),
    ],
)
def test_unsupported_language(fake_client, source: str, target: str, message: str) -> None:
    result = MymemoryProvider(client=fake_client).translate("hello", source, target)

    assert result.ok is False
    assert result.error == message
    assert result.provider == "mymemory"
    assert fake_client.calls == []


@pytest.mark.parametrize(
    ("word", "source", "target", "message"),
    [
        ("", "russian", "english", "Word cannot be empty"),
        (None, "russian", "english", "Word cannot be empty"),
        ("test", "  ", "english", "Source language cannot be empty"),
        ("test", "russian", "", "Target language cannot be empty"),
    ],
)
def test_empty_inputs_fail_before_request(fake_client, word: Any, source: str, target: str, message: str) -> None:
    result = MymemoryProvider(client=fake_client).translate(word, source, target)

    assert result.ok is False
    assert result.error == message
    assert fake_client.calls == []


def test_transport_failure(make_client) -> None:
    client = make_client({"ok": False, "error": "Request timeout", "details": "read timed out"})

    result = MymemoryProvider(client=client).translate("test", "english", "french")

    assert result.ok is False
    assert result.error == "API request failed: Request timeout"
    assert result.details == "read timed out"


def test_invalid_payload(make_client) -> None:
    client = make_client({"ok": True, "data": "invalid response"})

    result = MymemoryProvider(client=client).translate("test", "english", "french")

    assert result.ok is False
    assert result.error == "Invalid API response"


def test_api_error_status(make_client) -> None:
    client = make_client({"ok": True, "data": {"responseStatus": 400, "responseDetails": "Bad request"}})

    result = MymemoryProvider(client=client).translate("test", "english", "french")

    assert result.ok is False
    assert result.error == "API error: Bad request"
    assert result.provider == "mymemory"


def test_unexpected_exception_is_contained() -> None:
    class ExplodingClient:
        def get_request(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
            raise RuntimeError("boom")

    result = MymemoryProvider(client=ExplodingClient()).translate("test", "english", "french")  # type: ignore[arg-type]

    assert result.ok is False
    assert result.error == "Unexpected error: boom"


def test_provider_is_registered() -> None:
    assert PROVIDERS["mymemory"] is MymemoryProvider


def test_display_name_labels_provider(fake_client) -> None:
    provider = MymemoryProvider(client=fake_client)

    assert MymemoryProvider.display_name == "MyMemory"
    assert provider.label == "MyMemory"
