from __future__ import annotations

from typing import Any

import pytest

LUK_PAYLOAD: dict[str, Any] = {
    "responseStatus": 200,
    "responseDetails": "",
    "responseData": {"translatedText": "onion", "match": 1},
    "matches": [
        {"segment": "лук", "translation": "onion", "quality": "100", "usage-count": 5, "subject": "All"},
        {"segment": "лук", "translation": "bow", "quality": 74, "usage-count": "2", "subject": "Sports"},
        {"segment": "лук", "translation": "Onion", "quality": "80", "usage-count": 1},
        {"segment": "лук", "translation": "leek", "quality": "30", "usage-count": 9},
        {"segment": "зеленый лук", "translation": "green onion", "quality": "", "usage-count": 0},
    ],
}


class FakeClient:
    """Stands in for HttpClient, returning a canned response."""

    def __init__(self, response: dict[str, Any] | None = None) -> None:
        self.response: dict[str, Any] = response if response is not None else {"ok": True, "data": LUK_PAYLOAD}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get_request(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        self.calls.append((url, dict(params or {})))
        return self.response


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point configuration at an empty temp location for every test."""
    config_file = tmp_path / "config.json"
    monkeypatch.setenv("WIKTIONARY_DICTIONARY_CONFIG", str(config_file))
    return config_file


@pytest.fixture
def luk_payload() -> dict[str, Any]:
    return LUK_PAYLOAD


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def make_client():
    """Factory for FakeClient instances with a given response."""

    def _make(response: dict[str, Any] | None = None) -> FakeClient:
        return FakeClient(response)

    return _make
