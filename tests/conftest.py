"""Shared fixtures: isolated settings and a fake ``requests`` session."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from github_activity.core.config import get_settings

CONFIG_VARS = (
    "GITHUB_API_URL",
    "GITHUB_ACTIVITY_TIMEOUT",
    "GITHUB_ACTIVITY_USER_AGENT",
    "GITHUB_ACTIVITY_LIMIT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: str = "", headers=None):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text
        self.headers = headers or {}

    def json(self) -> Any:
        if isinstance(self._json_data, Exception):
            raise self._json_data
        return self._json_data


class FakeSession:
    """Stands in for ``requests.Session``: returns a canned response or raises."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response or FakeResponse(json_data=[])
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session_factory():
    return FakeSession


@pytest.fixture
def fake_response_factory():
    return FakeResponse


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("Name or service not known")
