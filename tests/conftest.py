"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

from tests.helpers.github_api import FakeEventsAPI

_ENV_VARS = (
    "GITHUB_ACTIVITY_API_URL",
    "GITHUB_ACTIVITY_TIMEOUT_S",
    "GITHUB_ACTIVITY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from ``GITHUB_ACTIVITY_*`` variables in the caller's shell."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def events_api() -> FakeEventsAPI:
    """Return a fake events endpoint that serves an empty feed by default."""
    return FakeEventsAPI()
