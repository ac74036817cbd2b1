"""Configuration for the GitHub events fetcher.

Defaults match the public GitHub REST API with a ten second timeout:

>>> config = FetcherConfig()
>>> config.events_url("octocat")
'https://api.github.com/users/octocat/events'

Values can be overridden from the environment:

- ``GITHUB_ACTIVITY_API_URL``: Base API URL (default
  ``https://api.github.com``).
- ``GITHUB_ACTIVITY_TIMEOUT_S``: Request timeout in seconds (default ``10``).

"""

from __future__ import annotations

import dataclasses as dc
import math
import os

from .errors import ConfigError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_S = 10.0

API_URL_ENV = "GITHUB_ACTIVITY_API_URL"
TIMEOUT_ENV = "GITHUB_ACTIVITY_TIMEOUT_S"
LOG_LEVEL_ENV = "GITHUB_ACTIVITY_LOG_LEVEL"


@dc.dataclass(frozen=True, slots=True)
class FetcherConfig:
    """HTTP transport settings for :class:`GitHubEventsFetcher`.

    Attributes
    ----------
    api_url
        Base URL of the GitHub REST API. A trailing slash is ignored.
    timeout_s
        Timeout applied to the whole request, in seconds.
    user_agent
        ``User-Agent`` header sent with each request. GitHub rejects
        requests without one.

    """

    api_url: str = DEFAULT_API_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = "github-activity/0.1"

    def events_url(self, username: str) -> str:
        """Return the public events URL for ``username``."""
        return f"{self.api_url.rstrip('/')}/users/{username}/events"

    @staticmethod
    def _parse_timeout(raw: str) -> float:
        if not raw.strip():
            return DEFAULT_TIMEOUT_S
        try:
            value = float(raw)
        except ValueError as exc:
            raise ConfigError.invalid_timeout(TIMEOUT_ENV, raw) from exc
        if not math.isfinite(value) or value <= 0:
            raise ConfigError.invalid_timeout(TIMEOUT_ENV, raw)
        return value

    @classmethod
    def from_env(cls) -> FetcherConfig:
        """Build configuration from ``GITHUB_ACTIVITY_*`` environment variables.

        Raises
        ------
        ConfigError
            If ``GITHUB_ACTIVITY_TIMEOUT_S`` is not a positive number.

        """
        api_url = os.environ.get(API_URL_ENV, "").strip() or DEFAULT_API_URL
        timeout_s = cls._parse_timeout(os.environ.get(TIMEOUT_ENV, ""))
        return cls(api_url=api_url, timeout_s=timeout_s)
