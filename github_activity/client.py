"""GitHub public events fetcher."""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from .config import FetcherConfig
from .errors import DecodeError, HTTPStatusError, NetworkError, ValidationError
from .logging import get_logger, log_debug, log_info
from .models import ActivityEvent, decode_events

if typ.TYPE_CHECKING:
    import types

logger = get_logger(__name__)


class ActivityFetcher(typ.Protocol):
    """Interface for retrieving a user's recent public activity."""

    def fetch(self, username: str) -> list[ActivityEvent]:
        """Return the user's events in the order the API reports them.

        Raises
        ------
        ActivityFetchError
            If the username is empty, the API is unreachable, it responds
            with a non-success status, or the body cannot be decoded.

        """
        ...


class GitHubEventsFetcher:
    """REST implementation of :class:`ActivityFetcher`.

    Each call to :meth:`fetch` issues exactly one GET request for the first
    page of ``/users/{username}/events``. Nothing is retried or cached.
    """

    def __init__(
        self,
        config: FetcherConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the fetcher with a transport configuration.

        Parameters
        ----------
        config : FetcherConfig
            API location and timeout settings.
        http_client : httpx.Client | None, optional
            Client used to issue requests. When omitted the fetcher builds
            and owns one configured from ``config``; injected clients are
            left open for the caller to close.

        """
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=config.timeout_s,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": config.user_agent,
            },
        )

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> typ.Self:
        """Return the fetcher for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources when leaving a ``with`` block."""
        self.close()

    def fetch(self, username: str) -> list[ActivityEvent]:
        """Fetch and decode the recent public events for ``username``."""
        if not username:
            raise ValidationError.empty_username()

        try:
            url = httpx.URL(self._config.events_url(username))
        except httpx.InvalidURL as exc:
            raise ValidationError.invalid_username(username, exc) from exc

        log_debug(logger, "Requesting GitHub events from %s", url)
        try:
            with self._client.stream("GET", url) as response:
                if not response.is_success:
                    log_debug(
                        logger,
                        "GitHub API returned status %d for user %s",
                        response.status_code,
                        username,
                    )
                    raise HTTPStatusError.status(response.status_code)
                body = response.read()
        except httpx.TransportError as exc:
            log_debug(logger, "Failed to reach GitHub API at %s: %s", url, exc)
            raise NetworkError.transport(exc) from exc
        except httpx.DecodingError as exc:
            log_debug(logger, "Undecodable response body for %s: %s", username, exc)
            raise DecodeError.malformed(exc) from exc

        try:
            events = decode_events(body)
        except msgspec.DecodeError as exc:
            log_debug(logger, "Undecodable events payload for %s: %s", username, exc)
            raise DecodeError.malformed(exc) from exc

        log_info(logger, "Fetched %d events for user %s", len(events), username)
        return events


__all__ = ["ActivityFetcher", "GitHubEventsFetcher"]
