"""Errors raised while fetching and decoding GitHub activity."""

from __future__ import annotations


class ActivityFetchError(RuntimeError):
    """Base class for failures raised by an activity fetcher."""


class ValidationError(ActivityFetchError):
    """Raised when fetch input is rejected before any network call."""

    @classmethod
    def empty_username(cls) -> ValidationError:
        """Return an error for an empty username."""
        return cls("username cannot be empty")

    @classmethod
    def invalid_username(cls, username: str, exc: BaseException) -> ValidationError:
        """Return an error for a username that cannot form a request URL."""
        return cls(f"invalid username {username!r}: {exc}")


class NetworkError(ActivityFetchError):
    """Raised when the GitHub API cannot be reached."""

    @classmethod
    def transport(cls, exc: BaseException) -> NetworkError:
        """Return an error wrapping a transport-level failure."""
        return cls(f"failed to fetch data from GitHub: {exc}")


class HTTPStatusError(ActivityFetchError):
    """Raised when GitHub responds with a non-success status."""

    def __init__(self, message: str, *, status_code: int) -> None:
        """Initialise with a message and the HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def status(cls, status_code: int) -> HTTPStatusError:
        """Return an error for non-2xx HTTP responses."""
        return cls(
            f"GitHub API returned status: {status_code}", status_code=status_code
        )


class DecodeError(ActivityFetchError):
    """Raised when a response body is not a JSON array of events."""

    @classmethod
    def malformed(cls, exc: BaseException) -> DecodeError:
        """Return an error wrapping the underlying decode failure."""
        return cls(f"failed to decode response: {exc}")


class ConfigError(RuntimeError):
    """Raised when environment configuration is invalid."""

    @classmethod
    def invalid_timeout(cls, env_var: str, raw: str) -> ConfigError:
        """Return an error for a timeout that is not a positive number."""
        return cls(f"{env_var} must be a positive number, got: {raw!r}")
