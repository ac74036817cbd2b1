"""Fetch and print a GitHub user's recent public activity."""

from __future__ import annotations

from .client import ActivityFetcher, GitHubEventsFetcher
from .config import FetcherConfig
from .errors import (
    ActivityFetchError,
    ConfigError,
    DecodeError,
    HTTPStatusError,
    NetworkError,
    ValidationError,
)
from .models import ActivityEvent, EventRepository, decode_events
from .printer import format_event, print_recent_activity, render_activity

__all__ = [
    "ActivityEvent",
    "ActivityFetchError",
    "ActivityFetcher",
    "ConfigError",
    "DecodeError",
    "EventRepository",
    "FetcherConfig",
    "GitHubEventsFetcher",
    "HTTPStatusError",
    "NetworkError",
    "ValidationError",
    "decode_events",
    "format_event",
    "print_recent_activity",
    "render_activity",
]
