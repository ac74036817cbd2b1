"""Render a user's recent activity as plain text."""

from __future__ import annotations

import sys
import typing as typ

from .errors import ActivityFetchError
from .logging import get_logger, log_debug

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .client import ActivityFetcher
    from .models import ActivityEvent

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_event(event: ActivityEvent) -> str:
    """Return the report line for a single event.

    >>> import datetime as dt
    >>> from github_activity.models import ActivityEvent, EventRepository
    >>> format_event(
    ...     ActivityEvent(
    ...         type="PushEvent",
    ...         created_at=dt.datetime(2023, 10, 10, 14, 12, 15, tzinfo=dt.UTC),
    ...         repo=EventRepository(name="example/repo1"),
    ...     )
    ... )
    '- PushEvent on example/repo1 at 2023-10-10 14:12:15'

    """
    timestamp = event.created_at_utc.strftime(TIMESTAMP_FORMAT)
    return f"- {event.type} on {event.repository_name} at {timestamp}"


def render_activity(
    username: str, events: cabc.Iterable[ActivityEvent]
) -> list[str]:
    """Return the header line followed by one line per event."""
    return [
        f"Recent activity for user {username}:",
        *(format_event(event) for event in events),
    ]


def print_recent_activity(
    username: str,
    fetcher: ActivityFetcher,
    *,
    out: typ.TextIO | None = None,
    err: typ.TextIO | None = None,
) -> None:
    """Fetch activity for ``username`` and print the report.

    Parameters
    ----------
    username : str
        GitHub login whose public events are reported.
    fetcher : ActivityFetcher
        Source of the user's events.
    out : typing.TextIO | None, optional
        Destination for the report. Defaults to ``sys.stdout``.
    err : typing.TextIO | None, optional
        Destination for the failure message. Defaults to ``sys.stderr``.

    Raises
    ------
    SystemExit
        With status 1 when the fetch fails. Nothing is written to ``out``.

    """
    try:
        events = fetcher.fetch(username)
    except ActivityFetchError as exc:
        log_debug(logger, "Error fetching activity for %r", username, exc_info=exc)
        print(f"Error fetching activity: {exc}", file=err or sys.stderr)
        raise SystemExit(1) from exc

    stream = out or sys.stdout
    for line in render_activity(username, events):
        print(line, file=stream)


__all__ = ["format_event", "print_recent_activity", "render_activity"]
