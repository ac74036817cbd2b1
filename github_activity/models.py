"""Typed models for GitHub public activity events."""

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec

AwareDatetime = typ.Annotated[dt.datetime, msgspec.Meta(tz=True)]


class EventRepository(msgspec.Struct, frozen=True, kw_only=True):
    """Repository an event occurred in.

    Attributes
    ----------
    name : str
        GitHub-style ``owner/name`` identifier.

    """

    name: str


class ActivityEvent(msgspec.Struct, frozen=True, kw_only=True):
    """One entry from a user's public events feed.

    Fields not listed here (``id``, ``actor``, ``payload`` and so on) are
    ignored when decoding.

    Attributes
    ----------
    type : str
        Event type tag such as ``PushEvent``. Accepted verbatim.
    created_at : datetime.datetime
        Timezone-aware creation timestamp.
    repo : EventRepository
        Repository the event belongs to.

    """

    type: str
    created_at: AwareDatetime
    repo: EventRepository

    @property
    def repository_name(self) -> str:
        """Return the ``owner/name`` of the event's repository."""
        return self.repo.name

    @property
    def created_at_utc(self) -> dt.datetime:
        """Return ``created_at`` converted to UTC."""
        return self.created_at.astimezone(dt.UTC)


_EVENTS_DECODER = msgspec.json.Decoder(list[ActivityEvent])


def decode_events(body: bytes) -> list[ActivityEvent]:
    """Decode a JSON array of events, preserving order.

    Raises
    ------
    msgspec.DecodeError
        If ``body`` is not valid JSON or does not match the event shape.
        Shape mismatches raise the :class:`msgspec.ValidationError` subclass.

    """
    return _EVENTS_DECODER.decode(body)
