"""Tokenization layer: XML bytes to start/end element events."""

from .events import (
    EventKind,
    MarkupEvent,
    events_from_bytes,
    iter_markup_events,
    local_name,
)

__all__ = [
    "EventKind",
    "MarkupEvent",
    "events_from_bytes",
    "iter_markup_events",
    "local_name",
]
