"""Bounded in-memory event log."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from vaultgate.events.models import AdministratorChanged, MembershipChanged, RegistryEvent


class InMemoryEventLog:
    """EventSink keeping the most recent events in memory.

    Args:
        max_events: Upper bound on retained events (None for unbounded).
            Oldest events are evicted first.
    """

    def __init__(self, max_events: int | None = None):
        if max_events is not None and max_events <= 0:
            raise ValueError(f"max_events must be positive, got {max_events}")
        self._events: deque[RegistryEvent] = deque(maxlen=max_events)

    @property
    def max_events(self) -> int | None:
        """Retention bound, or None when unbounded."""
        return self._events.maxlen

    def emit(self, event: RegistryEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> list[RegistryEvent]:
        """Retained events, oldest first."""
        return list(self._events)

    def membership_changes(self) -> Iterator[MembershipChanged]:
        """Iterate only MembershipChanged events."""
        for event in self._events:
            if isinstance(event, MembershipChanged):
                yield event

    def administrator_changes(self) -> Iterator[AdministratorChanged]:
        """Iterate only AdministratorChanged events."""
        for event in self._events:
            if isinstance(event, AdministratorChanged):
                yield event

    def to_dicts(self) -> list[dict[str, Any]]:
        """Serialize all retained events."""
        return [event.to_dict() for event in self._events]

    def clear(self) -> None:
        """Drop all retained events."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
