"""Protocols for registry notifications.

These protocols define the interface for event sinks, allowing different
implementations (in-memory log, message queue, ledger log emitter).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from vaultgate.events.models import RegistryEvent


@runtime_checkable
class EventSink(Protocol):
    """Protocol for receiving registry notifications.

    Usage:
        log = InMemoryEventLog()
        registry = AccessRegistry(admin, event_sink=log)
        registry.set_membership(user, True, caller=admin)
        log.events  # [MembershipChanged(sequence=1, ...)]

    Note:
        emit() is called inside the mutation. If it raises, the registry
        rolls the mutation back and re-raises, so a sink never observes an
        event for a state change that did not happen.
    """

    def emit(self, event: RegistryEvent) -> None:
        """Publish one committed registry event.

        Args:
            event: The notification to publish.
        """
        ...
