"""Registry notifications: event records, the sink protocol and an in-memory log.

Usage:
    from vaultgate.events import InMemoryEventLog, MembershipChanged

    log = InMemoryEventLog()
    registry = AccessRegistry(admin, event_sink=log)
"""

from vaultgate.events.memory import InMemoryEventLog
from vaultgate.events.models import (
    AdministratorChanged,
    MembershipChanged,
    RegistryEvent,
    event_from_dict,
)
from vaultgate.events.protocol import EventSink

__all__ = [
    "EventSink",
    "InMemoryEventLog",
    "MembershipChanged",
    "AdministratorChanged",
    "RegistryEvent",
    "event_from_dict",
]
