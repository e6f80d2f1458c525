"""Notification records emitted by the registry.

These models serialize to JSON-compatible dicts so external tooling
(indexers, dashboards, reconciliation scripts) can consume them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vaultgate.core.identity import Address, to_address


@dataclass(frozen=True, slots=True)
class MembershipChanged:
    """An account's membership was set by the administrator.

    Emitted on every successful set_membership, including repeats of the
    current value.

    Attributes:
        sequence: Position in the registry's total order of mutations (1-based).
        account: Account whose membership was written.
        allowed: Value written.
    """

    sequence: int
    account: Address
    allowed: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "event": "membership_changed",
            "sequence": self.sequence,
            "account": str(self.account),
            "allowed": self.allowed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MembershipChanged:
        """Create from dictionary (for deserialization)."""
        return cls(
            sequence=data["sequence"],
            account=to_address(data["account"]),
            allowed=bool(data["allowed"]),
        )


@dataclass(frozen=True, slots=True)
class AdministratorChanged:
    """The administrator role moved to a new identity.

    Attributes:
        sequence: Position in the registry's total order of mutations (1-based).
        previous: Administrator before the transfer.
        current: Administrator after the transfer.
    """

    sequence: int
    previous: Address
    current: Address

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "event": "administrator_changed",
            "sequence": self.sequence,
            "previous": str(self.previous),
            "current": str(self.current),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AdministratorChanged:
        """Create from dictionary (for deserialization)."""
        return cls(
            sequence=data["sequence"],
            previous=to_address(data["previous"]),
            current=to_address(data["current"]),
        )


RegistryEvent = MembershipChanged | AdministratorChanged

_EVENT_TYPES: dict[str, type[MembershipChanged] | type[AdministratorChanged]] = {
    "membership_changed": MembershipChanged,
    "administrator_changed": AdministratorChanged,
}


def event_from_dict(data: dict[str, Any]) -> RegistryEvent:
    """Deserialize any registry event using its "event" discriminator.

    Raises:
        ValueError: If the discriminator is missing or unknown.
    """
    kind = data.get("event")
    if kind not in _EVENT_TYPES:
        raise ValueError(f"Unknown registry event type: {kind!r}")
    return _EVENT_TYPES[kind].from_dict(data)
