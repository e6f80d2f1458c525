"""AccessRegistry: the allowlist and its single administrator.

Usage:
    registry = AccessRegistry(admin)
    registry.set_membership(user, True, caller=admin)
    registry.is_member(user)  # True

    registry.transfer_administrator(new_admin, caller=admin)
    registry.set_membership(user, False, caller=admin)  # raises Unauthorized
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import Any

from vaultgate.core.errors import InvalidAdministrator, Unauthorized
from vaultgate.core.identity import Address, coerce_address, to_address
from vaultgate.events import (
    AdministratorChanged,
    EventSink,
    InMemoryEventLog,
    MembershipChanged,
    RegistryEvent,
)
from vaultgate.registry.models import RegistrySnapshot
from vaultgate.storage import LocalMembershipStore, MembershipStore

logger = logging.getLogger(__name__)

# Retention of the default event log; pass an explicit sink to keep more
DEFAULT_EVENT_RETENTION = 10_000


def _parse_administrator(raw: Any) -> Address:
    """Parse an administrator identity, rejecting null, zero and non-addresses."""
    address = coerce_address(raw)
    if address is None or address.is_zero():
        raise InvalidAdministrator(f"Administrator must be a non-zero address, got {raw!r}")
    return address


class AccessRegistry:
    """Allowlist with a single administrator.

    All mutations are serialized and all-or-nothing: authorization is checked
    first, and if publishing the notification fails the write is undone.
    Reads never lock and never write.

    Args:
        administrator: Initial administrator. Must be a non-zero address.
        store: Membership backend (default: fresh LocalMembershipStore).
        event_sink: Receiver of notifications (default: InMemoryEventLog keeping
            the most recent DEFAULT_EVENT_RETENTION events).

    Raises:
        InvalidAdministrator: If administrator is null, zero, or not an address.
    """

    def __init__(
        self,
        administrator: Any,
        *,
        store: MembershipStore | None = None,
        event_sink: EventSink | None = None,
    ):
        self._administrator = _parse_administrator(administrator)
        self._store: MembershipStore = store if store is not None else LocalMembershipStore()
        self._sink: EventSink = (
            event_sink
            if event_sink is not None
            else InMemoryEventLog(max_events=DEFAULT_EVENT_RETENTION)
        )
        self._sequence = 0
        self._lock = threading.RLock()

    @property
    def administrator(self) -> Address:
        """Current administrator identity."""
        return self._administrator

    # Name used by the deployed read surface (admin() -> address)
    admin = administrator

    @property
    def events(self) -> EventSink:
        """Sink receiving this registry's notifications."""
        return self._sink

    @property
    def sequence(self) -> int:
        """Number of committed mutations so far."""
        return self._sequence

    def _require_administrator(self, caller: Any, operation: str) -> None:
        if coerce_address(caller) != self._administrator:
            logger.warning("Rejected %s from non-administrator %r", operation, caller)
            raise Unauthorized(caller, operation)

    def _publish(self, event: RegistryEvent) -> None:
        self._sink.emit(event)
        self._sequence = event.sequence

    def set_membership(self, account: Any, allowed: bool, *, caller: Any) -> MembershipChanged:
        """Allow or deny one account.

        Writes unconditionally: repeating the current value still emits a
        notification. Any address is accepted, including zero and the
        administrator's own.

        Args:
            account: Account to write.
            allowed: New membership value.
            caller: Identity performing the call.

        Returns:
            The emitted MembershipChanged event.

        Raises:
            Unauthorized: If caller is not the administrator.
            ValueError: If account is not an address.
        """
        with self._lock:
            self._require_administrator(caller, "set_membership")
            address = to_address(account)
            value = bool(allowed)

            existed = self._store.contains(address)
            previous = self._store.get(address)
            self._store.put(address, value)
            event = MembershipChanged(self._sequence + 1, address, value)
            try:
                self._publish(event)
            except Exception:
                if existed:
                    self._store.put(address, previous)
                else:
                    self._store.discard(address)
                raise

        logger.info("Membership of %s set to %s", address.short(), value)
        return event

    def transfer_administrator(self, new_administrator: Any, *, caller: Any) -> AdministratorChanged:
        """Hand the administrator role to a new identity in a single step.

        The previous administrator loses mutation rights immediately.

        Args:
            new_administrator: Identity receiving the role.
            caller: Identity performing the call.

        Returns:
            The emitted AdministratorChanged event.

        Raises:
            Unauthorized: If caller is not the administrator.
            InvalidAdministrator: If new_administrator is null, zero, or not an address.
        """
        with self._lock:
            self._require_administrator(caller, "transfer_administrator")
            current = _parse_administrator(new_administrator)
            previous = self._administrator

            self._administrator = current
            event = AdministratorChanged(self._sequence + 1, previous, current)
            try:
                self._publish(event)
            except Exception:
                self._administrator = previous
                raise

        logger.info("Administrator transferred from %s to %s", previous.short(), current.short())
        return event

    def is_member(self, account: Any) -> bool:
        """Current membership of account. Never raises, never mutates.

        Anything that is not an address is simply not a member.
        """
        address = coerce_address(account)
        if address is None:
            return False
        return self._store.get(address)

    def allowed(self, account: Any) -> bool:
        """Alias of is_member() matching the deployed read surface."""
        return self.is_member(account)

    def members(self) -> Iterator[tuple[Address, bool]]:
        """Iterate explicitly written (account, allowed) entries."""
        return self._store.items()

    def snapshot(self) -> RegistrySnapshot:
        """Capture administrator and membership for persistence or reconciliation."""
        with self._lock:
            return RegistrySnapshot(
                administrator=str(self._administrator),
                members={str(account): allowed for account, allowed in self._store.items()},
            )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: RegistrySnapshot,
        *,
        store: MembershipStore | None = None,
        event_sink: EventSink | None = None,
    ) -> AccessRegistry:
        """Rebuild a registry from persisted state.

        Restoring is not a mutation: no notifications are emitted.

        Raises:
            InvalidAdministrator: If the snapshot's administrator is zero.
        """
        registry = cls(snapshot.administrator, store=store, event_sink=event_sink)
        for account, allowed in snapshot.members.items():
            registry._store.put(to_address(account), allowed)
        logger.info(
            "Restored registry with %d entries, administrator %s",
            len(snapshot.members),
            registry.administrator.short(),
        )
        return registry

    @classmethod
    def from_settings(
        cls,
        settings: Any,
        *,
        store: MembershipStore | None = None,
        event_sink: EventSink | None = None,
    ) -> AccessRegistry:
        """Create a registry administered by settings.administrator.

        Args:
            settings: GateSettings instance (or anything with an administrator).

        Raises:
            InvalidAdministrator: If no administrator is configured.
        """
        return cls(settings.administrator, store=store, event_sink=event_sink)

    def __repr__(self) -> str:
        return (
            f"AccessRegistry(administrator={self._administrator}, "
            f"entries={len(self._store)}, sequence={self._sequence})"
        )
