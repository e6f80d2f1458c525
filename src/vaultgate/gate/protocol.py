"""Capability-provider protocol consumed by the host vault.

The host vault holds a reference to something implementing this protocol and
asks it before every asset or share movement. A False return rejects that one
movement; an exception would brick every movement, so implementations must
never raise.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CapabilityProvider(Protocol):
    """The four checks a host vault may call. All total, all side-effect free."""

    def can_send_assets(self, account: Any) -> bool:
        """May account pay assets into the vault?"""
        ...

    def can_receive_shares(self, account: Any) -> bool:
        """May account hold newly minted or transferred shares?"""
        ...

    def can_send_shares(self, account: Any) -> bool:
        """May account burn or transfer away shares?"""
        ...

    def can_receive_assets(self, account: Any) -> bool:
        """May account receive withdrawn assets?"""
        ...
