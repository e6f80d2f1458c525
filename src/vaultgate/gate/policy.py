"""Deployment policy: which capability roles the host vault consults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vaultgate.gate.models import GateRole


@dataclass(frozen=True, slots=True)
class GatePolicy:
    """Roles wired into the host vault.

    The defaults gate deposits (payer and share holder) but leave withdrawals
    open, so an account removed from the allowlist can still exit.

    Attributes:
        send_assets: Consult can_send_assets on deposit payers.
        receive_shares: Consult can_receive_shares on share recipients.
        send_shares: Consult can_send_shares on share owners.
        receive_assets: Consult can_receive_assets on withdrawal receivers.
    """

    send_assets: bool = True
    receive_shares: bool = True
    send_shares: bool = False
    receive_assets: bool = False

    def is_enabled(self, role: GateRole) -> bool:
        """Check if the host vault consults the gate for role."""
        if not isinstance(role, GateRole):
            return False
        return bool(getattr(self, role.value))

    def enabled_roles(self) -> frozenset[GateRole]:
        """All roles the host vault consults."""
        return frozenset(role for role in GateRole if self.is_enabled(role))

    @classmethod
    def from_settings(cls, settings: Any) -> GatePolicy:
        """Build from a GateSettings instance (or anything with gate_* flags)."""
        return cls(
            send_assets=settings.gate_send_assets,
            receive_shares=settings.gate_receive_shares,
            send_shares=settings.gate_send_shares,
            receive_assets=settings.gate_receive_assets,
        )

    @classmethod
    def all_roles(cls) -> GatePolicy:
        """Policy consulting every role, including withdrawals."""
        return cls(send_assets=True, receive_shares=True, send_shares=True, receive_assets=True)
