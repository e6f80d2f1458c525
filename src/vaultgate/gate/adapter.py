"""GateAdapter: the allowlist exposed as a capability provider.

Usage:
    registry = AccessRegistry(admin)
    gate = GateAdapter(registry)

    gate.can_send_assets(payer)           # False until admin allows payer
    gate.check(GateRole.RECEIVE_SHARES, beneficiary)
"""

from __future__ import annotations

from typing import Any

from vaultgate.gate.models import CapabilityCheck, GateRole
from vaultgate.registry import AccessRegistry


class GateAdapter:
    """Answers the host vault's four capability questions from one registry.

    Every role resolves to the same membership read, so the four answers for an
    account always agree. Nothing here raises, writes, or calls out: denial is
    a False return.

    Args:
        registry: Registry whose membership is consulted.
    """

    def __init__(self, registry: AccessRegistry):
        self._registry = registry

    @property
    def registry(self) -> AccessRegistry:
        """Registry backing this gate."""
        return self._registry

    def can_send_assets(self, account: Any) -> bool:
        return self._registry.is_member(account)

    def can_receive_shares(self, account: Any) -> bool:
        return self._registry.is_member(account)

    def can_send_shares(self, account: Any) -> bool:
        return self._registry.is_member(account)

    def can_receive_assets(self, account: Any) -> bool:
        return self._registry.is_member(account)

    def check(self, role: Any, account: Any) -> bool:
        """Answer one capability question by role.

        Args:
            role: GateRole to check. Anything else is denied.
            account: Identity being tested.

        Returns:
            True if the account holds the capability.
        """
        if not isinstance(role, GateRole):
            return False
        return self._registry.is_member(account)

    def evaluate(self, request: CapabilityCheck) -> bool:
        """Answer a CapabilityCheck request. Unreadable requests are denied."""
        try:
            role = request.role
            account = request.account
        except Exception:
            return False
        return self.check(role, account)

    def __repr__(self) -> str:
        return f"GateAdapter(registry={self._registry!r})"
