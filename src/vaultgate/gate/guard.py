"""Host-side wiring of a capability provider into vault operations.

The host vault decides which identity to test for each role. VaultGuard
encodes that mapping once, together with the policy of which roles are wired.

Usage:
    guard = VaultGuard(GateAdapter(registry))
    if not guard.authorize_deposit(payer=sender, beneficiary=onBehalf):
        ...  # reject the deposit

    guard = VaultGuard(None)  # no gate installed: everything passes
"""

from __future__ import annotations

from typing import Any

from vaultgate.gate.models import GateRole
from vaultgate.gate.policy import GatePolicy
from vaultgate.gate.protocol import CapabilityProvider


class VaultGuard:
    """Authorizes vault operations against an optional capability provider.

    Roles disabled by the policy are never consulted and always pass.
    With no provider installed, every operation passes.

    Args:
        provider: Capability provider, or None for an ungated vault.
        policy: Roles to consult (default: GatePolicy()).
    """

    def __init__(self, provider: CapabilityProvider | None, policy: GatePolicy | None = None):
        self._provider = provider
        self._policy = policy if policy is not None else GatePolicy()

    @property
    def policy(self) -> GatePolicy:
        return self._policy

    @property
    def provider(self) -> CapabilityProvider | None:
        return self._provider

    def check(self, role: Any, account: Any) -> bool:
        """Authorize one role for one account under the policy.

        Anything that is not a GateRole is denied, gated or not.
        """
        if not isinstance(role, GateRole):
            return False
        if self._provider is None or not self._policy.is_enabled(role):
            return True
        if role is GateRole.SEND_ASSETS:
            return self._provider.can_send_assets(account)
        if role is GateRole.RECEIVE_SHARES:
            return self._provider.can_receive_shares(account)
        if role is GateRole.SEND_SHARES:
            return self._provider.can_send_shares(account)
        if role is GateRole.RECEIVE_ASSETS:
            return self._provider.can_receive_assets(account)
        return False

    def authorize_deposit(self, payer: Any, beneficiary: Any) -> bool:
        """Deposit or mint: payer funds it, beneficiary receives the shares."""
        return self.check(GateRole.SEND_ASSETS, payer) and self.check(
            GateRole.RECEIVE_SHARES, beneficiary
        )

    def authorize_transfer(self, sender: Any, destination: Any) -> bool:
        """Share transfer between two holders."""
        return self.check(GateRole.SEND_SHARES, sender) and self.check(
            GateRole.RECEIVE_SHARES, destination
        )

    def authorize_fee_mint(self, fee_recipient: Any) -> bool:
        """Fee accrual minting shares to the fee recipient."""
        return self.check(GateRole.RECEIVE_SHARES, fee_recipient)

    def authorize_withdrawal(self, owner: Any, receiver: Any) -> bool:
        """Withdraw or redeem: owner burns shares, receiver gets the assets."""
        return self.check(GateRole.SEND_SHARES, owner) and self.check(
            GateRole.RECEIVE_ASSETS, receiver
        )
