"""Tests for GatePolicy and VaultGuard.

Why these tests exist:
- The default policy gates deposits but must leave withdrawals open
- Disabled roles must not be consulted at all
- Each vault operation must test the right identity for each role
"""

import pytest

from vaultgate import GateAdapter, GatePolicy, GateRole, VaultGuard


class RecordingProvider:
    """Capability provider that records every question and answers from a set."""

    def __init__(self, allowed=()):
        self.allowed = set(allowed)
        self.calls: list[tuple[GateRole, object]] = []

    def _answer(self, role, account):
        self.calls.append((role, account))
        return account in self.allowed

    def can_send_assets(self, account):
        return self._answer(GateRole.SEND_ASSETS, account)

    def can_receive_shares(self, account):
        return self._answer(GateRole.RECEIVE_SHARES, account)

    def can_send_shares(self, account):
        return self._answer(GateRole.SEND_SHARES, account)

    def can_receive_assets(self, account):
        return self._answer(GateRole.RECEIVE_ASSETS, account)


def test_default_policy_roles():
    policy = GatePolicy()
    assert policy.enabled_roles() == frozenset({GateRole.SEND_ASSETS, GateRole.RECEIVE_SHARES})


def test_all_roles_policy():
    assert GatePolicy.all_roles().enabled_roles() == frozenset(GateRole)


def test_policy_from_settings_like_object():
    class Flags:
        gate_send_assets = False
        gate_receive_shares = True
        gate_send_shares = True
        gate_receive_assets = False

    policy = GatePolicy.from_settings(Flags())
    assert policy.enabled_roles() == frozenset({GateRole.RECEIVE_SHARES, GateRole.SEND_SHARES})


def test_deposit_checks_payer_and_beneficiary():
    provider = RecordingProvider(allowed={"payer", "beneficiary"})
    guard = VaultGuard(provider)

    assert guard.authorize_deposit(payer="payer", beneficiary="beneficiary") is True
    assert provider.calls == [
        (GateRole.SEND_ASSETS, "payer"),
        (GateRole.RECEIVE_SHARES, "beneficiary"),
    ]


@pytest.mark.parametrize(
    ("allowed", "expected"),
    [({"payer"}, False), ({"beneficiary"}, False), (set(), False)],
    ids=["beneficiary_denied", "payer_denied", "both_denied"],
)
def test_deposit_denied_when_either_side_denied(allowed, expected):
    guard = VaultGuard(RecordingProvider(allowed=allowed))
    assert guard.authorize_deposit(payer="payer", beneficiary="beneficiary") is expected


def test_withdrawal_open_under_default_policy():
    """An account removed from the allowlist can still exit."""
    provider = RecordingProvider()
    guard = VaultGuard(provider)

    assert guard.authorize_withdrawal(owner="owner", receiver="receiver") is True
    assert provider.calls == []


def test_withdrawal_gated_when_enabled():
    provider = RecordingProvider(allowed={"owner"})
    guard = VaultGuard(provider, GatePolicy.all_roles())

    assert guard.authorize_withdrawal(owner="owner", receiver="receiver") is False
    assert provider.calls == [
        (GateRole.SEND_SHARES, "owner"),
        (GateRole.RECEIVE_ASSETS, "receiver"),
    ]


def test_transfer_checks_destination_only_by_default():
    provider = RecordingProvider(allowed={"destination"})
    guard = VaultGuard(provider)

    assert guard.authorize_transfer(sender="sender", destination="destination") is True
    assert provider.calls == [(GateRole.RECEIVE_SHARES, "destination")]


def test_fee_mint_checks_recipient():
    provider = RecordingProvider()
    guard = VaultGuard(provider)

    assert guard.authorize_fee_mint("fees") is False
    assert provider.calls == [(GateRole.RECEIVE_SHARES, "fees")]


def test_no_provider_allows_everything():
    guard = VaultGuard(None, GatePolicy.all_roles())

    assert guard.authorize_deposit("a", "b")
    assert guard.authorize_transfer("a", "b")
    assert guard.authorize_fee_mint("a")
    assert guard.authorize_withdrawal("a", "b")


def test_guard_over_gate_adapter(registry, admin, user1, user2):
    guard = VaultGuard(GateAdapter(registry))

    assert guard.authorize_deposit(payer=user1, beneficiary=user1) is False

    registry.set_membership(user1, True, caller=admin)
    assert guard.authorize_deposit(payer=user1, beneficiary=user1) is True
    assert guard.authorize_deposit(payer=user1, beneficiary=user2) is False

    registry.set_membership(user1, False, caller=admin)
    assert guard.authorize_withdrawal(owner=user1, receiver=user1) is True


@pytest.mark.parametrize("role", ["send_assets", "SEND_ASSETS", None, 3, object()])
def test_non_role_is_denied(role):
    """Only GateRole members are answered; anything else is a denial, not an error."""
    provider = RecordingProvider(allowed={"account"})
    guard = VaultGuard(provider, GatePolicy.all_roles())

    assert guard.check(role, "account") is False
    assert VaultGuard(None).check(role, "account") is False
    assert provider.calls == []


@pytest.mark.parametrize("role", list(GateRole))
def test_each_role_reaches_its_own_check(role):
    provider = RecordingProvider(allowed={"account"})
    guard = VaultGuard(provider, GatePolicy.all_roles())

    assert guard.check(role, "account") is True
    assert provider.calls == [(role, "account")]


def test_policy_treats_non_role_as_disabled():
    assert GatePolicy.all_roles().is_enabled("send_assets") is False  # type: ignore[arg-type]
