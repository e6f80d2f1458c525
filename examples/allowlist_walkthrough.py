"""Walkthrough: an operator curates the allowlist while a vault consults it.

Run with: python -m examples.allowlist_walkthrough
"""

import logging

from vaultgate import AccessRegistry, GateAdapter, InMemoryEventLog, Unauthorized, VaultGuard

OPERATOR = "0x00000000000000000000000000000000000000a1"
SUCCESSOR = "0x00000000000000000000000000000000000000a2"
ALICE = "0x0000000000000000000000000000000000000011"
BOB = "0x0000000000000000000000000000000000000012"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    log = InMemoryEventLog()
    registry = AccessRegistry(OPERATOR, event_sink=log)
    guard = VaultGuard(GateAdapter(registry))

    print(f"Alice may deposit: {guard.authorize_deposit(payer=ALICE, beneficiary=ALICE)}")
    registry.set_membership(ALICE, True, caller=OPERATOR)
    print(f"Alice may deposit: {guard.authorize_deposit(payer=ALICE, beneficiary=ALICE)}")
    print(f"Alice may deposit for Bob: {guard.authorize_deposit(payer=ALICE, beneficiary=BOB)}")

    try:
        registry.set_membership(BOB, True, caller=ALICE)
    except Unauthorized as e:
        print(f"Rejected: {e}")

    registry.transfer_administrator(SUCCESSOR, caller=OPERATOR)
    registry.set_membership(ALICE, False, caller=SUCCESSOR)
    print(f"Alice may still withdraw: {guard.authorize_withdrawal(owner=ALICE, receiver=ALICE)}")

    print("Events:")
    for event in log.to_dicts():
        print(f"  {event}")
    print(f"Snapshot: {registry.snapshot().model_dump_json()}")


if __name__ == "__main__":
    main()
