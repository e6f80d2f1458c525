"""Local in-memory membership storage.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    store = LocalMembershipStore()
    store.put(account, True)
    store.get(account)  # True
"""

from __future__ import annotations

from collections.abc import Iterator

from vaultgate.core.identity import Address


class LocalMembershipStore:
    """In-memory membership table.

    Structure:
        _members[account] = allowed

    Absent keys and explicit False are indistinguishable through get().
    """

    def __init__(self) -> None:
        self._members: dict[Address, bool] = {}

    def get(self, account: Address) -> bool:
        return self._members.get(account, False)

    def put(self, account: Address, allowed: bool) -> None:
        self._members[account] = bool(allowed)

    def contains(self, account: Address) -> bool:
        return account in self._members

    def discard(self, account: Address) -> None:
        self._members.pop(account, None)

    def items(self) -> Iterator[tuple[Address, bool]]:
        # Copy so callers may mutate the registry while iterating
        return iter(list(self._members.items()))

    def __len__(self) -> int:
        return len(self._members)
