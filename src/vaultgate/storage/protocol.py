"""Storage protocol for swappable membership backends.

The storage layer abstracts where the membership table lives, enabling:
- Local in-memory (default)
- Ledger-backed or persistent (future)

Usage:
    store = LocalMembershipStore()
    registry = AccessRegistry(admin, store=store)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from vaultgate.core.identity import Address


class MembershipStore(Protocol):
    """Abstract membership table. Implementations hold the actual data.

    Gotcha: get() sits on the capability-check hot path and must be total:
    an account never written reads as False, and no input may raise.
    """

    def get(self, account: Address) -> bool:
        """Read membership for account (False when never set)."""
        ...

    def put(self, account: Address, allowed: bool) -> None:
        """Write membership for account."""
        ...

    def contains(self, account: Address) -> bool:
        """Check if account was ever explicitly written."""
        ...

    def discard(self, account: Address) -> None:
        """Forget an explicit entry (used only to roll back a first write)."""
        ...

    def items(self) -> Iterator[tuple[Address, bool]]:
        """Iterate explicitly written (account, allowed) pairs."""
        ...

    def __len__(self) -> int:
        """Number of explicitly written entries."""
        ...
