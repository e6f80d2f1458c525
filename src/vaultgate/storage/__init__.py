"""Membership storage backends."""

from vaultgate.storage.local import LocalMembershipStore
from vaultgate.storage.protocol import MembershipStore

__all__ = [
    "MembershipStore",
    "LocalMembershipStore",
]
