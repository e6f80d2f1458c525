"""Account identity: normalized addresses and the null identity."""

from vaultgate.core.identity.models import ZERO_ADDRESS, Address, coerce_address, to_address

__all__ = [
    "Address",
    "ZERO_ADDRESS",
    "to_address",
    "coerce_address",
]
