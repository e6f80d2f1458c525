"""Core functionalities: stateless identity primitives and the error taxonomy.

Architecture Note:
    core/ holds pure building blocks with no runtime state.
    For stateful services, see storage/, registry/ and gate/.
"""

from vaultgate.core.errors import GateError, InvalidAdministrator, Unauthorized
from vaultgate.core.identity import ZERO_ADDRESS, Address, coerce_address, to_address

__all__ = [
    # Identity
    "Address",
    "ZERO_ADDRESS",
    "to_address",
    "coerce_address",
    # Errors
    "GateError",
    "InvalidAdministrator",
    "Unauthorized",
]
