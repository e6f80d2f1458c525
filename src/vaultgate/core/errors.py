"""Error taxonomy for registry mutations.

Capability checks have no error variant; only administrative mutations fail.
"""

from __future__ import annotations

from typing import Any


class GateError(Exception):
    """Base class for all vaultgate errors."""

    pass


class InvalidAdministrator(GateError):
    """Raised when an administrator identity is null, zero, or not an address."""

    pass


class Unauthorized(GateError):
    """Raised when a non-administrator calls a mutation entry point.

    Args:
        caller: Identity that attempted the mutation.
        operation: Name of the rejected operation.
    """

    def __init__(self, caller: Any, operation: str):
        self.caller = caller
        self.operation = operation
        super().__init__(f"{caller} is not the administrator and cannot call {operation}")
