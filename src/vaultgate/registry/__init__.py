"""Allowlist state and administrator control.

Architecture Note:
    registry/ owns the only mutable state in the package. gate/ reads it;
    nothing else writes it.
"""

from vaultgate.registry.models import RegistrySnapshot
from vaultgate.registry.registry import AccessRegistry

__all__ = [
    "AccessRegistry",
    "RegistrySnapshot",
]
