"""Capability checks consulted by the host vault.

Architecture Note:
    gate/ is read-only with respect to registry state. GateAdapter answers the
    four capability questions; GatePolicy and VaultGuard describe which of
    them a host vault actually asks, and about whom.
"""

from vaultgate.gate.adapter import GateAdapter
from vaultgate.gate.guard import VaultGuard
from vaultgate.gate.models import CapabilityCheck, GateRole
from vaultgate.gate.policy import GatePolicy
from vaultgate.gate.protocol import CapabilityProvider

__all__ = [
    "GateAdapter",
    "GateRole",
    "CapabilityCheck",
    "CapabilityProvider",
    "GatePolicy",
    "VaultGuard",
]
