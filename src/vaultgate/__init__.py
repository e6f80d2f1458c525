"""vaultgate: allowlist gate for ERC-4626-style vaults.

Usage:
    from vaultgate import AccessRegistry, GateAdapter, VaultGuard

    registry = AccessRegistry(admin)
    gate = GateAdapter(registry)

    registry.set_membership(user, True, caller=admin)
    gate.can_send_assets(user)  # True

    guard = VaultGuard(gate)
    guard.authorize_deposit(payer=user, beneficiary=user)  # True
"""

__version__ = "0.1.0"

# Core primitives
from vaultgate.core import (
    ZERO_ADDRESS,
    Address,
    GateError,
    InvalidAdministrator,
    Unauthorized,
    coerce_address,
    to_address,
)

# Notifications
from vaultgate.events import (
    AdministratorChanged,
    EventSink,
    InMemoryEventLog,
    MembershipChanged,
)

# Gate
from vaultgate.gate import (
    CapabilityCheck,
    CapabilityProvider,
    GateAdapter,
    GatePolicy,
    GateRole,
    VaultGuard,
)

# Registry
from vaultgate.registry import AccessRegistry, RegistrySnapshot

# Storage
from vaultgate.storage import LocalMembershipStore, MembershipStore

__all__ = [
    # Version
    "__version__",
    # Core
    "Address",
    "ZERO_ADDRESS",
    "to_address",
    "coerce_address",
    "GateError",
    "InvalidAdministrator",
    "Unauthorized",
    # Registry
    "AccessRegistry",
    "RegistrySnapshot",
    # Gate
    "GateAdapter",
    "GateRole",
    "CapabilityCheck",
    "CapabilityProvider",
    "GatePolicy",
    "VaultGuard",
    # Events
    "EventSink",
    "InMemoryEventLog",
    "MembershipChanged",
    "AdministratorChanged",
    # Storage
    "MembershipStore",
    "LocalMembershipStore",
]
