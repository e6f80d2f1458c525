"""Gate models: capability roles and check requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class GateRole(Enum):
    """Which side of which transfer the host vault is authorizing."""

    SEND_ASSETS = "send_assets"  # payer funding a deposit
    RECEIVE_SHARES = "receive_shares"  # holder of minted or transferred shares
    SEND_SHARES = "send_shares"  # owner burning or transferring shares
    RECEIVE_ASSETS = "receive_assets"  # destination of a withdrawal


@dataclass(frozen=True, slots=True)
class CapabilityCheck:
    """One capability question. Evaluated synchronously and discarded."""

    account: Any
    role: GateRole
