"""Configuration module using Pydantic Settings.

Usage:
    from vaultgate.config import GateSettings

    settings = GateSettings(administrator="0x...")
"""

from vaultgate.config.settings import GateSettings

__all__ = [
    "GateSettings",
]
