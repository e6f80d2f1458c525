"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the gate
deployment policy and the initial administrator.

Usage:
    from vaultgate.config import GateSettings

    # Load from environment variables (VAULTGATE_*)
    settings = GateSettings()

    # Or override with explicit values
    settings = GateSettings(gate_send_shares=True)
    policy = GatePolicy.from_settings(settings)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install vaultgate[config]"
    ) from e

from pydantic import field_validator

from vaultgate.core.identity import to_address


class GateSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a gate deployment.

    Attributes:
        administrator: Initial registry administrator (hex address).
        gate_send_assets: Consult the gate for deposit payers.
        gate_receive_shares: Consult the gate for share recipients.
        gate_send_shares: Consult the gate for share owners on exit/transfer.
        gate_receive_assets: Consult the gate for withdrawal receivers.

    Environment Variables:
        VAULTGATE_ADMINISTRATOR
        VAULTGATE_GATE_SEND_ASSETS
        VAULTGATE_GATE_RECEIVE_SHARES
        VAULTGATE_GATE_SEND_SHARES
        VAULTGATE_GATE_RECEIVE_ASSETS
    """

    model_config = SettingsConfigDict(
        env_prefix="VAULTGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    administrator: str | None = None
    gate_send_assets: bool = True
    gate_receive_shares: bool = True
    gate_send_shares: bool = False
    gate_receive_assets: bool = False

    @field_validator("administrator")
    @classmethod
    def _normalize_administrator(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return str(to_address(value))
