"""Persisted registry state for external tooling.

Usage:
    payload = registry.snapshot().model_dump_json()
    restored = AccessRegistry.from_snapshot(RegistrySnapshot.model_validate_json(payload))
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vaultgate.core.identity import to_address


class RegistrySnapshot(BaseModel):
    """The two persisted fields of an AccessRegistry.

    Attributes:
        administrator: Current administrator, normalized hex form.
        members: Explicitly written membership entries (account -> allowed).
            Accounts absent here are denied.
    """

    model_config = ConfigDict(frozen=True)

    administrator: str
    members: dict[str, bool] = Field(default_factory=dict)

    @field_validator("administrator")
    @classmethod
    def _normalize_administrator(cls, value: str) -> str:
        return str(to_address(value))

    @field_validator("members")
    @classmethod
    def _normalize_members(cls, value: dict[str, bool]) -> dict[str, bool]:
        members: dict[str, bool] = {}
        for account, allowed in value.items():
            key = str(to_address(account))
            if key in members:
                raise ValueError(f"Duplicate entries for account {key}")
            members[key] = allowed
        return members

    def allowed_accounts(self) -> list[str]:
        """Accounts whose membership is currently True, sorted."""
        return sorted(account for account, allowed in self.members.items() if allowed)
