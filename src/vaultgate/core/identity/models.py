"""Account identity models.

Usage:
    account = to_address("0xAbC0000000000000000000000000000000000001")
    if account.is_zero():
        ...

    # Total variant for hot paths: never raises, returns None instead
    maybe = coerce_address(untrusted)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ADDRESS_LENGTH = 20
_HEX_DIGITS = frozenset("0123456789abcdef")


@dataclass(frozen=True, slots=True)
class Address:
    """Normalized 20-byte account identity.

    Always stored as "0x" followed by 40 lowercase hex digits, so checksummed
    and lowercase spellings of the same account compare equal.
    Construct through to_address() rather than directly.
    """

    value: str

    def __str__(self) -> str:
        return self.value

    def is_zero(self) -> bool:
        """Check if this is the null identity.

        Returns:
            True for 0x000...000, False otherwise.
        """
        return self == ZERO_ADDRESS

    def short(self) -> str:
        """Abbreviated form for log lines: 0xabcd...1234."""
        return f"{self.value[:6]}...{self.value[-4:]}"


ZERO_ADDRESS = Address("0x" + "00" * ADDRESS_LENGTH)


def to_address(raw: Any) -> Address:
    """Parse raw input into an Address.

    Accepts an Address, a hex string (with or without 0x prefix, any case),
    20 raw bytes, or None (the null identity, same as ZERO_ADDRESS).

    Args:
        raw: Value to parse.

    Returns:
        Normalized Address.

    Raises:
        ValueError: If raw does not describe a 20-byte address.
    """
    if raw is None:
        return ZERO_ADDRESS
    if isinstance(raw, Address):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        if len(raw) != ADDRESS_LENGTH:
            raise ValueError(f"Expected {ADDRESS_LENGTH} bytes, got {len(raw)}")
        return Address("0x" + bytes(raw).hex())
    if isinstance(raw, str):
        digits = raw.strip().lower()
        if digits.startswith("0x"):
            digits = digits[2:]
        if len(digits) != ADDRESS_LENGTH * 2 or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"Not a 20-byte hex address: {raw!r}")
        return Address("0x" + digits)
    raise ValueError(f"Cannot interpret {type(raw).__name__} as an address")


def coerce_address(raw: Any) -> Address | None:
    """Parse raw input into an Address without ever raising.

    Any failure while interpreting raw, including one raised by a hostile
    str subclass, means "not an address".

    Returns:
        Normalized Address, or None if raw is not an address.
    """
    try:
        return to_address(raw)
    except Exception:
        return None
