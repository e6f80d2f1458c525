"""Tests for account identity parsing.

Critical Invariants:
- Checksummed and lowercase spellings are the same identity
- None is the null identity (ZERO_ADDRESS)
- coerce_address never raises
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vaultgate.core.identity import ZERO_ADDRESS, Address, coerce_address, to_address


def test_case_insensitive_equality():
    """Checksummed input normalizes to the lowercase form."""
    checksummed = to_address("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48")
    lowered = to_address("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")

    assert checksummed == lowered
    assert str(checksummed) == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


def test_prefix_is_optional():
    assert to_address("a0b86991c6218b36c1d19d4a2e9eb0ce3606eb48") == to_address(
        "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
    )


def test_none_is_zero_address():
    assert to_address(None) == ZERO_ADDRESS
    assert to_address(None).is_zero()


def test_raw_bytes():
    assert to_address(b"\x00" * 19 + b"\x01") == to_address("0x" + "00" * 19 + "01")


def test_address_passthrough():
    account = to_address("0x" + "ab" * 20)
    assert to_address(account) is account


@pytest.mark.parametrize(
    "raw",
    [
        "0x1234",
        "0x" + "zz" * 20,
        "0x" + "00" * 21,
        b"\x00" * 19,
        12345,
        ["0x" + "00" * 20],
        object(),
    ],
    ids=["short", "non_hex", "long", "short_bytes", "int", "list", "object"],
)
def test_invalid_inputs_rejected(raw):
    with pytest.raises(ValueError):
        to_address(raw)
    assert coerce_address(raw) is None


def test_short_form():
    account = to_address("0xabcdef0000000000000000000000000000001234")
    assert account.short() == "0xabcd...1234"


@given(
    raw=st.one_of(
        st.none(), st.text(), st.binary(), st.integers(), st.floats(), st.lists(st.integers())
    )
)
def test_coerce_never_raises(raw):
    """PROPERTY: coerce_address is total over arbitrary input."""
    result = coerce_address(raw)
    assert result is None or isinstance(result, Address)


@given(data=st.binary(min_size=20, max_size=20))
def test_hex_and_bytes_agree(data):
    """PROPERTY: the bytes and hex spellings of one account are equal."""
    assert to_address(data) == to_address("0x" + data.hex().upper())


def test_coerce_absorbs_errors_from_str_subclasses():
    class Exploding(str):
        def strip(self, *args):
            raise RuntimeError("boom")

    assert coerce_address(Exploding("0x" + "00" * 20)) is None
