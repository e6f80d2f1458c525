"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from vaultgate import AccessRegistry, Address, GateAdapter, InMemoryEventLog, to_address


def make_address(n: int) -> Address:
    """Deterministic test account: 0x000...0n."""
    return to_address(f"0x{n:040x}")


@pytest.fixture
def admin() -> Address:
    return make_address(0xA1)


@pytest.fixture
def second_admin() -> Address:
    return make_address(0xA2)


@pytest.fixture
def user1() -> Address:
    return make_address(0x11)


@pytest.fixture
def user2() -> Address:
    return make_address(0x12)


@pytest.fixture
def event_log() -> InMemoryEventLog:
    return InMemoryEventLog()


@pytest.fixture
def registry(admin, event_log) -> AccessRegistry:
    """Fresh registry administered by `admin`, recording into `event_log`."""
    return AccessRegistry(admin, event_sink=event_log)


@pytest.fixture
def gate(registry) -> GateAdapter:
    return GateAdapter(registry)


@pytest.fixture
def addr():
    """Factory for deterministic accounts: addr(5) -> 0x000...05."""
    return make_address
