"""
Shared Test Fixtures

Provides groups, accumulators and witnesses over small prime sets.
"""

import pytest

from zkaccum.accumulator import recompute_root
from zkaccum.group import RSAGroup, ToyRSAGroup


@pytest.fixture(scope="session")
def toy_group() -> ToyRSAGroup:
    """Small RSA group for fast arithmetic."""
    return ToyRSAGroup()


@pytest.fixture(scope="session")
def demo_group() -> RSAGroup:
    """2048-bit demo RSA group."""
    return RSAGroup.from_params()


@pytest.fixture
def acc_set():
    """Elements committed in the initial accumulator."""
    return [41, 67, 89]


@pytest.fixture
def init_acc(toy_group, acc_set):
    """Accumulator over ``acc_set`` in the toy group."""
    return recompute_root(toy_group, acc_set)
