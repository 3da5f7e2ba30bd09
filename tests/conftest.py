"""
Shared pytest fixtures for the banano_core test suite.
"""

import pytest

from banano_core.keys import KeyPair
from tests.vectors import ZERO_SEED


@pytest.fixture(params=["sodium", "ecdsa"])
def curve_name(request):
    """Run a test against every Ed25519 backend."""
    return request.param


@pytest.fixture
def zero_keypair():
    """Account 0 of the all-zero seed."""
    return KeyPair.from_seed(ZERO_SEED, 0)


@pytest.fixture
def valid_address(zero_keypair):
    return zero_keypair.address
