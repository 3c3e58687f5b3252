"""Shared fixtures for wallet-balances tests."""
import logging

import pytest
import structlog

from tests.helpers import FakeRpcClient, SYSTEM_PROGRAM, TOKEN_PROGRAM, WRAPPED_SOL_MINT


@pytest.fixture
def wallet_strings():
    """Three valid addresses in a fixed order."""
    return [SYSTEM_PROGRAM, WRAPPED_SOL_MINT, TOKEN_PROGRAM]


@pytest.fixture
def funded_client():
    """Client where every wallet has an account."""
    return FakeRpcClient({
        SYSTEM_PROGRAM: 1_000_000_000,
        WRAPPED_SOL_MINT: 1_500_000_000,
        TOKEN_PROGRAM: 42,
    })


@pytest.fixture
def reset_logging():
    """Undo configure_logging so later tests do not write to a closed capture stream."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
