"""Pytest configuration and shared fixtures for DebtFree tests.

Provides a debt factory, a few reference portfolios, and helper utilities for
comparing floating point money values.
"""

from __future__ import annotations

import logging
from itertools import count

import pytest

from debtfree.logging_config import ROOT_LOGGER_NAME
from debtfree.models.debt import DebtCategory, DebtRecord


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def reset_debtfree_logger():
    """Drop handlers installed by setup_logging so tests do not leak streams."""

    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep configuration reads away from the developer's environment."""

    for name in (
        "DEBTFREE_DATA_DIR",
        "DEBTFREE_DEV_MODE",
        "DEBTFREE_PAID_EPSILON",
        "DEBTFREE_MAX_MONTHS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEBTFREE_DATA_DIR", str(tmp_path / "instance"))


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for building DebtRecord instances with sensible defaults.

    Example:
        def test_something(debt_factory):
            card = debt_factory(balance=2500, rate=19.99, minimum=75)
    """

    ids = count(1)

    def _create(
        balance: float = 1000.0,
        rate: float = 10.0,
        minimum: float = 50.0,
        id=None,
        name: str = "",
        category: DebtCategory = DebtCategory.OTHER,
    ) -> DebtRecord:
        return DebtRecord(
            id=id if id is not None else next(ids),
            balance=balance,
            annual_interest_rate_percent=rate,
            minimum_payment=minimum,
            name=name,
            category=category,
        )

    return _create


@pytest.fixture
def mixed_portfolio(debt_factory):
    """Three debts with distinct balances and rates."""

    return [
        debt_factory(id="card", balance=2500.0, rate=22.9, minimum=75.0),
        debt_factory(id="car", balance=8000.0, rate=6.5, minimum=220.0),
        debt_factory(id="medical", balance=600.0, rate=0.0, minimum=40.0),
    ]


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
