"""Debt portfolio value types and payoff strategy tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable

DEFAULT_PAID_EPSILON = 0.1
DEFAULT_MAX_MONTHS = 600  # 50 years


class DebtCategory(str, Enum):
    """Kind of liability a debt represents."""

    CREDIT_CARD = "Credit Card"
    STUDENT_LOAN = "Student Loan"
    MORTGAGE = "Mortgage"
    CAR_LOAN = "Car Loan"
    PERSONAL_LOAN = "Personal Loan"
    MEDICAL = "Medical"
    OTHER = "Other"


_STRATEGY_DETAILS: dict[str, tuple[str, str]] = {
    "snowball": (
        "Snowball Method",
        "Pay minimum on all debts, then put extra money toward the smallest debt first. "
        "When it's paid off, apply that payment to the next smallest debt.",
    ),
    "avalanche": (
        "Avalanche Method",
        "Pay minimum on all debts, then put extra money toward the highest interest debt "
        "first. This saves the most money in interest over time.",
    ),
    "highest_balance": (
        "Highest Balance First",
        "Focus on paying off the debt with the highest balance first. "
        "Good for eliminating large debts quickly.",
    ),
    "lowest_balance": (
        "Lowest Balance First",
        "Similar to the snowball method, but doesn't necessarily consider interest rates. "
        "Just focuses on eliminating small debts first.",
    ),
    "highest_interest": (
        "Highest Interest First",
        "Similar to the avalanche method, prioritizing the highest interest debt "
        "regardless of balance.",
    ),
    "custom": (
        "Custom Order",
        "Create your own custom repayment order based on your preferences.",
    ),
}


class StrategyTag(str, Enum):
    """Repayment ordering strategies.

    ``CUSTOM`` means the caller already arranged the debts; ordering leaves
    the input sequence untouched.
    """

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"
    HIGHEST_BALANCE = "highest_balance"
    LOWEST_BALANCE = "lowest_balance"
    HIGHEST_INTEREST = "highest_interest"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _STRATEGY_DETAILS[self.value][0]

    @property
    def description(self) -> str:
        return _STRATEGY_DETAILS[self.value][1]

    @classmethod
    def from_value(cls, raw: str) -> "StrategyTag":
        """Parse a tag from its value, member name, or display label."""

        needle = (raw or "").strip().lower()
        for tag in cls:
            if needle in {tag.value, tag.name.lower(), tag.label.lower()}:
                return tag
        # Accept dashed spellings such as "highest-interest".
        needle = needle.replace("-", "_").replace(" ", "_")
        for tag in cls:
            if needle == tag.value:
                return tag
        raise ValueError(f"Unknown repayment strategy: {raw!r}")


@dataclass(frozen=True, slots=True)
class DebtRecord:
    """A single outstanding debt as supplied by the host application."""

    id: Hashable
    balance: float
    annual_interest_rate_percent: float
    minimum_payment: float
    name: str = ""
    category: DebtCategory = DebtCategory.OTHER

    def __post_init__(self) -> None:
        for field_name in ("balance", "annual_interest_rate_percent", "minimum_payment"):
            value = getattr(self, field_name)
            if value < 0:
                raise ValueError(f"Debt {self.id!r}: {field_name} must be non-negative, got {value}")

    @property
    def monthly_rate(self) -> float:
        """Monthly interest rate as a fraction (18.0% APR -> 0.015)."""

        return self.annual_interest_rate_percent / 100.0 / 12.0


@dataclass(frozen=True, slots=True)
class SimulationOptions:
    """Tuning knobs for the month-by-month simulation.

    ``paid_epsilon`` is the balance at or below which a debt counts as paid,
    absorbing float rounding. ``max_months`` stops runs that never converge.
    """

    paid_epsilon: float = DEFAULT_PAID_EPSILON
    max_months: int = DEFAULT_MAX_MONTHS

    def __post_init__(self) -> None:
        if self.paid_epsilon <= 0:
            raise ValueError("paid_epsilon must be positive")
        if self.max_months <= 0:
            raise ValueError("max_months must be positive")


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Outcome of a payoff simulation.

    ``interest_saved`` is the minimum-only baseline interest minus the interest
    actually accrued and may be negative. ``capped`` is set when the run hit
    the month limit before every debt was cleared.
    """

    months_to_payoff: int
    interest_saved: float
    total_interest_paid: float = 0.0
    baseline_interest: float = 0.0
    capped: bool = False


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    """A strategy paired with the simulation it produced."""

    strategy: StrategyTag
    result: SimulationResult


__all__ = [
    "DEFAULT_MAX_MONTHS",
    "DEFAULT_PAID_EPSILON",
    "DebtCategory",
    "DebtRecord",
    "SimulationOptions",
    "SimulationResult",
    "StrategyComparison",
    "StrategyTag",
]
