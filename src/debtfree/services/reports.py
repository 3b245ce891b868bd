"""Portfolio analytics and presentation helpers for host applications."""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date
from typing import Hashable, Iterable, Sequence

import pandas as pd

from ..models.debt import DebtCategory, DebtRecord, SimulationResult, StrategyComparison
from .strategy import HIGH_AVERAGE_RATE, HIGH_INTEREST_RATE

RECOMMENDED_PAYOFF_MONTHS = 36
MINIMUM_UPLIFT = 1.2
PAYMENT_FLOOR = 100.0
PAYMENT_CEILING = 5000.0
CEILING_MULTIPLIER = 3


@dataclass(frozen=True, slots=True)
class PortfolioSummary:
    """Aggregate figures for a set of open debts."""

    debt_count: int
    total_balance: float
    total_minimum_payment: float
    average_rate: float
    monthly_interest: float
    highest_rate_debt_id: Hashable | None


def summarize(portfolio: Iterable[DebtRecord]) -> PortfolioSummary:
    debts = list(portfolio)
    if not debts:
        return PortfolioSummary(0, 0.0, 0.0, 0.0, 0.0, None)
    highest = max(debts, key=lambda d: d.annual_interest_rate_percent)
    return PortfolioSummary(
        debt_count=len(debts),
        total_balance=sum(d.balance for d in debts),
        total_minimum_payment=sum(d.minimum_payment for d in debts),
        average_rate=sum(d.annual_interest_rate_percent for d in debts) / len(debts),
        monthly_interest=sum(d.balance * d.monthly_rate for d in debts),
        highest_rate_debt_id=highest.id,
    )


@dataclass(frozen=True, slots=True)
class CategoryBreakdown:
    """Share of the total balance held in one debt category."""

    category: DebtCategory
    amount: float
    percentage: float


def breakdown_by_category(portfolio: Iterable[DebtRecord]) -> list[CategoryBreakdown]:
    """Total balance per category, in category declaration order.

    Every category is listed, empty ones with a zero amount. Percentages are
    of the overall balance and are all zero when nothing is owed.
    """

    debts = list(portfolio)
    total = sum(d.balance for d in debts)
    breakdown = []
    for category in DebtCategory:
        amount = sum(d.balance for d in debts if d.category is category)
        percentage = amount / total * 100.0 if total > 0 else 0.0
        breakdown.append(CategoryBreakdown(category, amount, percentage))
    return breakdown


def recommended_payment(portfolio: Iterable[DebtRecord]) -> float:
    """Suggest a monthly budget.

    The larger of 20% over the combined minimums and the level payment that
    clears the total balance in three years at the average rate.
    """

    summary = summarize(portfolio)
    if summary.debt_count == 0:
        return 0.0

    uplift = summary.total_minimum_payment * MINIMUM_UPLIFT
    rate = summary.average_rate / 100.0 / 12.0
    if rate > 0:
        level = rate * summary.total_balance / (1 - (1 + rate) ** -RECOMMENDED_PAYOFF_MONTHS)
    else:
        level = summary.total_balance / RECOMMENDED_PAYOFF_MONTHS
    return max(uplift, level)


def payment_bounds(portfolio: Iterable[DebtRecord]) -> tuple[float, float]:
    """Return a (low, high) range of sensible monthly budgets."""

    minimums = summarize(portfolio).total_minimum_payment
    return max(minimums, PAYMENT_FLOOR), max(minimums * CEILING_MULTIPLIER, PAYMENT_CEILING)


def interest_recommendation(portfolio: Iterable[DebtRecord]) -> str | None:
    debts = list(portfolio)
    if any(d.annual_interest_rate_percent > HIGH_INTEREST_RATE for d in debts):
        return (
            "Consider balance transfer options for your high-interest debts "
            "to save on interest costs."
        )
    average = summarize(debts).average_rate
    if average > HIGH_AVERAGE_RATE:
        return (
            f"Your average interest rate is high at {average:.2f}%. "
            "Look into debt consolidation options."
        )
    return None


def _add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, min(start.day, monthrange(year, month)[1]))


def debt_free_date(result: SimulationResult, start: date | None = None) -> date | None:
    """Calendar date the simulation finishes, or None when it never does."""

    if result.capped:
        return None
    return _add_months(start or date.today(), result.months_to_payoff)


def describe_duration(result: SimulationResult) -> str:
    if result.capped:
        return "Never"
    months = result.months_to_payoff
    if months < 12:
        return f"{months} months"
    return f"{months // 12} years, {months % 12} months"


def comparison_frame(comparisons: Sequence[StrategyComparison]) -> pd.DataFrame:
    """Tabulate comparison results, one row per strategy, in ranked order."""

    columns = ["strategy", "label", "months_to_payoff", "interest_saved", "capped"]
    rows = [
        {
            "strategy": item.strategy.value,
            "label": item.strategy.label,
            "months_to_payoff": item.result.months_to_payoff,
            "interest_saved": round(item.result.interest_saved, 2),
            "capped": item.result.capped,
        }
        for item in comparisons
    ]
    return pd.DataFrame(rows, columns=columns)


__all__ = [
    "CategoryBreakdown",
    "PortfolioSummary",
    "breakdown_by_category",
    "comparison_frame",
    "debt_free_date",
    "describe_duration",
    "interest_recommendation",
    "payment_bounds",
    "recommended_payment",
    "summarize",
]
