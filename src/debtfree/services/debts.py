"""Debt payoff calculators."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Hashable, Iterable, Iterator, Sequence

from ..logging_config import get_logger
from ..models.debt import (
    DEFAULT_MAX_MONTHS,
    DEFAULT_PAID_EPSILON,
    DebtRecord,
    SimulationOptions,
    SimulationResult,
    StrategyComparison,
    StrategyTag,
)
from .strategy import order, recommend

logger = get_logger(__name__)


class InvalidMinimumPaymentError(ValueError):
    """Raised when a debt with a balance has no positive minimum payment."""

    def __init__(self, debt_id: Hashable, minimum_payment: float) -> None:
        super().__init__(
            f"Debt {debt_id!r} has a balance but a minimum payment of {minimum_payment}; "
            "a positive minimum payment is required"
        )
        self.debt_id = debt_id
        self.minimum_payment = minimum_payment


@dataclass(frozen=True, slots=True)
class DebtMonth:
    """One debt's activity within a simulated month."""

    debt_id: Hashable
    interest: float
    payment: float
    remaining_balance: float


@dataclass(frozen=True, slots=True)
class MonthSnapshot:
    """Everything that happened in one simulated month."""

    month: int
    debts: tuple[DebtMonth, ...]
    open_debts: int

    @property
    def interest(self) -> float:
        return sum(row.interest for row in self.debts)

    @property
    def payment(self) -> float:
        return sum(row.payment for row in self.debts)


@dataclass(frozen=True, slots=True)
class PayoffPlan:
    """Recommended strategy, the ordering it implies, and its simulation."""

    strategy: StrategyTag
    ordered: list[DebtRecord]
    result: SimulationResult


@dataclass(slots=True)
class _WorkingDebt:
    id: Hashable
    balance: float
    monthly_rate: float
    minimum_payment: float


def _check_minimums(debts: Iterable[DebtRecord]) -> None:
    for debt in debts:
        if debt.balance > 0 and debt.minimum_payment <= 0:
            raise InvalidMinimumPaymentError(debt.id, debt.minimum_payment)


def baseline_interest(portfolio: Iterable[DebtRecord], paid_epsilon: float = 0.0) -> float:
    """Interest owed if every debt were paid alone at its own minimum.

    Uses the flat estimate ``balance * monthly_rate * ceil(balance / minimum)``
    per debt. Debts at or below ``paid_epsilon`` count as paid and contribute
    nothing, matching what the simulation drops before its first month.
    """

    total = 0.0
    for debt in portfolio:
        if debt.balance <= 0:
            continue
        if debt.minimum_payment <= 0:
            raise InvalidMinimumPaymentError(debt.id, debt.minimum_payment)
        if debt.balance <= paid_epsilon:
            continue
        months = math.ceil(debt.balance / debt.minimum_payment)
        total += debt.balance * debt.monthly_rate * months
    return total


def _iterate_months(
    ordered: Sequence[DebtRecord], monthly_budget: float, options: SimulationOptions
) -> Iterator[MonthSnapshot]:
    """Step the working copy one month at a time until paid off or capped."""

    working = [
        _WorkingDebt(d.id, float(d.balance), d.monthly_rate, float(d.minimum_payment))
        for d in ordered
        if d.balance > options.paid_epsilon
    ]
    month = 0

    while working and month < options.max_months:
        interest = [debt.balance * debt.monthly_rate for debt in working]
        for debt, accrued in zip(working, interest):
            debt.balance += accrued

        payments = []
        for debt in working:
            payment = min(debt.balance, debt.minimum_payment)
            debt.balance -= payment
            payments.append(payment)

        # Everything above the minimums goes to the top-priority debt only.
        extra = max(0.0, monthly_budget - sum(debt.minimum_payment for debt in working))
        if extra > 0:
            applied = min(working[0].balance, extra)
            working[0].balance -= applied
            payments[0] += applied

        rows = tuple(
            DebtMonth(debt.id, accrued, paid, debt.balance)
            for debt, accrued, paid in zip(working, interest, payments)
        )
        working = [debt for debt in working if debt.balance > options.paid_epsilon]
        month += 1
        yield MonthSnapshot(month=month, debts=rows, open_debts=len(working))


def payoff_schedule(
    ordered_portfolio: Sequence[DebtRecord],
    monthly_budget: float,
    options: SimulationOptions | None = None,
) -> list[MonthSnapshot]:
    """Return the month-by-month trajectory for an already ordered portfolio."""

    options = options or SimulationOptions()
    _check_minimums(ordered_portfolio)
    return list(_iterate_months(ordered_portfolio, monthly_budget, options))


def simulate(
    ordered_portfolio: Sequence[DebtRecord],
    monthly_budget: float,
    options: SimulationOptions | None = None,
) -> SimulationResult:
    """Simulate paying down ``ordered_portfolio`` with ``monthly_budget`` each month.

    Each month interest accrues on every open debt, every minimum is paid,
    and whatever the budget leaves over goes to the first open debt in list
    order. Debts at or below ``options.paid_epsilon`` are dropped. The run
    stops when nothing is owed or after ``options.max_months`` months, in
    which case the result is flagged ``capped``.

    The ordering is taken as given; the advisor is not consulted.
    """

    options = options or SimulationOptions()
    debts = list(ordered_portfolio)
    if not debts:
        return SimulationResult(months_to_payoff=0, interest_saved=0.0)

    baseline = baseline_interest(debts, options.paid_epsilon)
    months = 0
    interest_paid = 0.0
    capped = False
    for snapshot in _iterate_months(debts, monthly_budget, options):
        months = snapshot.month
        interest_paid += snapshot.interest
        capped = snapshot.open_debts > 0

    if capped:
        logger.debug(
            "Payoff simulation hit the month cap",
            extra={"max_months": options.max_months, "monthly_budget": monthly_budget},
        )

    result = SimulationResult(
        months_to_payoff=months,
        interest_saved=baseline - interest_paid,
        total_interest_paid=interest_paid,
        baseline_interest=baseline,
        capped=capped,
    )
    logger.debug(
        "Payoff simulated",
        extra={
            "debt_count": len(debts),
            "monthly_budget": monthly_budget,
            "months": result.months_to_payoff,
            "interest_saved": result.interest_saved,
        },
    )
    return result


def compare_strategies(
    portfolio: Sequence[DebtRecord],
    monthly_budget: float,
    options: SimulationOptions | None = None,
) -> list[StrategyComparison]:
    """Simulate every non-custom strategy and rank them by months to payoff.

    Ties keep the strategy declaration order.
    """

    debts = list(portfolio)
    comparisons = [
        StrategyComparison(tag, simulate(order(debts, tag), monthly_budget, options))
        for tag in StrategyTag
        if tag is not StrategyTag.CUSTOM
    ]
    return sorted(comparisons, key=lambda item: item.result.months_to_payoff)


def plan(
    portfolio: Sequence[DebtRecord],
    monthly_budget: float,
    strategy: StrategyTag | None = None,
    options: SimulationOptions | None = None,
) -> PayoffPlan:
    """Order and simulate a portfolio, using the recommendation when no strategy is forced."""

    debts = list(portfolio)
    chosen = strategy if strategy is not None else recommend(debts)
    ordered = order(debts, chosen)
    return PayoffPlan(strategy=chosen, ordered=ordered, result=simulate(ordered, monthly_budget, options))


__all__ = [
    "DEFAULT_MAX_MONTHS",
    "DEFAULT_PAID_EPSILON",
    "DebtMonth",
    "InvalidMinimumPaymentError",
    "MonthSnapshot",
    "PayoffPlan",
    "SimulationOptions",
    "baseline_interest",
    "compare_strategies",
    "payoff_schedule",
    "plan",
    "simulate",
]
