"""Strategy recommendation and debt ordering."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from ..logging_config import get_logger
from ..models.debt import DebtRecord, StrategyTag

logger = get_logger(__name__)

HIGH_INTEREST_RATE = 15.0
LARGE_PORTFOLIO_TOTAL = 10_000.0
SMALL_BALANCE = 1_000.0
SMALL_DEBT_MIN_COUNT = 3
DOMINANT_SHARE = 0.5
HIGH_AVERAGE_RATE = 10.0


def _by_balance(debt: DebtRecord) -> float:
    return debt.balance


def _by_rate(debt: DebtRecord) -> float:
    return debt.annual_interest_rate_percent


# (sort key, descending); CUSTOM has no entry and keeps caller order.
_SORT_RULES: dict[StrategyTag, tuple[Callable[[DebtRecord], float], bool]] = {
    StrategyTag.SNOWBALL: (_by_balance, False),
    StrategyTag.LOWEST_BALANCE: (_by_balance, False),
    StrategyTag.AVALANCHE: (_by_rate, True),
    StrategyTag.HIGHEST_INTEREST: (_by_rate, True),
    StrategyTag.HIGHEST_BALANCE: (_by_balance, True),
}


def recommend(portfolio: Iterable[DebtRecord]) -> StrategyTag:
    """Pick a repayment strategy from the shape of the portfolio.

    Rules are checked in priority order and the first match wins:

    1. a rate above 15% with more than 10,000 owed in total -> avalanche
    2. a balance under 1,000 among three or more debts -> snowball
    3. one debt holding more than half of the total -> highest balance
    4. an average rate above 10% -> highest interest
    5. otherwise snowball

    Every rule is an aggregate over the portfolio, so input order never
    changes the answer. An empty portfolio yields snowball.
    """

    debts = list(portfolio)
    if not debts:
        return StrategyTag.SNOWBALL

    total_balance = sum(d.balance for d in debts)
    average_rate = sum(d.annual_interest_rate_percent for d in debts) / len(debts)

    if any(d.annual_interest_rate_percent > HIGH_INTEREST_RATE for d in debts) and (
        total_balance > LARGE_PORTFOLIO_TOTAL
    ):
        tag = StrategyTag.AVALANCHE
    elif any(d.balance < SMALL_BALANCE for d in debts) and len(debts) >= SMALL_DEBT_MIN_COUNT:
        tag = StrategyTag.SNOWBALL
    elif any(d.balance > total_balance * DOMINANT_SHARE for d in debts):
        tag = StrategyTag.HIGHEST_BALANCE
    elif average_rate > HIGH_AVERAGE_RATE:
        tag = StrategyTag.HIGHEST_INTEREST
    else:
        tag = StrategyTag.SNOWBALL

    logger.debug(
        "Recommended strategy",
        extra={
            "strategy": tag.value,
            "debt_count": len(debts),
            "total_balance": total_balance,
            "average_rate": average_rate,
        },
    )
    return tag


def order(portfolio: Sequence[DebtRecord], strategy: StrategyTag) -> list[DebtRecord]:
    """Return the debts arranged by payoff priority for ``strategy``.

    The sort is stable, so debts with equal keys keep their input order.
    """

    debts = list(portfolio)
    rule = _SORT_RULES.get(strategy)
    if rule is None:
        return debts
    key, descending = rule
    return sorted(debts, key=key, reverse=descending)


__all__ = ["order", "recommend"]
