"""Value type exports."""

from .debt import (
    DEFAULT_MAX_MONTHS,
    DEFAULT_PAID_EPSILON,
    DebtCategory,
    DebtRecord,
    SimulationOptions,
    SimulationResult,
    StrategyComparison,
    StrategyTag,
)

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
