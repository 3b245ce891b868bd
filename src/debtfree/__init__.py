"""DebtFree payoff planning engine."""

from __future__ import annotations

from .config import BaseConfig
from .models import DebtCategory, DebtRecord, SimulationResult, StrategyComparison, StrategyTag
from .services.debts import (
    InvalidMinimumPaymentError,
    SimulationOptions,
    compare_strategies,
    payoff_schedule,
    plan,
    simulate,
)
from .services.strategy import order, recommend

__all__ = [
    "BaseConfig",
    "DebtCategory",
    "DebtRecord",
    "InvalidMinimumPaymentError",
    "SimulationOptions",
    "SimulationResult",
    "StrategyComparison",
    "StrategyTag",
    "compare_strategies",
    "order",
    "payoff_schedule",
    "plan",
    "recommend",
    "simulate",
]
