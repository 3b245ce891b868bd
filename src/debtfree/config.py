"""Engine configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .models.debt import DEFAULT_MAX_MONTHS, DEFAULT_PAID_EPSILON, SimulationOptions

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


class BaseConfig:
    """Configuration shared by the CLI and library callers."""

    APP_NAME = "DebtFree"
    LOG_FILENAME = "debtfree.log"

    def __init__(self) -> None:
        self.DATA_DIR = Path(os.getenv("DEBTFREE_DATA_DIR", "instance")).expanduser()
        self.DEV_MODE = _env_bool("DEBTFREE_DEV_MODE", default=True)
        self.PAID_EPSILON = _env_float("DEBTFREE_PAID_EPSILON", DEFAULT_PAID_EPSILON)
        self.MAX_MONTHS = _env_int("DEBTFREE_MAX_MONTHS", DEFAULT_MAX_MONTHS)

    def simulation_options(self) -> SimulationOptions:
        """Expose simulator tuning for the payoff engine to consume."""

        return SimulationOptions(paid_epsilon=self.PAID_EPSILON, max_months=self.MAX_MONTHS)
