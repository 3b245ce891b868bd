"""Service module exports."""

from . import debts, import_csv, reports, strategy

__all__ = [
    "debts",
    "import_csv",
    "reports",
    "strategy",
]
