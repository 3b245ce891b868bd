"""CSV ingestion for debt portfolios."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd

from ..logging_config import get_logger
from ..models.debt import DebtCategory, DebtRecord

logger = get_logger(__name__)


@dataclass(slots=True)
class ColumnMapping:
    """Maps debt fields to CSV headers (compared lowercase)."""

    balance: str = "balance"
    rate: str = "rate"
    minimum: str = "minimum"
    id: str | None = "id"
    name: str | None = "name"
    category: str | None = "category"


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file into a DataFrame with consistent column casing."""

    frame = pd.read_csv(file_path, encoding=encoding)
    frame.columns = [str(c).strip().lower() for c in frame.columns]
    return frame


def _get(row: Mapping, column: str | None) -> object:
    if column is None:
        return None
    return row.get(column.strip().lower())


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value)) or (
        isinstance(value, str) and not value.strip()
    )


def _parse_category(raw: object) -> DebtCategory:
    if _is_blank(raw):
        return DebtCategory.OTHER
    text = str(raw).strip().lower()
    for category in DebtCategory:
        if text in {category.value.lower(), category.name.lower()}:
            return category
    return DebtCategory.OTHER


def build_debts(*, rows: Iterable[Mapping], mapping: ColumnMapping) -> list[DebtRecord]:
    """Convert dict-like rows into debt records.

    Rows with a zero balance are already paid and skipped. A row whose
    numeric fields are missing, unparseable or negative raises
    ``ValueError`` naming the row.
    """

    debts: list[DebtRecord] = []
    for index, row in enumerate(rows, start=1):
        try:
            balance = float(_get(row, mapping.balance))
            rate = float(_get(row, mapping.rate))
            minimum = float(_get(row, mapping.minimum))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Row {index}: balance, rate and minimum must be numbers") from exc
        if any(pd.isna(v) for v in (balance, rate, minimum)):
            raise ValueError(f"Row {index}: balance, rate and minimum are required")

        if min(balance, rate, minimum) < 0:
            raise ValueError(f"Row {index}: balance, rate and minimum must not be negative")
        if balance == 0:
            logger.debug("Skipping paid debt", extra={"row": index})
            continue

        debt_id: object = index
        if mapping.id and not _is_blank(_get(row, mapping.id)):
            debt_id = str(_get(row, mapping.id)).strip()
        name = ""
        if mapping.name and not _is_blank(_get(row, mapping.name)):
            name = str(_get(row, mapping.name)).strip()
        category = _parse_category(_get(row, mapping.category)) if mapping.category else DebtCategory.OTHER

        debts.append(
            DebtRecord(
                id=debt_id,
                balance=balance,
                annual_interest_rate_percent=rate,
                minimum_payment=minimum,
                name=name,
                category=category,
            )
        )
    return debts


def load_debts(csv_path: Path, mapping: ColumnMapping | None = None) -> list[DebtRecord]:
    """Read a debt portfolio from a CSV file."""

    mapping = mapping or ColumnMapping()
    frame = normalize_frame(file_path=csv_path)
    rows = [{c: r[c] for c in frame.columns} for _, r in frame.iterrows()]
    debts = build_debts(rows=rows, mapping=mapping)
    logger.info("Loaded debts", extra={"path": str(csv_path), "count": len(debts)})
    return debts
