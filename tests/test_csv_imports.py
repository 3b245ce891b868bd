"""Tests for loading debt portfolios from CSV files."""

from __future__ import annotations

from pathlib import Path

import pytest

from debtfree.models.debt import DebtCategory
from debtfree.services.import_csv import ColumnMapping, build_debts, load_debts


def _write_csv(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "debts.csv"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadDebts:
    def test_loads_rows_into_records(self, tmp_path):
        path = _write_csv(
            tmp_path,
            "id,name,balance,rate,minimum,category\n"
            "visa,Visa Card,2500.50,19.99,75,Credit Card\n"
            "auto,Car Loan,8000,6.5,220,car_loan\n",
        )

        debts = load_debts(path)

        assert [d.id for d in debts] == ["visa", "auto"]
        assert debts[0].name == "Visa Card"
        assert debts[0].balance == pytest.approx(2500.50)
        assert debts[0].annual_interest_rate_percent == pytest.approx(19.99)
        assert debts[0].category is DebtCategory.CREDIT_CARD
        assert debts[1].category is DebtCategory.CAR_LOAN

    def test_headers_are_case_insensitive(self, tmp_path):
        path = _write_csv(tmp_path, " Balance ,RATE,Minimum\n1200,5,40\n")

        debts = load_debts(path)

        assert len(debts) == 1
        assert debts[0].minimum_payment == pytest.approx(40.0)

    def test_missing_id_falls_back_to_row_number(self, tmp_path):
        path = _write_csv(tmp_path, "balance,rate,minimum\n1200,5,40\n300,9,25\n")

        assert [d.id for d in load_debts(path)] == [1, 2]

    def test_paid_rows_are_skipped(self, tmp_path):
        path = _write_csv(tmp_path, "id,balance,rate,minimum\na,0,5,0\nb,900,5,30\n")

        assert [d.id for d in load_debts(path)] == ["b"]

    def test_negative_balance_names_the_row(self, tmp_path):
        path = _write_csv(tmp_path, "id,balance,rate,minimum\na,-500,10,50\nb,1000,5,50\n")

        with pytest.raises(ValueError, match="Row 1.*negative"):
            load_debts(path)

    def test_negative_minimum_names_the_row(self, tmp_path):
        path = _write_csv(tmp_path, "balance,rate,minimum\n900,5,30\n400,5,-10\n")

        with pytest.raises(ValueError, match="Row 2"):
            load_debts(path)

    def test_unknown_category_becomes_other(self, tmp_path):
        path = _write_csv(tmp_path, "balance,rate,minimum,category\n900,5,30,Timeshare\n")

        assert load_debts(path)[0].category is DebtCategory.OTHER

    def test_non_numeric_value_names_the_row(self, tmp_path):
        path = _write_csv(tmp_path, "balance,rate,minimum\n900,5,30\nlots,5,30\n")

        with pytest.raises(ValueError, match="Row 2"):
            load_debts(path)

    def test_blank_value_is_rejected(self, tmp_path):
        path = _write_csv(tmp_path, "balance,rate,minimum\n900,,30\n")

        with pytest.raises(ValueError, match="Row 1"):
            load_debts(path)


class TestBuildDebts:
    def test_custom_mapping(self):
        rows = [{"owed": "450", "apr": "12.5", "due": "25", "label": "Dentist"}]
        mapping = ColumnMapping(
            balance="Owed", rate="APR", minimum="due", id=None, name="label", category=None
        )

        debts = build_debts(rows=rows, mapping=mapping)

        assert debts[0].id == 1
        assert debts[0].name == "Dentist"
        assert debts[0].balance == pytest.approx(450.0)

    def test_missing_required_column_raises(self):
        with pytest.raises(ValueError):
            build_debts(rows=[{"balance": "100", "rate": "5"}], mapping=ColumnMapping())
