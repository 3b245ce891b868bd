"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from debtfree.config import BaseConfig
from debtfree.logging_config import JSONFormatter, get_logger, setup_logging
from debtfree.services.debts import SimulationOptions, simulate


def _record(level=logging.INFO, msg="Test message", exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.module = "test_module"
    record.funcName = "test_function"
    return record


def test_json_formatter():
    """JSONFormatter emits the core record fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(logging.ERROR, "boom", exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"]


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.months = 24

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"months": 24}


def test_setup_logging(tmp_path, monkeypatch):
    """setup_logging installs console and rotating JSON file handlers."""
    monkeypatch.setenv("DEBTFREE_DATA_DIR", str(tmp_path))
    config = BaseConfig()

    logger = setup_logging(config)

    assert logger.name == "debtfree"
    assert len(logger.handlers) == 2

    log_file = tmp_path / "logs" / "debtfree.log"
    assert log_file.exists()

    logger.warning("Test warning message")
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert len(lines) >= 2
    for line in lines:
        entry = json.loads(line)
        assert {"timestamp", "level", "message"} <= set(entry)


def test_setup_logging_is_repeatable(tmp_path, monkeypatch):
    monkeypatch.setenv("DEBTFREE_DATA_DIR", str(tmp_path))
    config = BaseConfig()

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


@pytest.mark.parametrize("dev_mode", [True, False])
def test_console_level_by_mode(tmp_path, monkeypatch, dev_mode):
    monkeypatch.setenv("DEBTFREE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DEBTFREE_DEV_MODE", "true" if dev_mode else "false")

    logger = setup_logging(BaseConfig())

    console = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(console) == 1
    assert console[0].level == (logging.INFO if dev_mode else logging.WARNING)


def test_get_logger_namespaces():
    assert get_logger("module1").name == "debtfree.module1"
    assert get_logger("debtfree.services.debts").name == "debtfree.services.debts"


def test_capped_simulation_is_logged(debt_factory, caplog):
    debt = debt_factory(balance=10000.0, rate=24.0, minimum=100.0)

    with caplog.at_level(logging.DEBUG, logger="debtfree"):
        simulate([debt], 100.0, SimulationOptions(max_months=6))

    capped = [r for r in caplog.records if "month cap" in r.getMessage()]
    assert capped
    assert all(r.levelno == logging.DEBUG for r in capped)
