"""
Test suite for logging_config module

Tests JSON formatting and structured action logging from ledger operations.
"""

import io
import json
import logging

import pytest

from banco_ledger.accounts import AccountKind
from banco_ledger.directory import AccountDirectory
from banco_ledger.errors import InsufficientFundsError
from banco_ledger.logging_config import JSONFormatter, setup_logging, get_logger, log_action


@pytest.fixture
def captured_logs():
    """Route the banco logger into a buffer with JSON formatting"""
    logger = setup_logging(level="DEBUG")
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)
    yield stream
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def read_entries(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestJSONFormatter:
    """Test JSON output"""

    def test_format_drops_empty_fields(self):
        record = logging.LogRecord("banco.test", logging.INFO, __file__, 1, "hello", (), None)

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "hello"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "banco.test"
        assert "action" not in entry

    def test_format_includes_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            import sys
            record = logging.LogRecord("banco", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad" in entry["exception"]


class TestSetupLogging:

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(level="LOUD", logger_name="banco.invalid")

    def test_text_format(self):
        logger = setup_logging(level="INFO", logger_name="banco.text", fmt="text")
        try:
            assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        finally:
            logger.handlers.clear()

    def test_log_file(self, tmp_path):
        path = tmp_path / "banco.log"
        logger = setup_logging(level="INFO", logger_name="banco.file", log_file=str(path))
        try:
            log_action(logger, "info", "written", action="test")
            logger.handlers[0].flush()
            entry = json.loads(path.read_text(encoding="utf-8").splitlines()[0])
            assert entry["action"] == "test"
        finally:
            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)


class TestActionLogging:
    """Test structured events emitted by ledger operations"""

    def test_log_action_fields(self, captured_logs):
        log_action(get_logger("banco.test"), "info", "did something",
                   action="act", resource="account:1", extra={"amount": "5"})

        entry = read_entries(captured_logs)[-1]
        assert entry["message"] == "did something"
        assert entry["action"] == "act"
        assert entry["resource"] == "account:1"
        assert entry["extra"] == {"amount": "5"}

    def test_ledger_operations_are_logged(self, captured_logs):
        directory = AccountDirectory()
        account = directory.create("Ana", AccountKind.CHECKING, 10)
        account.deposit(5)
        with pytest.raises(InsufficientFundsError):
            account.withdraw(100)

        actions = [entry.get("action") for entry in read_entries(captured_logs)]
        assert actions == ["account_created", "deposit", "withdraw_rejected"]
