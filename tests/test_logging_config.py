"""
Test suite for logging configuration

Tests the JSON formatter, logger setup and structured action logging.
"""

import json
import logging
import sys
import pytest

from bank_account import config as config_module
from bank_account.accounts import BankAccount
from bank_account.config import reload_config
from bank_account.logging_config import JSONFormatter, get_logger, log_action, setup_logging


@pytest.fixture
def isolated_logging(monkeypatch):
    """Restore configuration and logger state after each test"""
    monkeypatch.setattr(config_module, "config", config_module.config)
    yield
    for name in ("bank_account", "bank_account.test"):
        logger = logging.getLogger(name)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


def make_record(message="hello", level=logging.INFO, **fields):
    record = logging.LogRecord("bank_account.test", level, __file__, 10, message, (), None)
    for key, value in fields.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test structured JSON output"""

    def test_basic_fields(self):
        """Test that a plain record renders the core fields only"""
        entry = json.loads(JSONFormatter().format(make_record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert entry["logger"] == "bank_account.test"
        assert "timestamp" in entry
        assert "action" not in entry
        assert "exception" not in entry

    def test_structured_fields(self):
        """Test that action, resource and extra are included when present"""
        record = make_record(action="deposit", resource="account",
                             correlation_id="abc-123", extra={"amount": 70})

        entry = json.loads(JSONFormatter().format(record))

        assert entry["action"] == "deposit"
        assert entry["resource"] == "account"
        assert entry["correlation_id"] == "abc-123"
        assert entry["extra"] == {"amount": 70}

    def test_exception_info(self):
        """Test that exception tracebacks are serialized"""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("bank_account.test", logging.ERROR, __file__, 10,
                                       "failed", (), exc_info=sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in entry["exception"]


class TestSetupLogging:
    """Test logger configuration"""

    def test_setup_logging_json(self, isolated_logging):
        """Test a single JSON handler is installed at the requested level"""
        logger = setup_logging("DEBUG", "bank_account.test")
        setup_logging("DEBUG", "bank_account.test")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_unknown_level_rejected(self, isolated_logging):
        """Test an unrecognised level name raises ValueError and installs nothing"""
        with pytest.raises(ValueError, match="Unknown log level: VERBOSE"):
            setup_logging("VERBOSE", "bank_account.test")

        assert logging.getLogger("bank_account.test").handlers == []

    def test_level_name_is_case_insensitive(self, isolated_logging):
        """Test lower case level names are accepted"""
        logger = setup_logging("warning", "bank_account.test")

        assert logger.level == logging.WARNING

    def test_setup_logging_text_format(self, isolated_logging, monkeypatch):
        """Test the text formatter is used when configured"""
        monkeypatch.setenv("BANK_ACCOUNT_LOG_FORMAT", "text")
        reload_config()

        logger = setup_logging(logger_name="bank_account.test")

        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_account_activity_logged_to_file(self, isolated_logging, monkeypatch, tmp_path):
        """Test account operations end up as JSON lines in the configured file"""
        log_file = tmp_path / "bank.log"
        monkeypatch.setenv("BANK_ACCOUNT_LOG_FILE", str(log_file))
        monkeypatch.setenv("BANK_ACCOUNT_LOG_FORMAT", "json")
        reload_config()

        logger = setup_logging("DEBUG")
        account = BankAccount(100)
        account.deposit(70)
        account.withdraw(500)
        for handler in logger.handlers:
            handler.flush()

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]

        assert [entry["action"] for entry in entries] == ["deposit", "withdraw"]
        assert entries[1]["level"] == "WARNING"
        assert entries[1]["resource"] == "account"
        assert entries[1]["logger"] == "bank_account.accounts"


class TestLogAction:
    """Test structured action logging"""

    def test_log_action_sets_fields(self, isolated_logging, caplog):
        """Test that log_action attaches structured fields to the record"""
        logger = get_logger("bank_account.test")

        with caplog.at_level(logging.INFO, logger="bank_account.test"):
            log_action(logger, "info", "Loan quoted", action="payment",
                       resource="loan", extra={"num_periods": 12})

        record = caplog.records[-1]
        assert record.getMessage() == "Loan quoted"
        assert record.action == "payment"
        assert record.resource == "loan"
        assert record.extra == {"num_periods": 12}
        assert not hasattr(record, "correlation_id")
