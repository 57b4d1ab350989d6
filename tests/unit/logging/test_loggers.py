"""
Unit tests for NullBoolLogger.
"""

import logging

import pytest

from nullbool.logging import get_logger
from nullbool.logging.loggers import NullBoolLogger


@pytest.mark.unit
class TestNullBoolLogger:
    """Test correlation IDs and context propagation."""

    def test_generates_correlation_id(self):
        logger = NullBoolLogger("nullbool.test")
        assert logger.correlation_id
        assert NullBoolLogger("nullbool.test", "fixed").correlation_id == "fixed"

    def test_records_carry_correlation_and_context(self, caplog):
        logger = NullBoolLogger("nullbool.test", "corr-1")
        logger.add_context(component="codec")

        with caplog.at_level(logging.DEBUG, logger="nullbool.test"):
            logger.debug("Rejected input", kind="int")

        record = caplog.records[-1]
        assert record.getMessage() == "Rejected input"
        assert record.correlation_id == "corr-1"
        assert record.extra_context == {"component": "codec", "kind": "int"}

    def test_exception_attaches_traceback(self, caplog):
        logger = NullBoolLogger("nullbool.test")

        with caplog.at_level(logging.ERROR, logger="nullbool.test"):
            try:
                raise ValueError("boom")
            except ValueError:
                logger.exception("Failed")

        assert caplog.records[-1].exc_info is not None

    def test_with_context_copies(self):
        logger = NullBoolLogger("nullbool.test", "corr-2")
        logger.add_context(a=1)

        child = logger.with_context(b=2)

        assert child.correlation_id == "corr-2"
        assert child.extra_context == {"a": 1, "b": 2}
        assert logger.extra_context == {"a": 1}

    def test_get_logger_helper(self):
        logger = get_logger("nullbool.helper")
        assert isinstance(logger, NullBoolLogger)
        assert logger.logger.name == "nullbool.helper"
