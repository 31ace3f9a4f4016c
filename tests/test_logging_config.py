"""
Tests for logging configuration.
"""
import logging

from freshora.utils.logging import get_logger, setup_logging


class TestLoggingConfiguration:
    def test_explicit_level(self):
        setup_logging(level="ERROR")

        assert logging.getLogger("freshora").level == logging.ERROR

    def test_level_is_case_insensitive(self):
        setup_logging(level="debug")

        assert logging.getLogger("freshora").level == logging.DEBUG

    def test_invalid_level_defaults_to_info(self):
        setup_logging(level="INVALID_LEVEL")

        assert logging.getLogger("freshora").level == logging.INFO

    def test_noisy_libraries_are_quieted(self):
        setup_logging(level="INFO")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("kombu").level == logging.WARNING

    def test_module_loggers_share_package_hierarchy(self):
        setup_logging(level="WARNING")

        logger = get_logger("freshora.services.order_service")
        assert logger.getEffectiveLevel() == logging.WARNING
