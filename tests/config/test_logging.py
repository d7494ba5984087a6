"""Tests for logging setup and the policy report entry point."""

import logging

from authrules.config.logging_config import configure_logging
from authrules.main import main


class TestConfigureLogging:
    """Test logging configuration."""

    def test_sets_package_level(self):
        """Test the package logger uses the requested level."""
        configure_logging("WARNING")
        assert logging.getLogger("authrules").level == logging.WARNING

        configure_logging("DEBUG")
        assert logging.getLogger("authrules").level == logging.DEBUG

    def test_package_logger_propagates(self):
        """Test records still reach root handlers."""
        configure_logging("INFO")
        assert logging.getLogger("authrules").propagate


class TestMain:
    """Test the policy report."""

    def test_logs_each_policy(self, caplog):
        """Test every configured field policy is logged."""
        with caplog.at_level(logging.INFO):
            main()

        assert "Validation rules for 'email'" in caplog.text
        assert "Validation rules for 'username'" in caplog.text
        assert "Validation rules for 'password'" in caplog.text
