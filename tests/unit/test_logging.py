"""Unit tests for logging setup."""

import logging
from unittest.mock import patch

from rpc_optimizer.shared.logging import LoggingManager


class TestLogging:
    """Test logging setup functions."""

    @patch('rpc_optimizer.shared.logging.logging')
    def test_setup_logging_default_level(self, mock_logging):
        """Test setup_logging with the configured level."""
        LoggingManager.setup_logging()

        # Check that handler was added to root logger
        mock_logging.getLogger().addHandler.assert_called_once()
        # Check that setLevel was called (level is set)
        mock_logging.getLogger().setLevel.assert_called()

    @patch('rpc_optimizer.shared.logging.logging')
    def test_setup_logging_custom_level(self, mock_logging):
        """Test setup_logging with custom DEBUG level."""
        LoggingManager.setup_logging("DEBUG")

        mock_logging.getLogger().setLevel.assert_called()
        mock_logging.getLogger().addHandler.assert_called_once()

    @patch('rpc_optimizer.shared.logging.logging')
    def test_setup_logging_invalid_level(self, mock_logging):
        """Test setup_logging with invalid level still configures the root logger."""
        LoggingManager.setup_logging("INVALID")

        mock_logging.getLogger().setLevel.assert_called()
        mock_logging.getLogger().addHandler.assert_called_once()

    @patch('rpc_optimizer.shared.logging.logging')
    def test_setup_logging_quiets_libraries(self, mock_logging):
        """Test noisy library loggers are looked up by name."""
        LoggingManager.setup_logging("INFO")

        requested = [call.args[0] for call in mock_logging.getLogger.call_args_list if call.args]
        assert "httpx" in requested
        assert "uvicorn" in requested

    def test_get_logger(self):
        """Test get_logger returns a logger instance."""
        logger = LoggingManager.get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_get_logger_different_names(self):
        """Test get_logger with different names."""
        logger1 = LoggingManager.get_logger("module1")
        logger2 = LoggingManager.get_logger("module2")

        assert logger1.name == "module1"
        assert logger2.name == "module2"
        assert logger1 is not logger2
