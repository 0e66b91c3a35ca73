"""
Unit tests for the Logfire monitoring module.

This test suite covers:
- Initialization with Logfire disabled, without token and enabled
- Graceful degradation when instrumentation fails
- The event helpers (API requests, backups, accounting sync)
"""

import sys
from unittest.mock import MagicMock, patch

import pytest

from loungeos.core import monitoring


@pytest.fixture
def fake_logfire():
    """Install a mock ``logfire`` module for the duration of a test."""
    module = MagicMock()
    with patch.dict(sys.modules, {"logfire": module}):
        yield module


class TestInitializeMonitoring:
    """Test initialize_monitoring under the different flags."""

    def test_disabled_does_nothing(self, fake_logfire):
        with patch.object(monitoring, "LOGFIRE_ENABLED", False):
            monitoring.initialize_monitoring()
        fake_logfire.configure.assert_not_called()

    def test_enabled_without_token_warns(self, fake_logfire):
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", ""),
            patch.object(monitoring, "logger") as mock_logger,
        ):
            monitoring.initialize_monitoring()
        fake_logfire.configure.assert_not_called()
        mock_logger.warning.assert_called_once()

    def test_enabled_configures_and_instruments(self, fake_logfire):
        app = MagicMock()
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
            patch.object(monitoring, "LOGFIRE_TRACE_SQLALCHEMY", True),
            patch.object(monitoring, "LOGFIRE_TRACE_FASTAPI", True),
        ):
            monitoring.initialize_monitoring(app)

        fake_logfire.configure.assert_called_once()
        assert fake_logfire.configure.call_args[1]["token"] == "token"
        fake_logfire.instrument_sqlalchemy.assert_called_once()
        fake_logfire.instrument_fastapi.assert_called_once_with(app=app)

    def test_fastapi_skipped_without_app(self, fake_logfire):
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
        ):
            monitoring.initialize_monitoring()
        fake_logfire.instrument_fastapi.assert_not_called()

    def test_instrumentation_failure_is_logged(self, fake_logfire):
        fake_logfire.instrument_sqlalchemy.side_effect = RuntimeError("no engine")
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
            patch.object(monitoring, "LOGFIRE_TRACE_SQLALCHEMY", True),
            patch.object(monitoring, "logger") as mock_logger,
        ):
            monitoring.initialize_monitoring()
        assert "no engine" in mock_logger.warning.call_args[0][0]


class TestEventHelpers:
    """Test the logging helpers forward their attributes."""

    def test_log_api_request(self, fake_logfire):
        monitoring.log_api_request(method="GET", path="/health", status_code=200, duration_ms=1.5)
        fake_logfire.info.assert_called_once_with(
            "API request completed", method="GET", path="/health", status_code=200, duration_ms=1.5
        )

    def test_log_backup(self, fake_logfire):
        monitoring.log_backup("b.db", 2048, "manual")
        assert fake_logfire.info.call_args[1] == {"filename": "b.db", "size": 2048, "backup_type": "manual"}

    def test_log_sync_with_context(self, fake_logfire):
        monitoring.log_sync("sales", 2, 3, {"skipped": 1})
        assert fake_logfire.info.call_args[1] == {"source": "sales", "synced": 2, "total": 3, "skipped": 1}

    def test_helper_degrades_to_debug(self, fake_logfire):
        fake_logfire.info.side_effect = RuntimeError("not configured")
        with patch.object(monitoring, "logger") as mock_logger:
            monitoring.log_backup("b.db", 1, "automatic")
        mock_logger.debug.assert_called_once()
