"""Tests for logging setup and reminder event logging."""

import logging
import logging.handlers

from structlog.testing import capture_logs

from memento.utils.logging import log_reminder_event, setup_logging


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_file_handlers(self, tmp_path):
        setup_logging("DEBUG", log_to_file=True, logs_dir=tmp_path / "logs")
        root = logging.getLogger()
        rotating = [
            h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert sorted(h.baseFilename.rsplit("/", 1)[-1] for h in rotating) == [
            "app.log",
            "errors.log",
        ]
        assert (tmp_path / "logs").is_dir()

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.getLogger().handlers) == 1


class TestLogReminderEvent:
    def test_event_fields(self):
        with capture_logs() as logs:
            log_reminder_event("scheduled", identifier="daily", quote_id=6)
        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "Reminder scheduled"
        assert entry["action"] == "scheduled"
        assert entry["identifier"] == "daily"
        assert entry["quote_id"] == 6
        assert entry["log_level"] == "info"
        assert "timestamp" in entry
