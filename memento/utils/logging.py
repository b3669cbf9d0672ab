import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import structlog


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    logs_dir: Optional[Path] = None,
) -> None:
    """Set up logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to rotating files in addition to console
        logs_dir: Directory for log files (defaults to ./logs)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.set_exc_info,
            # JSON for file logs, readable output for the console
            (
                structlog.processors.JSONRenderer()
                if log_to_file
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if not log_to_file:
        return

    if logs_dir is None:
        logs_dir = Path("logs")
    logs_dir.mkdir(parents=True, exist_ok=True)

    app_handler = logging.handlers.RotatingFileHandler(
        logs_dir / "app.log", maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
    )
    app_handler.setLevel(logging.INFO)
    app_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
        )
    )
    root_logger.addHandler(app_handler)

    error_handler = logging.handlers.RotatingFileHandler(
        logs_dir / "errors.log", maxBytes=5 * 1024 * 1024, backupCount=10  # 5MB
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s - %(exc_info)s"
        )
    )
    root_logger.addHandler(error_handler)


def get_reminder_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger for reminder lifecycle events."""
    return structlog.get_logger(name or "reminders")


def log_reminder_event(
    action: str, logger: Optional[structlog.BoundLogger] = None, **details: Any
) -> None:
    """Record a reminder lifecycle event (scheduled, cancelled, denied, failed).

    Args:
        action: Short event name
        logger: Logger to use (creates one if not provided)
        **details: Event fields, e.g. identifier, trigger, quote_id
    """
    if logger is None:
        logger = get_reminder_logger()

    logger.info(
        f"Reminder {action}",
        action=action,
        timestamp=datetime.now().isoformat(),
        **details,
    )
