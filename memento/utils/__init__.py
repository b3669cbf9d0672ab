"""Utility modules for memento."""

from .logging import log_reminder_event, setup_logging

__all__ = ["log_reminder_event", "setup_logging"]
