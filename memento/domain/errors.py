"""
Typed domain errors for memento.

Most failure paths in the countdown core degrade to a safe default instead of
raising. The errors below cover the few cases where a caller (or the
scheduler wrapping an adapter) needs to tell failure modes apart.
"""


class DomainError(Exception):
    """Base class for all domain-specific errors."""


# ---------------------------------------------------------------------------
# Quote corpus
# ---------------------------------------------------------------------------


class EmptyCorpusError(DomainError):
    """A quote corpus was constructed without any quotes."""

    def __init__(self, source: str = "corpus") -> None:
        self.source = source
        super().__init__(f"Quote corpus from {source} contains no quotes")


class QuoteCorpusLoadError(DomainError):
    """The packaged quote data could not be read or failed validation."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load quotes from {path}: {reason}")


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


class NotificationCenterError(DomainError):
    """The notification subsystem rejected or failed a request."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail
        message = f"Notification center failed during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
