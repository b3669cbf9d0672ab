"""NotificationCenter port -- abstracts the OS-level local notification service."""

from typing import List, Protocol, runtime_checkable

from ...models.notifications import AuthorizationStatus, NotificationRequest


@runtime_checkable
class NotificationCenter(Protocol):
    """Requests permission, and adds or removes pending local notifications."""

    async def request_authorization(self) -> bool:
        """Prompt for alert+sound permission; return True when granted."""
        ...

    async def authorization_status(self) -> AuthorizationStatus:
        """Return the current permission state without prompting."""
        ...

    async def add(self, request: NotificationRequest) -> None:
        """Add a pending request, replacing one with the same identifier."""
        ...

    async def remove_pending(self, identifiers: List[str]) -> None:
        """Remove pending requests by identifier. Unknown identifiers are ignored."""
        ...

    async def pending_requests(self) -> List[NotificationRequest]: ...
