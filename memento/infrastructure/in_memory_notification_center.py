"""In-memory NotificationCenter for the CLI and tests."""

import logging
from typing import Dict, List, Optional

from ..domain.errors import NotificationCenterError
from ..models.notifications import AuthorizationStatus, NotificationRequest

logger = logging.getLogger(__name__)


class InMemoryNotificationCenter:
    """Concrete NotificationCenter keeping pending requests in a dict.

    ``grant_on_request`` decides the answer to the permission prompt. Adding a
    request without permission fails the way the platform service does.
    """

    def __init__(
        self,
        status: AuthorizationStatus = AuthorizationStatus.NOT_DETERMINED,
        grant_on_request: bool = True,
    ) -> None:
        self.status = status
        self.grant_on_request = grant_on_request
        self._pending: Dict[str, NotificationRequest] = {}

    async def request_authorization(self) -> bool:
        if self.status == AuthorizationStatus.NOT_DETERMINED:
            self.status = (
                AuthorizationStatus.AUTHORIZED
                if self.grant_on_request
                else AuthorizationStatus.DENIED
            )
        return self.status.allows_delivery

    async def authorization_status(self) -> AuthorizationStatus:
        return self.status

    async def add(self, request: NotificationRequest) -> None:
        if not self.status.allows_delivery:
            raise NotificationCenterError("add", f"status is {self.status.value}")
        self._pending[request.identifier] = request
        logger.debug(f"Added pending notification {request.identifier}")

    async def remove_pending(self, identifiers: List[str]) -> None:
        for identifier in identifiers:
            self._pending.pop(identifier, None)

    async def pending_requests(self) -> List[NotificationRequest]:
        return list(self._pending.values())

    def get(self, identifier: str) -> Optional[NotificationRequest]:
        return self._pending.get(identifier)
