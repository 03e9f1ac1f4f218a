from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import NotificationType
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, notifications: NotificationRepository):
        self._notifications = notifications

    def notify_best_effort(
        self,
        *,
        org_id: str,
        title: str,
        message: str,
        type: NotificationType = NotificationType.INFO,
    ) -> Optional[str]:
        """Insert a notification; failures are logged and never reach the caller."""
        try:
            return self._notifications.create(org_id=org_id, title=title, message=message, type=type)
        except Exception:
            logger.warning("notification %r could not be stored", title, exc_info=True)
            return None
