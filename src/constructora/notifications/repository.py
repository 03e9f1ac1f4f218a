from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import NotificationType


class NotificationRepository(Protocol):
    def create(
        self,
        *,
        org_id: str,
        title: str,
        message: str,
        type: NotificationType,
        target_user_id: Optional[str] = None,
    ) -> str:
        raise NotImplementedError
