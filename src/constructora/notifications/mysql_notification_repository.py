from __future__ import annotations

import uuid
from typing import Optional

from ..core.enums import NotificationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .repository import NotificationRepository


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        org_id: str,
        title: str,
        message: str,
        type: NotificationType,
        target_user_id: Optional[str] = None,
    ) -> str:
        notification_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications (id, org_id, title, message, type, target_user_id)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (notification_id, org_id, title, message, type.value, target_user_id),
            )
        return notification_id
