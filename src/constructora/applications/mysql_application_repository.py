from __future__ import annotations

import json
import uuid
from typing import Any, Optional, Sequence

from ..core.enums import ApplicationStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import CandidateApplication
from .repository import ApplicationRepository


def _json_or_none(value: Any) -> Optional[str]:
    return None if value is None else json.dumps(value, ensure_ascii=False)


def _load_json(value: Any) -> Any:
    if value is None or not isinstance(value, (str, bytes)):
        return value
    return json.loads(value)


class MySQLApplicationRepository(ApplicationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        org_id: str,
        name: str,
        phone: Optional[str],
        dpi: str,
        experience: Optional[str],
        position_applied: str,
        contract_data: Optional[Any],
        source: str,
        meta: Optional[Any],
    ) -> str:
        application_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO candidate_applications
                    (id, org_id, name, phone, dpi, experience, position_applied, contract_data, source, meta)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    application_id,
                    org_id,
                    name,
                    phone,
                    dpi,
                    experience,
                    position_applied,
                    _json_or_none(contract_data),
                    source,
                    _json_or_none(meta),
                ),
            )
        return application_id

    def list_for_org(self, org_id: str) -> Sequence[CandidateApplication]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, org_id, name, phone, dpi, experience, position_applied, status,
                       contract_data, source, meta, submitted_at
                FROM candidate_applications
                WHERE org_id=%s
                ORDER BY submitted_at DESC
                """,
                (org_id,),
            )
            return [
                CandidateApplication(
                    id=str(r["id"]),
                    org_id=str(r["org_id"]),
                    name=str(r["name"]),
                    phone=r.get("phone"),
                    dpi=str(r["dpi"]),
                    experience=r.get("experience"),
                    position_applied=str(r["position_applied"]),
                    status=ApplicationStatus(r["status"]),
                    contract_data=_load_json(r.get("contract_data")),
                    source=str(r.get("source") or ""),
                    meta=_load_json(r.get("meta")),
                    submitted_at=r.get("submitted_at"),
                )
                for r in fetchall(cur)
            ]

    def update_status(self, *, org_id: str, application_id: str, status: ApplicationStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE candidate_applications SET status=%s WHERE org_id=%s AND id=%s",
                (status.value, org_id, application_id),
            )
            return cur.rowcount > 0
