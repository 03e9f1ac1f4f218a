from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    normalize_decimal,
    normalize_mysql_date,
    unique_violation_as,
)
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, org_id, employee_id, day, method, lat, lng, device_label, note, created_at"


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(r["id"]),
        org_id=str(r["org_id"]),
        employee_id=str(r["employee_id"]),
        day=normalize_mysql_date(r["day"]),
        method=AttendanceMethod(r["method"]),
        lat=normalize_decimal(r.get("lat")),
        lng=normalize_decimal(r.get("lng")),
        device_label=r.get("device_label"),
        note=r.get("note"),
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_day(self, org_id: str, employee_id: str, day: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE org_id=%s AND employee_id=%s AND day=%s
                """,
                (org_id, employee_id, day),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def create(
        self,
        *,
        org_id: str,
        employee_id: str,
        day: date,
        method: AttendanceMethod,
        lat: Optional[float],
        lng: Optional[float],
        device_label: Optional[str] = None,
        note: Optional[str] = None,
    ) -> str:
        record_id = str(uuid.uuid4())
        with unique_violation_as("Already marked today"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records (id, org_id, employee_id, day, method, lat, lng, device_label, note)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                    """,
                    (record_id, org_id, employee_id, day, method.value, lat, lng, device_label, note),
                )
        return record_id

    def list_since(self, org_id: str, since: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE org_id=%s AND day>=%s
                ORDER BY day ASC
                """,
                (org_id, since),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
