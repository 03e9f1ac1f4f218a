from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_decimal, unique_violation_as
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, org_id, worker_id, name, phone, dpi, position_title, daily_salary, active, created_at"


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        id=str(r["id"]),
        org_id=str(r["org_id"]),
        worker_id=str(r["worker_id"]),
        name=str(r["name"]),
        phone=r.get("phone"),
        dpi=r.get("dpi"),
        position_title=str(r["position_title"]),
        daily_salary=normalize_decimal(r.get("daily_salary")) or 0.0,
        active=bool(r.get("active", 1)),
        created_at=r.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_worker_id(self, org_id: str, worker_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE org_id=%s AND worker_id=%s",
                (org_id, worker_id),
            )
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def list_for_org(self, org_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE org_id=%s ORDER BY created_at ASC",
                (org_id,),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def recent_worker_ids(self, org_id: str, limit: int) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT worker_id FROM employees
                WHERE org_id=%s
                ORDER BY created_at DESC
                LIMIT %s
                """,
                (org_id, int(limit)),
            )
            return [str(r["worker_id"]) for r in fetchall(cur)]

    def create(
        self,
        *,
        org_id: str,
        worker_id: str,
        name: str,
        phone: Optional[str],
        dpi: Optional[str],
        position_title: str,
        daily_salary: float,
    ) -> str:
        employee_id = str(uuid.uuid4())
        with unique_violation_as("Worker ID already exists"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees (id, org_id, worker_id, name, phone, dpi, position_title, daily_salary, active)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, 1)
                    """,
                    (employee_id, org_id, worker_id, name, phone, dpi, position_title, daily_salary),
                )
        return employee_id
