from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Rol de sesión del espacio de trabajo administrativo."""

    ADMIN = "admin"


class AttendanceMethod(str, Enum):
    """Forma en que se registró la asistencia."""

    SELF = "SELF"
    EMERGENCY = "EMERGENCY"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class PresenceStatus(str, Enum):
    """IN cuando el empleado ya marcó hoy."""

    IN = "IN"
    OUT = "OUT"


class ApplicationStatus(str, Enum):
    """Estado de una postulación tal como se guarda en la base de datos."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    def to_ui(self) -> str:
        return "ACCEPTED" if self is ApplicationStatus.APPROVED else self.value

    @classmethod
    def from_ui(cls, value: str) -> "ApplicationStatus":
        value = (value or "").strip().upper()
        if value == "ACCEPTED":
            return cls.APPROVED
        return cls(value)


class NotificationType(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class ProjectStatus(str, Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    PAUSED = "PAUSED"
    STOPPED = "STOPPED"
    EXECUTED = "EXECUTED"
    PRELIMINARY = "PRELIMINARY"


class Typology(str, Enum):
    RESIDENCIAL = "RESIDENCIAL"
    COMERCIAL = "COMERCIAL"
    INDUSTRIAL = "INDUSTRIAL"
    CIVIL = "CIVIL"
    PUBLICA = "PUBLICA"


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class PortalMode(str, Enum):
    """Modo del portal público al que apunta un código QR."""

    ATTENDANCE = "ATTENDANCE"
    APPLY = "APPLY"
