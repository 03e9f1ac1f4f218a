from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.settings import PortalSettings
from ..window import AttendanceWindow


@dataclass(frozen=True)
class CheckInContext:
    now: datetime
    window: AttendanceWindow
    settings: PortalSettings
    admin_token: Optional[str] = None


class CheckInStrategy(ABC):
    """Strategy Pattern: decide whether a mark may be taken right now."""

    @abstractmethod
    def authorize(self, ctx: CheckInContext) -> None:
        """Raise a DomainError when the mark is not allowed."""
        raise NotImplementedError
