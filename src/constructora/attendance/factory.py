from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceMethod
from .strategies.base import CheckInStrategy
from .strategies.emergency_strategy import EmergencyCheckInStrategy
from .strategies.self_strategy import SelfCheckInStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the check-in rules for a marking method."""

    def for_method(self, method: AttendanceMethod) -> CheckInStrategy:
        if method == AttendanceMethod.EMERGENCY:
            return EmergencyCheckInStrategy()
        return SelfCheckInStrategy()
