from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Optional

from .constants import ATTENDANCE_WINDOW_MINUTES, ATTENDANCE_WINDOW_START, DEFAULT_TIMEZONE
from .exceptions import AuthorizationError, ConfigurationError


def _parse_hhmm(value: Any, default: time) -> time:
    if isinstance(value, time):
        return value
    if not value:
        return default
    hours, minutes = str(value).split(":")[:2]
    return time(int(hours), int(minutes))


@dataclass(frozen=True)
class PortalSettings:
    """Org-scoped values shared by the portal functions."""

    org_id: Optional[str] = None
    timezone: str = DEFAULT_TIMEZONE
    window_start: time = ATTENDANCE_WINDOW_START
    window_minutes: int = ATTENDANCE_WINDOW_MINUTES
    attendance_token: Optional[str] = None
    applications_token: Optional[str] = None
    admin_token: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Any) -> "PortalSettings":
        return cls(
            org_id=getattr(settings, "ORG_ID", None) or None,
            timezone=getattr(settings, "TIMEZONE", None) or DEFAULT_TIMEZONE,
            window_start=_parse_hhmm(getattr(settings, "ATTENDANCE_WINDOW_START", None), ATTENDANCE_WINDOW_START),
            window_minutes=int(getattr(settings, "ATTENDANCE_WINDOW_MINUTES", ATTENDANCE_WINDOW_MINUTES)),
            attendance_token=getattr(settings, "PORTAL_ATTENDANCE_TOKEN", None) or None,
            applications_token=getattr(settings, "PORTAL_APPLICATIONS_TOKEN", None) or None,
            admin_token=getattr(settings, "ADMIN_TOKEN", None) or None,
        )

    def require_org_id(self) -> str:
        if not self.org_id:
            raise ConfigurationError("Missing env: WM_ORG_ID")
        return self.org_id

    def require_admin_token(self) -> str:
        if not self.admin_token:
            raise ConfigurationError("Missing env: ADMIN_TOKEN")
        return self.admin_token

    def resolve_org(self, requested: Optional[str]) -> str:
        """Body orgId (default: configured org) must match the configured org."""
        expected = self.require_org_id()
        org_id = (requested if isinstance(requested, str) else expected).strip()
        if not org_id or org_id != expected:
            raise AuthorizationError("Invalid org")
        return org_id
