from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from ..core.constants import SPANISH_MONTHS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or a longer ISO timestamp) into date."""
    return datetime.strptime(value[:10], "%Y-%m-%d").date()


def now_in_zone(tz_name: str) -> datetime:
    """Current wall-clock time in the given IANA zone.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(ZoneInfo(tz_name))


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def spanish_month(value: date) -> str:
    return SPANISH_MONTHS[value.month - 1]
