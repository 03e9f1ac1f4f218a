from __future__ import annotations

from ...core.exceptions import AuthorizationError
from .base import CheckInContext, CheckInStrategy


class SelfCheckInStrategy(CheckInStrategy):
    """Worker marks from the portal, only inside the daily window."""

    def authorize(self, ctx: CheckInContext) -> None:
        if not ctx.window.contains(ctx.now):
            raise AuthorizationError(f"Outside attendance window ({ctx.window.label()})")
