from __future__ import annotations

import hmac
import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length
from ..core.exceptions import AuthenticationError, ValidationError
from ..storage.service import WorkspaceStorage

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AdminAuthService:
    """Single shared admin password for the workspace."""

    def __init__(self, storage: WorkspaceStorage, *, default_password: str = "admin123"):
        self._storage = storage
        self._default_password = default_password

    def verify(self, password: str) -> bool:
        if not password:
            return False
        stored = self._storage.get_admin_password_hash()
        if stored is None:
            return hmac.compare_digest(password.encode("utf-8"), self._default_password.encode("utf-8"))
        return check_password_hash(stored, password)

    def login(self, password: str) -> None:
        if not self.verify(password):
            logger.warning("failed admin login")
            raise AuthenticationError("Contraseña incorrecta")

    def change_password(self, current: str, new: str) -> None:
        if not self.verify(current):
            raise AuthenticationError("La contraseña actual no coincide")
        new = (new or "").strip()
        if not new:
            raise ValidationError("La nueva contraseña es obligatoria")
        require_min_length(new, "La nueva contraseña", MIN_PASSWORD_LENGTH)
        self._storage.set_admin_password_hash(generate_password_hash(new))
        logger.info("admin password changed")
