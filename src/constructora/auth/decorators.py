from __future__ import annotations

from functools import wraps

from flask import session

from ..common.http import json_error
from ..core.enums import Role


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if session.get("role") != Role.ADMIN.value:
            return json_error("Sesión requerida", 401)
        return view(*args, **kwargs)

    return wrapper
