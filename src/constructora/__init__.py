"""Constructora administrative backend.

Feature modules (attendance, employees, projects, finance, ...) with thin
Flask controllers over service and repository layers.
"""

from .main import create_app

__all__ = ["create_app"]
