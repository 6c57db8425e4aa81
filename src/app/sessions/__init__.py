"""Módulo de sessão local do usuário.

Exporta modelos e gerenciador de sessão.
"""

from app.sessions.manager import SessionManager
from app.sessions.models import (
    DEFAULT_PREFERENCES,
    Preferences,
    Session,
    UserIdentity,
    default_preferences,
    image_uri_from_base64,
)

__all__ = [
    "DEFAULT_PREFERENCES",
    "Preferences",
    "Session",
    "SessionManager",
    "UserIdentity",
    "default_preferences",
    "image_uri_from_base64",
]
