from __future__ import annotations

import hmac

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from theme_editor.config import Settings, get_settings
from theme_editor.core.errors import NotAuthorized
from theme_editor.core.ports.root import RootDirectoryProvider
from theme_editor.models import AuthContext
from theme_editor.roots import StaticRootProvider

_settings: Settings | None = None
_bearer = HTTPBearer(auto_error=False)


def get_app_settings() -> Settings:
    """Return the process-wide ``Settings``, reading the environment on first call."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = get_settings()
    return _settings


def get_root_provider(settings: Settings = Depends(get_app_settings)) -> RootDirectoryProvider:
    return StaticRootProvider(settings.root)


def get_auth_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_app_settings),
) -> AuthContext:
    """Turn the bearer token into an explicit capability. No configured token means nobody gets in."""
    if credentials is None:
        raise NotAuthorized.unauthenticated()
    if settings.api_token is None:
        return AuthContext.denied(subject="bearer")
    if not hmac.compare_digest(credentials.credentials.encode("utf-8"), settings.api_token.encode("utf-8")):
        return AuthContext.denied(subject="bearer")
    return AuthContext.trusted(subject="bearer")
