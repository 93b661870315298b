"""FastAPI dependency injection for configurator settings."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from smartwall.application import SessionSettings


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Server-wide defaults for requests that do not override them."""
    return SessionSettings()


SessionSettingsDep = Annotated[SessionSettings, Depends(get_session_settings)]
