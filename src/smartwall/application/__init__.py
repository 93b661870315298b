"""Application layer - configurator sessions and wall plans."""

from .debounce import DEFAULT_DEBOUNCE_SECONDS, Debouncer
from .dtos import WallSnapshot
from .session import ConfiguratorSession, SessionSettings

__all__ = [
    "DEFAULT_DEBOUNCE_SECONDS",
    "ConfiguratorSession",
    "Debouncer",
    "SessionSettings",
    "WallSnapshot",
]
