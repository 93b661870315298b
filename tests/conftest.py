"""Pytest configuration and shared fixtures for smartwall tests."""

from __future__ import annotations

import pytest

from smartwall.application import ConfiguratorSession, SessionSettings
from smartwall.domain import ModuleSegment, WallComposition, WallEnvelope


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that wait on real timers")


@pytest.fixture
def envelope() -> WallEnvelope:
    """The 5.7m x 2.5m wall used throughout the product examples."""
    return WallEnvelope(width_mm=5700, height_mm=2500)


@pytest.fixture
def four_large_modules() -> WallComposition:
    """Four 1200mm modules: 4800mm placed, 900mm remaining on a 5700mm wall."""
    return WallComposition(
        modules=tuple(ModuleSegment(id=f"m{i}", width_mm=1200) for i in range(1, 5))
    )


@pytest.fixture
def session() -> ConfiguratorSession:
    """Session that commits dimension input synchronously."""
    with ConfiguratorSession(SessionSettings(debounce_ms=0)) as session:
        yield session


@pytest.fixture
def active_session(session: ConfiguratorSession) -> ConfiguratorSession:
    """Synchronous session with a 5700 x 2500mm wall committed."""
    session.enter_width("5.7m")
    session.enter_height("2500")
    return session
