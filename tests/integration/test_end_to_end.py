"""End-to-end configurator sessions.

Drives a session the way the configurator page does: debounced typing, an
accessory selection, placement until the wall is full, then a plan replay
of the same design.
"""

import asyncio

import pytest

from smartwall.application import ConfiguratorSession, SessionSettings, WallSnapshot
from smartwall.application.config import load_config_from_dict, validate_config
from smartwall.domain import CompositionState, FitStatus


class TestConfiguratorSession:
    """A 5.7m living room wall with a TV."""

    @pytest.mark.asyncio
    async def test_typed_session(self) -> None:
        snapshots: list[WallSnapshot] = []

        with ConfiguratorSession(SessionSettings(debounce_ms=20)) as session:
            session.subscribe(snapshots.append)
            session.set_accessories(has_tv=True, has_fire=False)
            for text in ("5", "5.", "5.7", "5.7m"):
                session.enter_width(text)
            for text in ("2", "25", "250", "2500"):
                session.enter_height(text)
            assert not session.is_active

            await asyncio.sleep(0.1)
            assert session.is_active
            assert session.dimensions().hints

            assert session.add_module(1000)
            assert session.add_module(800)
            assert session.reserve_accessory("tv")
            assert session.add_module(800)
            assert session.add_module(1000)

            assert all(
                fit.status is FitStatus.TOO_LARGE for fit in session.palette()
            )
            assert session.completion().is_complete

        final = snapshots[-1]
        assert final.total_width_mm == 5600
        assert final.remaining_mm == 100
        assert final.state is CompositionState.POPULATED
        assert [m.width_mm for m in final.modules] == [1000, 800, 1000, 1000, 800, 1000]

    def test_fill_then_shrink_then_clear(self) -> None:
        with ConfiguratorSession(SessionSettings(debounce_ms=0)) as session:
            session.enter_width("5.7m")
            session.enter_height("2500")

            while session.add_module(1200):
                pass
            assert session.snapshot().total_width_mm == 4800
            assert session.add_module(600)

            session.enter_width("5m")
            assert session.state is CompositionState.OVER_CAPACITY
            assert not session.completion().is_complete

            session.clear_wall()
            assert session.state is CompositionState.EMPTY
            assert session.snapshot().remaining_mm == 5000

    def test_plan_replay_matches_session(self) -> None:
        config = load_config_from_dict(
            {
                "wall": {"width": "5.7m", "height": "2.5m"},
                "accessories": {"tv": True},
                "modules": [
                    {"width": 1000},
                    {"width": 800},
                    {"accessory": "tv"},
                    {"width": 800},
                    {"width": 1000},
                ],
                "settings": {"accessory_enforcement": "strict"},
            }
        )
        result = validate_config(config)

        assert result.is_valid
        assert result.exit_code == 0
