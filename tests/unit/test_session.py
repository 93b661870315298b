"""Unit tests for ConfiguratorSession."""

import asyncio

import pytest

from smartwall.application import ConfiguratorSession, SessionSettings, WallSnapshot
from smartwall.domain import (
    AccessoryEnforcement,
    AccessorySlot,
    CompositionState,
    FitStatus,
    WidthStatus,
)


class TestDimensionInput:
    """Tests for committing typed dimensions."""

    def test_envelope_set_when_both_valid(self, session: ConfiguratorSession) -> None:
        session.enter_width("5.7m")
        assert not session.is_active

        session.enter_height("2.5m")
        assert session.is_active
        assert session.envelope.width_mm == 5700
        assert session.envelope.height_mm == 2500

    def test_invalid_height_keeps_allocator_inactive(
        self, session: ConfiguratorSession
    ) -> None:
        session.enter_width("5000")
        session.enter_height("2199")

        assert not session.is_active
        assert session.state is CompositionState.EMPTY
        assert session.add_module(400) is False

    def test_oversize_needs_quotation(self, session: ConfiguratorSession) -> None:
        session.enter_width("7m")
        session.enter_height("2500")

        assert not session.is_active
        assert session.snapshot().is_oversize
        assert session.snapshot().width_status is WidthStatus.OVERSIZE

        session.accept_custom_quotation()
        assert session.quotation_accepted
        assert session.is_active
        assert session.envelope.width_mm == 7000

    def test_quotation_setting(self) -> None:
        settings = SessionSettings(debounce_ms=0, allow_custom_quotation=True)
        with ConfiguratorSession(settings) as session:
            session.enter_width("8000")
            session.enter_height("3000")
            assert session.is_active

    @pytest.mark.asyncio
    async def test_debounced_commit(self) -> None:
        with ConfiguratorSession(SessionSettings(debounce_ms=20)) as session:
            for text in ("5", "5.", "5.7", "5.7m"):
                session.enter_width(text)
            session.enter_height("2500")
            assert session.has_pending_input
            assert not session.is_active

            await asyncio.sleep(0.1)
            assert not session.has_pending_input
            assert session.envelope.width_mm == 5700

    @pytest.mark.asyncio
    async def test_flush(self) -> None:
        with ConfiguratorSession(SessionSettings(debounce_ms=10_000)) as session:
            session.enter_width("5700")
            session.enter_height("2500")
            session.flush()
            assert session.is_active

    @pytest.mark.asyncio
    async def test_raw_input_kept_while_pending(self) -> None:
        with ConfiguratorSession(SessionSettings(debounce_ms=10_000)) as session:
            session.enter_width("5.7")
            session.enter_height("2500mm")

            assert session.raw_width == "5.7"
            assert session.raw_height == "2500mm"
            assert session.envelope.width_mm is None

    def test_negative_debounce_rejected(self) -> None:
        with pytest.raises(ValueError):
            SessionSettings(debounce_ms=-1)


class TestEnvelopeChanges:
    """Tests for what happens to placed modules when dimensions change."""

    def test_valid_resize_keeps_modules(
        self, active_session: ConfiguratorSession
    ) -> None:
        for _ in range(4):
            assert active_session.add_module(1200)

        active_session.enter_width("4000")

        assert len(active_session.composition.modules) == 4
        assert active_session.state is CompositionState.OVER_CAPACITY
        assert active_session.snapshot().is_over_capacity
        assert not active_session.completion().is_complete

    def test_invalid_input_discards_modules(
        self, active_session: ConfiguratorSession
    ) -> None:
        active_session.add_module(1200)
        active_session.enter_width("abc")

        assert not active_session.is_active
        assert active_session.composition.is_empty

    def test_reset_dimensions(self, active_session: ConfiguratorSession) -> None:
        active_session.add_module(1200)
        active_session.reset_dimensions()

        assert not active_session.is_active
        assert active_session.composition.is_empty
        assert active_session.dimensions().width_status is WidthStatus.MISSING
        assert active_session.raw_width is None
        assert active_session.raw_height is None


class TestAllocation:
    """Tests for placement through the session."""

    def test_refusal_keeps_state(self, active_session: ConfiguratorSession) -> None:
        for _ in range(4):
            active_session.add_module(1200)

        assert active_session.add_module(1200) is False
        assert active_session.snapshot().total_width_mm == 4800
        assert active_session.add_module(600) is True
        assert active_session.snapshot().total_width_mm == 5400

    def test_reserve_accepts_slot_name(
        self, active_session: ConfiguratorSession
    ) -> None:
        assert active_session.reserve_accessory("tv")
        assert active_session.reserve_accessory(AccessorySlot.TV) is False
        assert len(active_session.composition.accessory_segments(AccessorySlot.TV)) == 2

    def test_remove_and_clear(self, active_session: ConfiguratorSession) -> None:
        active_session.add_module(1200)
        active_session.add_module(800)
        module_id = active_session.composition.modules[0].id

        assert active_session.remove_module("missing") is False
        assert active_session.remove_module(module_id) is True
        assert active_session.snapshot().total_width_mm == 800

        active_session.clear_wall()
        assert active_session.state is CompositionState.EMPTY

    def test_palette(self, active_session: ConfiguratorSession) -> None:
        for _ in range(4):
            active_session.add_module(1200)
        statuses = {fit.width_mm: fit.status for fit in active_session.palette()}

        assert statuses[800] is FitStatus.OPTIMAL
        assert statuses[1200] is FitStatus.TOO_LARGE

    def test_inactive_session_read_side(self, session: ConfiguratorSession) -> None:
        assert session.palette() == ()
        assert session.recommendations() == []
        assert session.snapshot().remaining_mm is None

    def test_strict_enforcement(self) -> None:
        settings = SessionSettings(
            debounce_ms=0, accessory_enforcement=AccessoryEnforcement.STRICT
        )
        with ConfiguratorSession(settings) as session:
            session.set_accessories(has_tv=True, has_fire=False)
            session.enter_width("5700")
            session.enter_height("2500")
            session.add_module(1200)
            assert not session.completion().is_complete

            session.reserve_accessory("tv")
            assert session.completion().is_complete


class TestSnapshots:
    """Tests for snapshot delivery."""

    def test_listener_receives_snapshots(
        self, active_session: ConfiguratorSession
    ) -> None:
        received: list[WallSnapshot] = []
        active_session.subscribe(received.append)

        active_session.add_module(1200)
        active_session.add_module(1200)

        assert [s.total_width_mm for s in received] == [1200, 2400]
        assert received[-1].remaining_mm == 3300

    def test_to_dict(self, active_session: ConfiguratorSession) -> None:
        active_session.set_accessories(has_tv=True, has_fire=False)
        for _ in range(4):
            active_session.add_module(1200)

        data = active_session.snapshot().to_dict()
        assert data["width_mm"] == 5700
        assert data["utilization_percent"] == 84.2
        assert data["remaining_mm"] == 900
        assert data["state"] == "populated"
        assert data["accessories"] == {"tv": True, "fire": False}
        assert len(data["modules"]) == 4

    def test_closed_session_rejects_input(self, session: ConfiguratorSession) -> None:
        session.close()
        with pytest.raises(RuntimeError):
            session.enter_width("5000")
