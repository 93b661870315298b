"""Session-scoped configurator controller.

One ConfiguratorSession holds the state of a single customer's interaction:
the typed dimensions, the committed WallEnvelope, the WallComposition and
the accessory selections. All transitions delegate to the pure domain
functions; the session only decides when they run and keeps the result.

Dimension input goes through a trailing-edge debounce before it reaches the
envelope. With the default 250ms delay the session must be driven from an
asyncio event loop; use ``debounce_ms=0`` to commit synchronously.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from smartwall.application.debounce import Debouncer
from smartwall.application.dtos import WallSnapshot
from smartwall.domain import (
    AccessoryEnforcement,
    AccessoryRequirements,
    AccessorySlot,
    CandidateFit,
    CompletionReport,
    DimensionCheck,
    ModuleConfiguration,
    WallComposition,
    WallEnvelope,
    WidthStatus,
    add_module,
    check_completion,
    check_dimensions,
    classify_palette,
    clear_wall,
    composition_state,
    compute_utilization,
    normalize_dimension,
    recommend_modules,
    remove_module,
    reserve_accessory,
)
from smartwall.domain.value_objects import CompositionState, HeightStatus

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[WallSnapshot], None]


@dataclass(frozen=True)
class SessionSettings:
    """Behaviour switches for a configurator session.

    Attributes:
        debounce_ms: Quiet period before typed dimensions are committed.
        accessory_enforcement: Whether missing accessory pairs block completion.
        allow_custom_quotation: Start with the custom quotation flow accepted,
            so widths up to 10000mm activate the allocator.
    """

    debounce_ms: int = 250
    accessory_enforcement: AccessoryEnforcement = AccessoryEnforcement.ADVISORY
    allow_custom_quotation: bool = False

    def __post_init__(self) -> None:
        if self.debounce_ms < 0:
            raise ValueError("debounce_ms cannot be negative")


class ConfiguratorSession:
    """Owns the envelope and composition for one configurator session.

    Example:
        >>> session = ConfiguratorSession(SessionSettings(debounce_ms=0))
        >>> session.enter_width("5.7m")
        >>> session.enter_height("2500")
        >>> session.add_module(1200)
        True
        >>> session.snapshot().total_width_mm
        1200
    """

    def __init__(
        self,
        settings: SessionSettings | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.settings = settings or SessionSettings()
        self._raw_width: str | int | float | None = None
        self._raw_height: str | int | float | None = None
        self._width_mm: int | None = None
        self._height_mm: int | None = None
        self._envelope = WallEnvelope.empty()
        self._composition = WallComposition()
        self._requirements = AccessoryRequirements()
        self._quotation_accepted = self.settings.allow_custom_quotation
        self._listeners: list[SnapshotListener] = []

        delay = self.settings.debounce_ms / 1000
        self._width_debouncer = Debouncer(delay, self._commit_width, loop=loop)
        self._height_debouncer = Debouncer(delay, self._commit_height, loop=loop)

    def __enter__(self) -> "ConfiguratorSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def envelope(self) -> WallEnvelope:
        return self._envelope

    @property
    def composition(self) -> WallComposition:
        return self._composition

    @property
    def requirements(self) -> AccessoryRequirements:
        return self._requirements

    @property
    def raw_width(self) -> str | int | float | None:
        """Width exactly as last typed, committed or not."""
        return self._raw_width

    @property
    def raw_height(self) -> str | int | float | None:
        """Height exactly as last typed, committed or not."""
        return self._raw_height

    @property
    def quotation_accepted(self) -> bool:
        return self._quotation_accepted

    @property
    def is_active(self) -> bool:
        """True once both dimensions are committed and the allocator runs."""
        return self._envelope.is_set

    @property
    def has_pending_input(self) -> bool:
        return self._width_debouncer.pending or self._height_debouncer.pending

    @property
    def state(self) -> CompositionState:
        if not self.is_active:
            return CompositionState.EMPTY
        return composition_state(self._composition, self._envelope)

    def dimensions(self) -> DimensionCheck:
        """Validation of the last committed dimension input."""
        return check_dimensions(self._width_mm, self._height_mm, self._requirements)

    def snapshot(self) -> WallSnapshot:
        check = self.dimensions()
        return WallSnapshot.build(
            self._envelope,
            self._composition,
            width_status=check.width_status,
            height_status=check.height_status,
            requirements=self._requirements,
        )

    def palette(self) -> tuple[CandidateFit, ...]:
        """Fit status of each catalog width; empty while inactive."""
        if not self.is_active:
            return ()
        return classify_palette(self._composition, self._envelope)

    def completion(self) -> CompletionReport:
        return check_completion(
            self._composition,
            self._envelope,
            self._requirements,
            self.settings.accessory_enforcement,
        )

    def recommendations(self) -> list[ModuleConfiguration]:
        if self._envelope.width_mm is None:
            return []
        return recommend_modules(self._envelope.width_mm, self._requirements)

    def subscribe(self, listener: SnapshotListener) -> None:
        """Call listener with a fresh snapshot after every state change."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Dimension input
    # ------------------------------------------------------------------

    def enter_width(self, raw: str | int | float | None) -> None:
        """Record typed width; committed after the debounce period."""
        self._raw_width = raw
        self._width_debouncer.trigger(raw)

    def enter_height(self, raw: str | int | float | None) -> None:
        """Record typed height; committed after the debounce period."""
        self._raw_height = raw
        self._height_debouncer.trigger(raw)

    def flush(self) -> None:
        """Commit pending dimension input immediately."""
        self._width_debouncer.flush()
        self._height_debouncer.flush()

    def set_accessories(self, has_tv: bool, has_fire: bool) -> None:
        self._requirements = AccessoryRequirements(has_tv=has_tv, has_fire=has_fire)
        self._notify()

    def accept_custom_quotation(self) -> None:
        """Let oversize widths (up to 10000mm) activate the allocator."""
        if self._quotation_accepted:
            return
        self._quotation_accepted = True
        logger.info("Custom quotation flow accepted")
        self._refresh_envelope()

    def reset_dimensions(self) -> None:
        """Forget typed dimensions; the composition is discarded with them."""
        self._width_debouncer.cancel()
        self._height_debouncer.cancel()
        self._raw_width = self._raw_height = None
        self._width_mm = self._height_mm = None
        self._refresh_envelope()

    def _commit_width(self, raw: str | int | float | None) -> None:
        self._width_mm = normalize_dimension(raw)
        logger.debug(f"Committed width {raw!r} -> {self._width_mm}")
        self._refresh_envelope()

    def _commit_height(self, raw: str | int | float | None) -> None:
        self._height_mm = normalize_dimension(raw)
        logger.debug(f"Committed height {raw!r} -> {self._height_mm}")
        self._refresh_envelope()

    def _usable_width(self, check: DimensionCheck) -> bool:
        if check.width_status is WidthStatus.VALID:
            return True
        return check.width_status is WidthStatus.OVERSIZE and self._quotation_accepted

    def _refresh_envelope(self) -> None:
        check = self.dimensions()
        if check.is_oversize and not self._quotation_accepted:
            logger.info(
                f"Width {check.width_mm}mm exceeds the standard catalog; "
                "custom quotation required"
            )

        if self._usable_width(check) and check.height_status is HeightStatus.VALID:
            envelope = WallEnvelope(width_mm=check.width_mm, height_mm=check.height_mm)
        else:
            envelope = WallEnvelope.empty()

        if envelope == self._envelope:
            self._notify()
            return

        previous = self._envelope
        self._envelope = envelope
        if not envelope.is_set:
            if not self._composition.is_empty:
                logger.info(
                    f"Dimensions no longer valid; discarding "
                    f"{len(self._composition.modules)} module(s)"
                )
            self._composition = clear_wall()
        else:
            logger.info(
                f"Wall envelope set to {envelope.width_mm} x {envelope.height_mm}mm"
            )
            if previous.is_set and self.state is CompositionState.OVER_CAPACITY:
                report = compute_utilization(self._composition, envelope)
                logger.warning(
                    f"Placed modules overrun the new width by {-report.remaining_mm}mm"
                )
        self._notify()

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def add_module(self, width_mm: int) -> bool:
        """Place a catalog module. Returns False if it was refused.

        Raises:
            ValueError: If width_mm is not a catalog width.
        """
        if not self.is_active:
            logger.debug("Ignored module placement: dimensions not set")
            return False
        result = add_module(self._composition, self._envelope, width_mm)
        if not result.accepted:
            logger.warning(f"Module placement refused: {result.reason}")
            return False
        self._composition = result.composition
        self._notify()
        return True

    def reserve_accessory(self, slot: AccessorySlot | str) -> bool:
        """Place the 2 x 1000mm pair for a TV or fireplace."""
        if not self.is_active:
            logger.debug("Ignored accessory reservation: dimensions not set")
            return False
        result = reserve_accessory(
            self._composition, self._envelope, AccessorySlot(slot)
        )
        if not result.accepted:
            logger.warning(f"Accessory reservation refused: {result.reason}")
            return False
        self._composition = result.composition
        self._notify()
        return True

    def remove_module(self, module_id: str) -> bool:
        """Remove a placed module. Returns False for unknown ids."""
        composition = remove_module(self._composition, module_id)
        if composition is self._composition:
            return False
        self._composition = composition
        self._notify()
        return True

    def clear_wall(self) -> None:
        self._composition = clear_wall()
        self._notify()

    def close(self) -> None:
        """Cancel pending input commits; the session stops accepting input."""
        self._width_debouncer.close()
        self._height_debouncer.close()
        self._listeners.clear()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
