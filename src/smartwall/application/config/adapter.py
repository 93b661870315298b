"""Adapter from a wall plan to a live configurator session.

The plan is replayed step by step against a ConfiguratorSession, the same
way a customer would drive the UI, so a plan that loads here behaves exactly
like the interactive configurator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from smartwall.application.config.schema import ModuleConfig, WallPlanConfiguration
from smartwall.application.session import ConfiguratorSession, SessionSettings
from smartwall.domain import AccessoryRequirements

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanStep:
    """Outcome of replaying one ``modules`` entry.

    Attributes:
        index: Position in the plan's ``modules`` list.
        label: What was placed, e.g. "1200mm module" or "TV pair".
        accepted: Whether the session accepted the placement.
        reason: Why it was refused, None when accepted.
    """

    index: int
    label: str
    accepted: bool
    reason: str | None = None


def config_to_settings(config: WallPlanConfiguration) -> SessionSettings:
    """Session settings from the plan's ``settings`` section."""
    return SessionSettings(
        debounce_ms=config.settings.debounce_ms,
        accessory_enforcement=config.settings.accessory_enforcement,
        allow_custom_quotation=config.settings.allow_custom_quotation,
    )


def config_to_requirements(config: WallPlanConfiguration) -> AccessoryRequirements:
    """Accessory selections from the plan's ``accessories`` section."""
    return AccessoryRequirements(
        has_tv=config.accessories.tv,
        has_fire=config.accessories.fire,
    )


def _step_label(module: ModuleConfig) -> str:
    if module.accessory is not None:
        return f"{module.accessory.label} pair"
    return f"{module.width}mm module"


def _apply_step(
    session: ConfiguratorSession, index: int, module: ModuleConfig
) -> PlanStep:
    label = _step_label(module)
    if not session.is_active:
        return PlanStep(index, label, False, "wall dimensions are not set")

    remaining = session.snapshot().remaining_mm
    if module.accessory is not None:
        if session.composition.accessory_segments(module.accessory):
            return PlanStep(index, label, False, f"{label} is already placed")
        accepted = session.reserve_accessory(module.accessory)
    else:
        accepted = session.add_module(module.width)

    if accepted:
        return PlanStep(index, label, True)
    return PlanStep(
        index, label, False, f"{label} exceeds remaining width of {remaining}mm"
    )


def apply_config(
    config: WallPlanConfiguration,
) -> tuple[ConfiguratorSession, list[PlanStep]]:
    """Replay a wall plan into a new session.

    Dimension input is committed synchronously regardless of the plan's
    debounce setting, and so is any input typed into the returned session.

    Returns:
        The session after replay and one PlanStep per ``modules`` entry.
    """
    settings = config_to_settings(config)
    session = ConfiguratorSession(replace(settings, debounce_ms=0))
    requirements = config_to_requirements(config)

    session.set_accessories(requirements.has_tv, requirements.has_fire)
    session.enter_width(config.wall.width)
    session.enter_height(config.wall.height)

    steps = [
        _apply_step(session, index, module)
        for index, module in enumerate(config.modules)
    ]
    refused = sum(1 for step in steps if not step.accepted)
    logger.info(
        f"Replayed wall plan: {len(steps) - refused} placed, {refused} refused"
    )

    return session, steps
