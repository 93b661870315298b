"""Suggested module runs for a wall width.

Recommendations are a starting point for the customer, not a solver: the
search enumerates small multisets of catalog widths and ranks them by how
closely they match the target.
"""

from __future__ import annotations

from itertools import combinations_with_replacement

from .value_objects import (
    ACCESSORY_MODULE_COUNT,
    ACCESSORY_MODULE_WIDTH,
    CAPACITY_TOLERANCE,
    CATALOG_WIDTHS,
    OPTIMAL_FIT_WINDOW,
    AccessoryRequirements,
    AccessorySlot,
    ModuleConfiguration,
)

MAX_GENERAL_MODULES = 6
MAX_SIDE_MODULES = 3
MAX_COMBINATIONS = 10
MAX_RECOMMENDATIONS = 5


def find_module_combinations(
    target_mm: float, max_modules: int = MAX_GENERAL_MODULES
) -> list[tuple[int, ...]]:
    """Closest catalog multisets to target_mm.

    Combinations may overshoot by up to 200mm. Results are ordered by distance
    to the target, then by fewest modules, widest modules first within each
    combination.
    """
    limit = target_mm + OPTIMAL_FIT_WINDOW
    descending = sorted(CATALOG_WIDTHS, reverse=True)
    found: list[tuple[int, ...]] = []
    for count in range(1, max_modules + 1):
        for combo in combinations_with_replacement(descending, count):
            if sum(combo) <= limit:
                found.append(combo)
    found.sort(key=lambda combo: (abs(sum(combo) - target_mm), len(combo)))
    return found[:MAX_COMBINATIONS]


def _is_optimal(total_mm: int, target_mm: int) -> bool:
    return abs(total_mm - target_mm) <= CAPACITY_TOLERANCE


def _general_configurations(target_mm: int) -> list[ModuleConfiguration]:
    configurations = []
    for combo in find_module_combinations(target_mm):
        total = sum(combo)
        configurations.append(
            ModuleConfiguration(
                modules=combo,
                total_width_mm=total,
                description=f"{' + '.join(str(w) for w in combo)}mm modules",
                is_optimal=_is_optimal(total, target_mm),
            )
        )
    return configurations


def _accessory_configurations(
    target_mm: int, slot: AccessorySlot
) -> list[ModuleConfiguration]:
    """Centre the accessory pair with a mirrored run of modules each side.

    The right-hand run is the left-hand run reversed, so a 1000+800 left side
    gives 800+1000 on the right and the wall is symmetric about the pair
    rather than repeating the same left-to-right order.
    """
    remaining = target_mm - slot.reserved_width
    if remaining <= 0:
        return []

    pair = (ACCESSORY_MODULE_WIDTH,) * ACCESSORY_MODULE_COUNT
    configurations = []
    for side in find_module_combinations(remaining / 2, MAX_SIDE_MODULES):
        modules = side + pair + tuple(reversed(side))
        total = sum(modules)
        side_text = "+".join(str(w) for w in side)
        mirrored_text = "+".join(str(w) for w in reversed(side))
        configurations.append(
            ModuleConfiguration(
                modules=modules,
                total_width_mm=total,
                description=(
                    f"{slot.label} Setup: {side_text}mm + "
                    f"{slot.label}(1000+1000)mm + {mirrored_text}mm"
                ),
                is_optimal=_is_optimal(total, target_mm),
            )
        )
    return configurations


def recommend_modules(
    width_mm: int, requirements: AccessoryRequirements | None = None
) -> list[ModuleConfiguration]:
    """Up to five suggested module runs for a wall.

    With a TV or fireplace selected, only layouts built around the reserved
    pair are suggested. Optimal layouts (within 100mm of the width) come
    first, then shorter runs, then closer totals.
    """
    requirements = requirements or AccessoryRequirements()
    recommendations: list[ModuleConfiguration] = []

    for slot in requirements.slots:
        recommendations.extend(_accessory_configurations(width_mm, slot))
    if not requirements.slots:
        recommendations.extend(_general_configurations(width_mm))

    recommendations.sort(
        key=lambda config: (
            not config.is_optimal,
            config.module_count,
            abs(config.total_width_mm - width_mm),
        )
    )
    return recommendations[:MAX_RECOMMENDATIONS]


def example_configuration() -> ModuleConfiguration:
    """Reference layout for a 5.7m wall with a TV."""
    side = (1000, 800)
    modules = side + (ACCESSORY_MODULE_WIDTH,) * ACCESSORY_MODULE_COUNT + side[::-1]
    return ModuleConfiguration(
        modules=modules,
        total_width_mm=sum(modules),
        description="Example: 1000+800mm + TV(1000+1000)mm + 800+1000mm",
        is_optimal=True,
    )
