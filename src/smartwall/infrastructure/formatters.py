"""Text and JSON output for configurator results."""

from __future__ import annotations

import json
from typing import Any

from smartwall.application.dtos import WallSnapshot
from smartwall.domain import (
    CandidateFit,
    CompletionReport,
    DimensionCheck,
    FitStatus,
    ModuleConfiguration,
    ModuleSegment,
)


class WallDiagramFormatter:
    """Formats ASCII diagrams of a wall composition.

    Each placed module is drawn as a cell whose width is proportional to the
    module width; accessory modules carry their TV/Fire label under the
    width.
    """

    MIN_CELL_WIDTH = 6

    def format(self, snapshot: WallSnapshot, width: int = 72) -> str:
        """Generate an ASCII diagram with a utilization bar below it."""
        lines = [
            "WALL LAYOUT",
            "=" * width,
        ]

        if snapshot.width_mm is None:
            lines.append("Wall dimensions not set.")
            return "\n".join(lines)

        lines.append(f"Wall: {snapshot.width_mm}mm W x {snapshot.height_mm}mm H")
        lines.append("")

        if not snapshot.modules:
            lines.append("No modules placed.")
        else:
            lines.extend(self._draw_modules(snapshot, width))

        lines.append("")
        lines.append(self._utilization_bar(snapshot, width - 30))
        lines.append(f"Modules: {len(snapshot.modules)}")
        lines.append(f"Total width: {snapshot.total_width_mm}mm")
        if snapshot.is_over_capacity:
            lines.append("WARNING: modules exceed the wall width")
        return "\n".join(lines)

    def _draw_modules(self, snapshot: WallSnapshot, width: int) -> list[str]:
        span = max(snapshot.width_mm or 0, snapshot.total_width_mm)
        scale = (width - len(snapshot.modules) - 1) / span
        cells = [
            max(self.MIN_CELL_WIDTH, round(module.width_mm * scale))
            for module in snapshot.modules
        ]

        border = "+" + "+".join("-" * cell for cell in cells) + "+"
        widths = "|" + "|".join(
            str(module.width_mm).center(cell)
            for module, cell in zip(snapshot.modules, cells)
        ) + "|"
        labels = "|" + "|".join(
            self._accessory_label(module).center(cell)
            for module, cell in zip(snapshot.modules, cells)
        ) + "|"
        return [border, widths, labels, border]

    def _accessory_label(self, module: ModuleSegment) -> str:
        if module.accessory_slot is None:
            return ""
        return module.accessory_slot.label

    def _utilization_bar(self, snapshot: WallSnapshot, bar_width: int) -> str:
        percent = snapshot.utilization_percent
        filled = min(bar_width, max(0, round(percent / 100 * bar_width)))
        bar = "#" * filled + "." * (bar_width - filled)
        remaining = snapshot.remaining_mm or 0
        if remaining >= 0:
            tail = f"{remaining}mm remaining"
        else:
            tail = f"{-remaining}mm over"
        return f"[{bar}] {percent:.1f}% ({tail})"


class PaletteFormatter:
    """Formats the fit status of every catalog width."""

    MARKERS = {
        FitStatus.OPTIMAL: "*",
        FitStatus.FITS: " ",
        FitStatus.TOO_LARGE: "x",
    }

    def format(self, palette: tuple[CandidateFit, ...]) -> str:
        if not palette:
            return "Module palette unavailable until dimensions are set."

        lines = ["MODULE PALETTE", "-" * 30]
        for candidate in palette:
            marker = self.MARKERS[candidate.status]
            lines.append(
                f" {marker} {candidate.width_mm:>5}mm  {candidate.status.value}"
            )
        return "\n".join(lines)


class DimensionReportFormatter:
    """Formats a dimension check for display."""

    def format(self, check: DimensionCheck) -> str:
        lines = [
            "DIMENSION CHECK",
            "=" * 50,
            f"Width:  {self._value(check.width_mm)} ({check.width_status.value})",
            f"Height: {self._value(check.height_mm)} ({check.height_status.value})",
        ]

        if check.hints:
            lines.append("")
            lines.append("Hints:")
            lines.extend(f"  - {hint}" for hint in check.hints)

        if check.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in check.warnings)

        lines.append("")
        if check.is_valid:
            lines.append("Dimensions are valid.")
        elif check.is_oversize and check.is_height_valid:
            lines.append("Custom quotation required for this width.")
        else:
            lines.append("Dimensions are not valid.")
        return "\n".join(lines)

    def _value(self, value_mm: int | None) -> str:
        return "-" if value_mm is None else f"{value_mm}mm"


class CompletionFormatter:
    """Formats a completion report."""

    def format(self, report: CompletionReport) -> str:
        lines: list[str] = []
        if report.errors:
            lines.append("Errors:")
            lines.extend(f"  - {error}" for error in report.errors)
        if report.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in report.warnings)
        lines.append(
            "Design is complete." if report.is_complete else "Design is not complete."
        )
        return "\n".join(lines)


class RecommendationFormatter:
    """Formats suggested module configurations as a numbered list."""

    def format(self, width_mm: int, configurations: list[ModuleConfiguration]) -> str:
        if not configurations:
            return f"No module configurations found for a {width_mm}mm wall."

        lines = [
            f"RECOMMENDED CONFIGURATIONS FOR {width_mm}mm",
            "=" * 60,
        ]
        for number, config in enumerate(configurations, start=1):
            flag = " (optimal)" if config.is_optimal else ""
            lines.append(f"{number}. {config.description}{flag}")
            lines.append(
                f"   {config.module_count} modules, total {config.total_width_mm}mm"
            )
        return "\n".join(lines)


class JsonExporter:
    """Exports a wall snapshot as JSON."""

    def export(
        self,
        snapshot: WallSnapshot,
        completion: CompletionReport | None = None,
    ) -> str:
        """Export snapshot (and optionally its completion report) as JSON."""
        data: dict[str, Any] = {"wall": snapshot.to_dict()}
        if completion is not None:
            data["completion"] = {
                "is_complete": completion.is_complete,
                "errors": list(completion.errors),
                "warnings": list(completion.warnings),
            }
        return json.dumps(data, indent=2)
