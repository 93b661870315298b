"""Infrastructure layer - output formatters."""

from .formatters import (
    CompletionFormatter,
    DimensionReportFormatter,
    JsonExporter,
    PaletteFormatter,
    RecommendationFormatter,
    WallDiagramFormatter,
)

__all__ = [
    "CompletionFormatter",
    "DimensionReportFormatter",
    "JsonExporter",
    "PaletteFormatter",
    "RecommendationFormatter",
    "WallDiagramFormatter",
]
