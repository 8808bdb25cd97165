"""Infrastructure layer - packing engine, strategies and output formatting."""

from .bin_packing import (
    MIN_REMNANT_HEIGHT,
    MIN_REMNANT_WIDTH,
    AllocationResult,
    CuttingPlan,
    GuillotinePlatePacker,
    PackingConfig,
    PlacedPiece,
    PlanOutcome,
    PlateResult,
    StockAllocationService,
)
from .formatters import JsonExporter, PlanReportFormatter
from .placement_strategies import (
    BestShortSideFitStrategy,
    MinimumWasteStrategy,
    available_strategies,
    get_strategy,
)

__all__ = [
    "AllocationResult",
    "BestShortSideFitStrategy",
    "CuttingPlan",
    "GuillotinePlatePacker",
    "JsonExporter",
    "MIN_REMNANT_HEIGHT",
    "MIN_REMNANT_WIDTH",
    "MinimumWasteStrategy",
    "PackingConfig",
    "PlacedPiece",
    "PlanOutcome",
    "PlanReportFormatter",
    "PlateResult",
    "StockAllocationService",
    "available_strategies",
    "get_strategy",
]
