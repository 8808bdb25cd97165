"""Free-rectangle selection heuristics for the guillotine plate packer.

Each strategy scans the flat free-rectangle list once and returns the index
of the winner. Ties always go to the rectangle encountered first, which keeps
packing deterministic for a given input order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from nestplan.contracts.strategies import PlacementStrategy
from nestplan.domain.value_objects import Rectangle

logger = logging.getLogger(__name__)


class MinimumWasteStrategy:
    """Pick the rectangle with the lowest guillotine waste score.

    The piece sits flush in the rectangle's corner. The score adds the strip
    left beside the piece (over the rectangle's full height) to the strip left
    above it (over the piece's width):

        waste = (free.width - w) * free.height + (free.height - h) * w
    """

    name = "min_waste"

    def choose(
        self,
        free_rects: Sequence[Rectangle],
        width: float,
        height: float,
    ) -> int | None:
        best_index: int | None = None
        best_score = float("inf")

        for index, rect in enumerate(free_rects):
            if not rect.fits(width, height):
                continue
            waste_width = rect.width - width
            waste_height = rect.height - height
            score = waste_width * rect.height + waste_height * width
            if score < best_score:
                best_score = score
                best_index = index

        return best_index


class BestShortSideFitStrategy:
    """Pick the rectangle whose shorter leftover side is smallest.

    Ties on the short side are broken by the longer leftover side, then by
    list order.
    """

    name = "best_short_side"

    def choose(
        self,
        free_rects: Sequence[Rectangle],
        width: float,
        height: float,
    ) -> int | None:
        best_index: int | None = None
        best_key = (float("inf"), float("inf"))

        for index, rect in enumerate(free_rects):
            if not rect.fits(width, height):
                continue
            leftover_x = rect.width - width
            leftover_y = rect.height - height
            key = (min(leftover_x, leftover_y), max(leftover_x, leftover_y))
            if key < best_key:
                best_key = key
                best_index = index

        return best_index


_STRATEGIES: dict[str, type] = {
    MinimumWasteStrategy.name: MinimumWasteStrategy,
    BestShortSideFitStrategy.name: BestShortSideFitStrategy,
}


def available_strategies() -> list[str]:
    """Names accepted by :func:`get_strategy`."""
    return sorted(_STRATEGIES)


def get_strategy(name: str) -> PlacementStrategy:
    """Instantiate a placement strategy by name.

    Args:
        name: Registered strategy name.

    Returns:
        A fresh strategy instance.

    Raises:
        ValueError: If no strategy is registered under ``name``.
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown placement strategy '{name}'. "
            f"Available: {', '.join(available_strategies())}"
        ) from None
    logger.debug("Using placement strategy '%s'", name)
    return strategy_cls()
