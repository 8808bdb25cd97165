"""Strategy protocols for plate packing.

The packer delegates one decision to a strategy: which free rectangle a
candidate footprint should go into. Swapping the strategy changes the packing
heuristic without touching the packer or the allocator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from nestplan.domain.value_objects import Rectangle


@runtime_checkable
class PlacementStrategy(Protocol):
    """Protocol for choosing a free rectangle for a candidate footprint.

    Implementations:
    - MinimumWasteStrategy: lowest guillotine waste score (default)
    - BestShortSideFitStrategy: smallest leftover short side

    Example:
        ```python
        class FirstFitStrategy:
            name = "first_fit"

            def choose(self, free_rects, width, height):
                for index, rect in enumerate(free_rects):
                    if rect.fits(width, height):
                        return index
                return None
        ```
    """

    name: str

    def choose(
        self,
        free_rects: Sequence["Rectangle"],
        width: float,
        height: float,
    ) -> int | None:
        """Pick the free rectangle to place a width x height footprint in.

        Args:
            free_rects: Current free rectangles of the plate, in list order.
            width: Footprint width (x extent) after rotation.
            height: Footprint height (y extent) after rotation.

        Returns:
            Index into ``free_rects`` of the chosen rectangle, or None if no
            rectangle can hold the footprint.
        """
        ...


__all__ = [
    "PlacementStrategy",
]
