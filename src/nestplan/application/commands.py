"""Application commands (use cases) for cutting-plan creation."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Sequence

from nestplan.application.dtos import DEFAULT_PLAN_NAME, PlanRecord
from nestplan.domain.value_objects import Piece, StockPlate
from nestplan.infrastructure.bin_packing import StockAllocationService

logger = logging.getLogger(__name__)


def expand_quantities(pieces: Sequence[Piece]) -> list[Piece]:
    """Expand pieces with quantity > 1 into individual pieces.

    The allocation engine places each Piece exactly once, so a piece with
    quantity N becomes N pieces with quantity 1. Copies of a multi-quantity
    piece get ``#k`` appended to both id and name.

    Args:
        pieces: Pieces as requested, possibly with quantity > 1.

    Returns:
        List of single-quantity pieces, in input order.

    Raises:
        ValueError: If two expanded pieces end up with the same id.
    """
    expanded: list[Piece] = []
    for piece in pieces:
        if piece.quantity == 1:
            expanded.append(piece)
            continue
        for i in range(1, piece.quantity + 1):
            expanded.append(
                replace(
                    piece,
                    id=f"{piece.id}#{i}",
                    name=f"{piece.name} #{i}",
                    quantity=1,
                )
            )

    seen: set[str] = set()
    for piece in expanded:
        if piece.id in seen:
            raise ValueError(
                f"Duplicate piece id after quantity expansion: '{piece.id}'"
            )
        seen.add(piece.id)
    return expanded


class CreateCuttingPlanCommand:
    """Use case: plan how to cut a list of pieces from the available stock.

    Expands piece quantities, runs the stock allocation engine, and wraps the
    result in a PlanRecord. Stock persistence is left to the caller; the
    record carries the updated stock lists.
    """

    def __init__(self, allocation_service: StockAllocationService | None = None) -> None:
        """Initialize the command.

        Args:
            allocation_service: Engine to run; defaults to one built with the
                default packing configuration.
        """
        self._allocation_service = allocation_service or StockAllocationService()

    def execute(
        self,
        pieces: Sequence[Piece],
        remnants: Sequence[StockPlate],
        sheets: Sequence[StockPlate],
        name: str | None = None,
    ) -> PlanRecord:
        """Create a cutting plan.

        Args:
            pieces: Pieces to cut, quantities not yet expanded.
            remnants: Remnants available in stock.
            sheets: New sheets available in stock.
            name: Optional plan name.

        Returns:
            PlanRecord holding the allocation result. Pieces that could not
            be placed are listed in ``record.result.unplaced``.
        """
        expanded = expand_quantities(pieces)
        result = self._allocation_service.allocate(expanded, remnants, sheets)

        record = PlanRecord(
            id=str(uuid.uuid4()),
            name=name or DEFAULT_PLAN_NAME,
            pieces=list(pieces),
            result=result,
        )

        logger.info(
            "Plan '%s': %d of %d pieces placed on %d plates (%s)",
            record.name,
            record.pieces_placed,
            len(expanded),
            len(result.plan.plates_used),
            result.outcome.value,
        )
        for piece in result.unplaced:
            box = piece.bounding_box
            logger.warning(
                "Piece '%s' (%sx%s) could not be placed on any plate",
                piece.name,
                box.width,
                box.height,
            )

        return record
