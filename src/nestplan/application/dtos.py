"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from nestplan.domain.value_objects import Piece
from nestplan.infrastructure.bin_packing import AllocationResult

DEFAULT_PLAN_NAME = "Untitled cutting plan"


@dataclass
class PlanRecord:
    """A named, dated cutting plan ready to be reported or stored.

    Attributes:
        id: Unique plan identifier.
        name: Human-readable plan name.
        pieces: Pieces as requested, before quantity expansion.
        result: Allocation result of the planning run.
        created_at: When the plan was created (UTC).
    """

    id: str
    name: str
    pieces: list[Piece]
    result: AllocationResult
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def pieces_requested(self) -> int:
        """Physical pieces requested, counting quantities."""
        return sum(piece.quantity for piece in self.pieces)

    @property
    def pieces_placed(self) -> int:
        return len(self.result.plan.placements)

    @property
    def is_complete(self) -> bool:
        """Whether every requested piece was placed."""
        return not self.result.unplaced
