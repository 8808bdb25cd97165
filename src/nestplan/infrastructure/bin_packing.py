"""Plate nesting and multi-stock allocation.

This module packs pieces onto stock plates with a guillotine free-rectangle
heuristic and spreads a job across a pool of remnants and new sheets,
producing placements, new remnants and the list of pieces that did not fit.

All dataclasses are frozen (immutable) so results can be shared between
threads and callers never see their stock lists mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Collection, Sequence

from nestplan.contracts.strategies import PlacementStrategy
from nestplan.domain.value_objects import BoundingBox, Piece, Rectangle, StockPlate
from nestplan.infrastructure.placement_strategies import (
    MinimumWasteStrategy,
    available_strategies,
    get_strategy,
)

logger = logging.getLogger(__name__)

# Smallest leftover worth keeping as stock: an A4 sheet, in millimetres.
MIN_REMNANT_WIDTH = 210.0
MIN_REMNANT_HEIGHT = 297.0


@dataclass(frozen=True)
class PackingConfig:
    """Configuration for plate packing.

    Attributes:
        min_remnant_width: Minimum width (x extent) of a leftover kept as a
            remnant, in mm.
        min_remnant_height: Minimum height (y extent) of a leftover kept as
            a remnant, in mm.
        strategy: Name of the free-rectangle selection heuristic.
    """

    min_remnant_width: float = MIN_REMNANT_WIDTH
    min_remnant_height: float = MIN_REMNANT_HEIGHT
    strategy: str = MinimumWasteStrategy.name

    def __post_init__(self) -> None:
        if self.min_remnant_width < 0:
            raise ValueError("Minimum remnant width must be non-negative")
        if self.min_remnant_height < 0:
            raise ValueError("Minimum remnant height must be non-negative")
        if self.strategy not in available_strategies():
            raise ValueError(
                f"Unknown placement strategy '{self.strategy}'. "
                f"Available: {', '.join(available_strategies())}"
            )


@dataclass(frozen=True)
class PlacedPiece:
    """A piece positioned on a plate.

    Coordinates are measured from the plate's origin corner.

    Attributes:
        piece: The piece being placed.
        x: Offset along the plate width.
        y: Offset along the plate length.
        rotation: 0 or 90 degrees.
        plate_id: Id of the plate the piece was placed on.
        bounding_box: Footprint actually used, after rotation.
    """

    piece: Piece
    x: float
    y: float
    rotation: int
    plate_id: str
    bounding_box: BoundingBox

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")
        if self.rotation not in (0, 90):
            raise ValueError("Rotation must be 0 or 90 degrees")

    @property
    def footprint(self) -> Rectangle:
        """Region of the plate covered by the piece."""
        return Rectangle(
            x=self.x,
            y=self.y,
            width=self.bounding_box.width,
            height=self.bounding_box.height,
        )

    @property
    def right_edge(self) -> float:
        return self.x + self.bounding_box.width

    @property
    def top_edge(self) -> float:
        return self.y + self.bounding_box.height


@dataclass(frozen=True)
class PlateResult:
    """Outcome of packing one plate.

    Attributes:
        plate: The plate that was packed.
        placed: Pieces placed on the plate, in placement order.
        new_remnants: Leftover regions large enough to keep as stock.
        still_pending: Pieces that did not fit, largest first.
    """

    plate: StockPlate
    placed: tuple[PlacedPiece, ...]
    new_remnants: tuple[StockPlate, ...]
    still_pending: tuple[Piece, ...]

    @property
    def used_area(self) -> float:
        """Area covered by placed pieces."""
        return sum(p.bounding_box.area for p in self.placed)

    @property
    def waste_percentage(self) -> float:
        """Percentage of the plate not covered by pieces."""
        if self.plate.area == 0:
            return 0.0
        return (1 - self.used_area / self.plate.area) * 100


@dataclass(frozen=True)
class CuttingPlan:
    """Aggregate of every plate consumed by an allocation run.

    Attributes:
        placements: All placed pieces across plates.
        new_remnants: All remnants produced by the run.
        plates_used: Plates consumed, in the order they were packed.
    """

    placements: tuple[PlacedPiece, ...]
    new_remnants: tuple[StockPlate, ...]
    plates_used: tuple[StockPlate, ...]

    @property
    def total_cost(self) -> float:
        """Sum of prices of consumed new sheets; remnants are free."""
        return sum(plate.effective_price for plate in self.plates_used)

    @property
    def new_sheet_count(self) -> int:
        return sum(1 for plate in self.plates_used if not plate.is_remnant)

    @property
    def remnant_count(self) -> int:
        return sum(1 for plate in self.plates_used if plate.is_remnant)

    def placements_on(self, plate_id: str) -> list[PlacedPiece]:
        """Placements on a given plate."""
        return [p for p in self.placements if p.plate_id == plate_id]

    def remnants_from(self, plate_id: str) -> list[StockPlate]:
        """Remnants cut from a given plate."""
        return [r for r in self.new_remnants if r.parent_id == plate_id]


class PlanOutcome(str, Enum):
    """How much of a job an allocation run satisfied."""

    FULLY_SATISFIED = "fully_satisfied"
    PARTIALLY_SATISFIED = "partially_satisfied"
    UNSATISFIABLE = "unsatisfiable"


@dataclass(frozen=True)
class AllocationResult:
    """Complete result of allocating a job across the stock pool.

    Attributes:
        plan: Placements, new remnants and consumed plates.
        unplaced: Pieces no plate could hold.
        updated_remnant_stock: Unused input remnants followed by the new
            remnants of this run.
        updated_sheet_stock: Input sheets that were not consumed.
    """

    plan: CuttingPlan
    unplaced: tuple[Piece, ...]
    updated_remnant_stock: tuple[StockPlate, ...]
    updated_sheet_stock: tuple[StockPlate, ...]

    @property
    def outcome(self) -> PlanOutcome:
        if not self.unplaced:
            return PlanOutcome.FULLY_SATISFIED
        if self.plan.placements:
            return PlanOutcome.PARTIALLY_SATISFIED
        return PlanOutcome.UNSATISFIABLE


class GuillotinePlatePacker:
    """Packs pieces onto a single plate with guillotine free-rectangle splitting.

    The plate starts as one free rectangle. Pieces are taken largest
    bounding-box area first; each goes into the free rectangle chosen by the
    placement strategy, flush with that rectangle's origin corner. The used
    rectangle is then replaced, at the same list position, by up to three
    residuals: right of the piece, above it, and the diagonal corner.

    This is a single forward pass: a piece that does not fit is never retried
    against space freed later in the same pass.

    Attributes:
        config: Packing configuration (remnant thresholds, strategy name).
        strategy: Free-rectangle selection heuristic.
    """

    def __init__(
        self,
        config: PackingConfig | None = None,
        strategy: PlacementStrategy | None = None,
    ) -> None:
        """Initialize the packer.

        Args:
            config: Packing configuration; defaults to PackingConfig().
            strategy: Explicit strategy instance. When omitted, the strategy
                named in ``config`` is used.
        """
        self.config = config or PackingConfig()
        self.strategy = strategy or get_strategy(self.config.strategy)

    def pack(
        self,
        plate: StockPlate,
        pending_pieces: Sequence[Piece],
        taken_ids: Collection[str] = frozenset(),
    ) -> PlateResult:
        """Place as many pieces as possible on one plate.

        Args:
            plate: The plate to cut from.
            pending_pieces: Pieces still to be placed, in any order.
            taken_ids: Plate ids already in use; new remnants never reuse them.

        Returns:
            PlateResult with placements, new remnants and the pieces that
            did not fit. ``len(placed) + len(still_pending)`` always equals
            ``len(pending_pieces)``.
        """
        free_rects: list[Rectangle] = [
            Rectangle(x=0.0, y=0.0, width=plate.width, height=plate.length)
        ]
        placed: list[PlacedPiece] = []
        still_pending: list[Piece] = []

        for piece in self._sort_by_area(pending_pieces):
            placement = self._place_piece(piece, plate, free_rects)
            if placement is None:
                still_pending.append(piece)
            else:
                placed.append(placement)

        remnants = self._extract_remnants(plate, free_rects, taken_ids)

        logger.debug(
            "Plate %s: %d placed, %d pending, %d remnants",
            plate.id,
            len(placed),
            len(still_pending),
            len(remnants),
        )

        return PlateResult(
            plate=plate,
            placed=tuple(placed),
            new_remnants=tuple(remnants),
            still_pending=tuple(still_pending),
        )

    def _sort_by_area(self, pieces: Sequence[Piece]) -> list[Piece]:
        """Sort pieces by bounding-box area, largest first.

        The sort is stable, so equal areas keep their input order.
        """
        return sorted(pieces, key=lambda p: p.bounding_box.area, reverse=True)

    def _place_piece(
        self,
        piece: Piece,
        plate: StockPlate,
        free_rects: list[Rectangle],
    ) -> PlacedPiece | None:
        """Try each allowed rotation in turn and place the piece on the first fit.

        Updates ``free_rects`` in place when the piece is placed.
        """
        box = piece.bounding_box
        rotations = (0, 90) if piece.can_rotate else (0,)

        for rotation in rotations:
            footprint = box.rotated() if rotation == 90 else box
            index = self.strategy.choose(free_rects, footprint.width, footprint.height)
            if index is None:
                continue

            space = free_rects[index]
            placement = PlacedPiece(
                piece=piece,
                x=space.x,
                y=space.y,
                rotation=rotation,
                plate_id=plate.id,
                bounding_box=footprint,
            )
            free_rects[index : index + 1] = self._split_space(space, footprint)

            logger.debug(
                "Piece '%s' placed at (%s, %s) rotation %d on plate %s",
                piece.name,
                space.x,
                space.y,
                rotation,
                plate.id,
            )
            return placement

        logger.debug(
            "Piece '%s' (%sx%s) does not fit on plate %s",
            piece.name,
            box.width,
            box.height,
            plate.id,
        )
        return None

    def _split_space(self, space: Rectangle, footprint: BoundingBox) -> list[Rectangle]:
        """Residual rectangles left in ``space`` after placing ``footprint``.

        Generated in the order right, above, corner. Zero-area residuals are
        dropped.
        """
        width, height = footprint.width, footprint.height
        residuals: list[Rectangle] = []

        if space.width > width:
            residuals.append(
                Rectangle(
                    x=space.x + width,
                    y=space.y,
                    width=space.width - width,
                    height=height,
                )
            )
        if space.height > height:
            residuals.append(
                Rectangle(
                    x=space.x,
                    y=space.y + height,
                    width=width,
                    height=space.height - height,
                )
            )
        if space.width > width and space.height > height:
            residuals.append(
                Rectangle(
                    x=space.x + width,
                    y=space.y + height,
                    width=space.width - width,
                    height=space.height - height,
                )
            )

        return [r for r in residuals if r.width > 0 and r.height > 0]

    def _extract_remnants(
        self,
        plate: StockPlate,
        free_rects: list[Rectangle],
        taken_ids: Collection[str] = frozenset(),
    ) -> list[StockPlate]:
        """Promote leftover free rectangles that meet the size floor to remnants.

        Args:
            plate: Parent plate of the leftovers.
            free_rects: Free rectangles remaining after the pass.
            taken_ids: Ids to skip when numbering remnants.

        Returns:
            Remnant plates, ids ``<plate id>-r1``, ``-r2``, ... in free-list order.
            A suffix whose id is already taken is skipped.
        """
        remnants: list[StockPlate] = []
        suffix = 0
        min_width = self.config.min_remnant_width
        min_height = self.config.min_remnant_height

        for rect in free_rects:
            if rect.width < min_width or rect.height < min_height:
                continue
            suffix += 1
            while f"{plate.id}-r{suffix}" in taken_ids:
                suffix += 1
            remnants.append(
                StockPlate(
                    id=f"{plate.id}-r{suffix}",
                    material_id=plate.material_id,
                    material_type=plate.material_type,
                    length=rect.height,
                    width=rect.width,
                    thickness=plate.thickness,
                    price=0.0,
                    is_remnant=True,
                    parent_id=plate.id,
                    origin_area=rect,
                )
            )

        return remnants


class StockAllocationService:
    """Spreads a job across remnants and new sheets.

    All candidate plates are tried largest first, so large remnants are
    consumed before fresh sheets of the same size class and big pieces get
    the best chance of fitting early. A plate that takes no piece is skipped
    and stays in stock.

    Attributes:
        config: Packing configuration.
        packer: Single-plate packer used for every candidate.
    """

    def __init__(
        self,
        config: PackingConfig | None = None,
        packer: GuillotinePlatePacker | None = None,
    ) -> None:
        self.config = config or PackingConfig()
        self.packer = packer or GuillotinePlatePacker(self.config)

    def allocate(
        self,
        pieces: Sequence[Piece],
        remnants: Sequence[StockPlate],
        sheets: Sequence[StockPlate],
    ) -> AllocationResult:
        """Allocate pieces across the stock pool.

        Each piece is placed once; expand quantities into separate pieces
        before calling.

        Args:
            pieces: Pieces to place.
            remnants: Available remnant plates.
            sheets: Available new sheets.

        Returns:
            AllocationResult with the cutting plan, unplaced pieces and the
            updated stock. Unsatisfiable geometry is reported through
            ``unplaced``, never raised.
        """
        if not pieces:
            return AllocationResult(
                plan=CuttingPlan(placements=(), new_remnants=(), plates_used=()),
                unplaced=(),
                updated_remnant_stock=tuple(remnants),
                updated_sheet_stock=tuple(sheets),
            )

        candidates = self._sort_by_area(
            [(plate, True) for plate in remnants] + [(plate, False) for plate in sheets]
        )
        taken_ids = {plate.id for plate in (*remnants, *sheets)}

        logger.info(
            "Allocating %d pieces across %d candidate plates (%d remnants, %d sheets)",
            len(pieces),
            len(candidates),
            len(remnants),
            len(sheets),
        )

        pending: list[Piece] = list(pieces)
        placements: list[PlacedPiece] = []
        new_remnants: list[StockPlate] = []
        plates_used: list[StockPlate] = []
        used_remnant_ids: set[str] = set()
        used_sheet_ids: set[str] = set()

        for plate, from_remnants in candidates:
            if not pending:
                break

            result = self.packer.pack(plate, pending, taken_ids)
            if not result.placed:
                logger.debug("Plate %s skipped: no piece fits", plate.id)
                continue

            placements.extend(result.placed)
            new_remnants.extend(result.new_remnants)
            plates_used.append(plate)
            (used_remnant_ids if from_remnants else used_sheet_ids).add(plate.id)
            taken_ids.update(r.id for r in result.new_remnants)
            pending = list(result.still_pending)

            logger.debug(
                "Plate %s used: %d pieces, %.1f%% waste, %d pieces left",
                plate.id,
                len(result.placed),
                result.waste_percentage,
                len(pending),
            )

        plan = CuttingPlan(
            placements=tuple(placements),
            new_remnants=tuple(new_remnants),
            plates_used=tuple(plates_used),
        )

        logger.info(
            "Allocation finished: %d placed, %d unplaced, %d plates used, cost %.2f",
            len(placements),
            len(pending),
            len(plates_used),
            plan.total_cost,
        )

        return AllocationResult(
            plan=plan,
            unplaced=tuple(pending),
            updated_remnant_stock=tuple(
                r for r in remnants if r.id not in used_remnant_ids
            ) + tuple(new_remnants),
            updated_sheet_stock=tuple(s for s in sheets if s.id not in used_sheet_ids),
        )

    def _sort_by_area(
        self, candidates: list[tuple[StockPlate, bool]]
    ) -> list[tuple[StockPlate, bool]]:
        """Sort (plate, from_remnants) pairs by plate area, largest first (stable)."""
        return sorted(candidates, key=lambda c: c[0].area, reverse=True)
