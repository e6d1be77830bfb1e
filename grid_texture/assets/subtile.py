"""Per-quadrant adjacency variants.

A block cell is split into four quadrants. Each quadrant has five pre-sliced
variants and picks one from a 3-entry occupancy window ``[w0, w1, w2]``:
the middle entry is always the diagonal neighbor, and the outer two are the
horizontal and vertical neighbors in an order that alternates by quadrant.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, NamedTuple, Sequence, Tuple

from pyrsistent.typing import PVector

from grid_texture.grid import PixelGrid


class Quadrant(IntEnum):
    """Quadrants in clockwise order starting top-left."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_RIGHT = 2
    BOTTOM_LEFT = 3


class QuadrantAxes(NamedTuple):
    """Window positions holding the horizontal and vertical neighbor."""

    horizontal: int
    vertical: int


DIAGONAL_POSITION = 1

QUADRANT_AXES: Dict[Quadrant, QuadrantAxes] = {
    Quadrant.TOP_LEFT: QuadrantAxes(horizontal=0, vertical=2),
    Quadrant.TOP_RIGHT: QuadrantAxes(horizontal=2, vertical=0),
    Quadrant.BOTTOM_RIGHT: QuadrantAxes(horizontal=0, vertical=2),
    Quadrant.BOTTOM_LEFT: QuadrantAxes(horizontal=2, vertical=0),
}

# (horizontal, vertical, diagonal) -> variant index
VARIANT_TABLE: Dict[Tuple[bool, bool, bool], int] = {
    (True, True, True): 4,  # all neighbors
    (True, True, False): 3,  # cardinals only
    (True, False, True): 2,  # horizontal
    (True, False, False): 2,
    (False, True, True): 1,  # vertical
    (False, True, False): 1,
    # No corner-only art: a lone diagonal renders like no neighbors
    (False, False, True): 0,
    (False, False, False): 0,
}

VARIANT_COUNT = 5


@dataclass(frozen=True)
class AdjacencyVariantSet:
    """Five half-tile variants for one quadrant, ordered by variant index.

    Attributes:
        quadrant: Which quadrant of the block these variants cover.
        variants: Exactly :data:`VARIANT_COUNT` grids of width ``T/2``.
    """

    quadrant: Quadrant
    variants: PVector[PixelGrid]

    def __post_init__(self) -> None:
        object.__setattr__(self, "quadrant", Quadrant(self.quadrant))
        if len(self.variants) != VARIANT_COUNT:
            raise ValueError(
                f"Quadrant {self.quadrant.name} needs {VARIANT_COUNT} variants, "
                f"got {len(self.variants)}"
            )

    def signals(self, window: Sequence[bool]) -> Tuple[bool, bool, bool]:
        """Return ``(horizontal, vertical, diagonal)`` read from ``window``."""
        axes = QUADRANT_AXES[self.quadrant]
        return (
            bool(window[axes.horizontal]),
            bool(window[axes.vertical]),
            bool(window[DIAGONAL_POSITION]),
        )

    def select(self, window: Sequence[bool]) -> int:
        """Return the variant index for a 3-entry occupancy window."""
        return VARIANT_TABLE[self.signals(window)]

    def get(self, window: Sequence[bool]) -> PixelGrid:
        """Return the variant grid for a 3-entry occupancy window."""
        return self.variants[self.select(window)]
