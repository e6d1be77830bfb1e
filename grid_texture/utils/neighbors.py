"""Neighbor occupancy helpers for block materials.

:meth:`~grid_texture.assets.BlockMaterial.get_pixel` expects a 9-entry ring
walked clockwise from the west neighbor, with west repeated at the end so
each quadrant reads a contiguous 3-entry window::

    index:  0   1   2  3   4  5   6  7   8
    cell:   W   NW  N  NE  E  SE  S  SW  W

Top-left reads ``W NW N``, top-right ``N NE E``, bottom-right ``E SE S`` and
bottom-left ``S SW W``.
"""

from typing import Callable, Sequence, Tuple

OccupancyFn = Callable[[int, int], bool]

# (dx, dy) offsets in ring order; y grows downward
RING_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),  # W
    (-1, -1),  # NW
    (0, -1),  # N
    (1, -1),  # NE
    (1, 0),  # E
    (1, 1),  # SE
    (0, 1),  # S
    (-1, 1),  # SW
    (-1, 0),  # W again
)


def neighbor_state(occupied: OccupancyFn, x: int, y: int) -> Tuple[bool, ...]:
    """Return the 9-entry occupancy ring around cell ``(x, y)``."""
    return tuple(bool(occupied(x + dx, y + dy)) for dx, dy in RING_OFFSETS)


def occupancy_predicate(grid: Sequence[Sequence[bool]]) -> OccupancyFn:
    """Wrap ``grid[y][x]`` as a predicate; cells outside the grid are empty."""
    height = len(grid)

    def occupied(x: int, y: int) -> bool:
        if not 0 <= y < height:
            return False
        row = grid[y]
        return 0 <= x < len(row) and bool(row[x])

    return occupied
