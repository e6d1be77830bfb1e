"""Common type aliases and enumerations."""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Sequence, Tuple


class TilePixel(StrEnum):
    """Categorical pixel class (terrain height or transparency, not a color)."""

    UP = auto()
    NEUTRAL = auto()
    DOWN = auto()
    NONE = auto()


@dataclass(frozen=True)
class GridSize:
    """Extent of an asset measured in whole tiles.

    Attributes:
        x: Number of tiles horizontally.
        y: Number of tiles vertically.
    """

    x: int
    y: int


# Linear index into a row-major pixel grid
PixelIndex = int

# Logical variation slot resolved through a LayerRepeatTable
SlotIndex = int

# Unbounded 2-D pixel coordinate (x, y)
PixelPosition = Tuple[int, int]

# 9-entry occupancy ring consumed by BlockMaterial.get_pixel
NeighborState = Sequence[bool]

RGBA = Tuple[int, int, int, int]
