"""Grid unit configuration.

The reference asset convention is a 20x20 pixel tile split into four 10x10
quadrants, with five adjacency variants authored per quadrant. Assets carry
their :class:`GridConfig` so that tests can use smaller synthetic grids.
"""

from dataclasses import dataclass

from pyrsistent import pset
from pyrsistent.typing import PSet

from grid_texture.types import TilePixel


DEFAULT_TILE_SIZE = 20
DEFAULT_PIXEL_SIZE = 4
DEFAULT_BLOCK_ROWS = 5

# Pixels the renderer treats as non-opaque on every loaded texture
DEFAULT_TEXTURE_FILTER: PSet[TilePixel] = pset([TilePixel.NONE, TilePixel.NEUTRAL])


@dataclass(frozen=True)
class GridConfig:
    """Fixed grid units used for decoding and addressing.

    Attributes:
        tile_size: Side of a full tile in pixels (``T``). Must be even.
        pixel_size: Bytes per source pixel (RGBA).
        block_rows: Adjacency variants authored per quadrant.
    """

    tile_size: int = DEFAULT_TILE_SIZE
    pixel_size: int = DEFAULT_PIXEL_SIZE
    block_rows: int = DEFAULT_BLOCK_ROWS

    def __post_init__(self) -> None:
        if self.tile_size <= 0 or self.tile_size % 2 != 0:
            raise ValueError(
                f"tile_size must be a positive even number, got {self.tile_size}"
            )
        if self.pixel_size <= 0:
            raise ValueError(f"pixel_size must be positive, got {self.pixel_size}")

    @property
    def half_tile_size(self) -> int:
        return self.tile_size // 2

    @property
    def tile_area(self) -> int:
        return self.tile_size * self.tile_size

    @property
    def half_tile_area(self) -> int:
        return self.half_tile_size * self.half_tile_size


DEFAULT_GRID_CONFIG = GridConfig()
