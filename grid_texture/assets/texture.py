"""Wrapped tiling textures for seamless backgrounds."""

from dataclasses import dataclass

from pyrsistent.typing import PSet, PVector

from grid_texture.config import DEFAULT_GRID_CONFIG, DEFAULT_TEXTURE_FILTER, GridConfig
from grid_texture.grid import PixelGrid
from grid_texture.types import GridSize, PixelPosition, TilePixel


@dataclass(frozen=True)
class TileTexture:
    """A ``size.x * T`` by ``size.y * T`` grid addressed modulo its extent.

    Attributes:
        texture: Row-major pixels of the whole texture.
        size: Extent in tiles.
        layers: Physical layer indices the texture was built from (provenance).
        filter: Pixels the renderer should treat as non-opaque. Not consulted
            by :meth:`get_pixel`.
        config: Grid units of the texture.
    """

    texture: PixelGrid
    size: GridSize
    layers: PVector[int]
    filter: PSet[TilePixel] = DEFAULT_TEXTURE_FILTER
    config: GridConfig = DEFAULT_GRID_CONFIG

    def __post_init__(self) -> None:
        if self.size.x <= 0 or self.size.y <= 0:
            raise ValueError(f"Texture size must be positive, got {self.size}")

    @property
    def width(self) -> int:
        return self.size.x * self.config.tile_size

    @property
    def height(self) -> int:
        return self.size.y * self.config.tile_size

    def get_pixel(self, pos: PixelPosition) -> TilePixel:
        """Return the pixel at an unbounded ``(x, y)``; both axes wrap."""
        x, y = pos
        width = self.width
        return self.texture[x % width + (y % self.height) * width]

    def is_filtered(self, pixel: TilePixel) -> bool:
        return pixel in self.filter
