"""Flat categorical pixel storage.

A :class:`PixelGrid` is a persistent, row-major sequence of
:class:`~grid_texture.types.TilePixel`. Its width is deliberately not stored:
the same storage serves full tiles (``T``), quadrant variants (``T/2``) and
whole textures (``size.x * T``), so callers pass the width they address with.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_texture.errors import BufferSizeError
from grid_texture.types import PixelIndex, TilePixel


@dataclass(frozen=True)
class PixelGrid:
    """Immutable row-major grid of categorical pixels.

    Attributes:
        pixels: Pixel values, row after row.
    """

    pixels: PVector[TilePixel]

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[TilePixel]:
        return iter(self.pixels)

    def __getitem__(self, index: PixelIndex) -> TilePixel:
        return self.pixels[index]

    def at(self, x: int, y: int, width: int) -> TilePixel:
        """Return the pixel at column ``x``, row ``y`` of a ``width`` wide grid."""
        return self.pixels[x + y * width]

    def chunks(self, size: int) -> List["PixelGrid"]:
        """Split into consecutive grids of ``size`` pixels each.

        Raises:
            BufferSizeError: If the length is not a multiple of ``size``.
        """
        if size <= 0:
            raise ValueError(f"Chunk size must be positive, got {size}")
        if len(self.pixels) % size != 0:
            raise BufferSizeError(len(self.pixels), size)
        return [
            PixelGrid(self.pixels[start : start + size])
            for start in range(0, len(self.pixels), size)
        ]

    def window(
        self, x0: int, y0: int, width: int, height: int, stride: int
    ) -> "PixelGrid":
        """Copy the ``width`` x ``height`` region at ``(x0, y0)`` out of a grid
        whose rows are ``stride`` pixels wide."""
        return PixelGrid(
            pvector(
                self.pixels[x0 + x + (y0 + y) * stride]
                for y in range(height)
                for x in range(width)
            )
        )


def pixel_grid(pixels: Iterable[TilePixel]) -> PixelGrid:
    """Build a :class:`PixelGrid` from any iterable of pixels."""
    return PixelGrid(pvector(pixels))


def filled_grid(pixel: TilePixel, length: int) -> PixelGrid:
    """Return a grid of ``length`` copies of ``pixel``."""
    return PixelGrid(pvector([pixel] * length))
