"""Shared builders for synthetic assets.

Most tests use a 4x4 tile (2x2 quadrants) so that whole grids can be written
out by hand.
"""

from typing import Dict, List, Sequence, Tuple

from pyrsistent import pvector

from grid_texture.assets import AdjacencyVariantSet, BlockMaterial, Quadrant
from grid_texture.config import GridConfig
from grid_texture.decode import encode_pixels
from grid_texture.grid import PixelGrid, pixel_grid
from grid_texture.layers import LayerRepeatTable
from grid_texture.types import TilePixel

U = TilePixel.UP
N = TilePixel.NEUTRAL
D = TilePixel.DOWN
X = TilePixel.NONE

SMALL_CONFIG = GridConfig(tile_size=4)

# One distinguishable 2x2 pattern per variant index
VARIANT_PATTERNS: Tuple[Tuple[TilePixel, ...], ...] = (
    (U, U, U, U),
    (N, N, N, N),
    (D, D, D, D),
    (X, X, X, X),
    (U, D, D, U),
)

# Rotated per quadrant so variant 4 differs between quadrants
QUADRANT_PATTERNS: Dict[Quadrant, Tuple[Tuple[TilePixel, ...], ...]] = {
    q: tuple(pattern[q:] + pattern[:q] for pattern in VARIANT_PATTERNS)
    for q in Quadrant
}


def make_variant_set(
    quadrant: Quadrant, patterns: Sequence[Sequence[TilePixel]] = VARIANT_PATTERNS
) -> AdjacencyVariantSet:
    return AdjacencyVariantSet(
        quadrant=quadrant, variants=pvector(pixel_grid(p) for p in patterns)
    )


def make_material(
    layer_repeats: Sequence[int] = (1,), config: GridConfig = SMALL_CONFIG
) -> BlockMaterial:
    """Material whose quadrant ``q`` variant ``v`` is ``QUADRANT_PATTERNS[q][v]``."""
    return BlockMaterial(
        sub_tiles=pvector(make_variant_set(q, QUADRANT_PATTERNS[q]) for q in Quadrant),
        layer_table=LayerRepeatTable.from_repeats(layer_repeats),
        config=config,
    )


def quadrant_positions(
    quadrant: Quadrant, config: GridConfig = SMALL_CONFIG
) -> List[int]:
    """Block positions covered by ``quadrant``, in quadrant-local row-major order."""
    size, half = config.tile_size, config.half_tile_size
    ox = half if quadrant in (Quadrant.TOP_RIGHT, Quadrant.BOTTOM_RIGHT) else 0
    oy = half if quadrant in (Quadrant.BOTTOM_RIGHT, Quadrant.BOTTOM_LEFT) else 0
    return [ox + x + (oy + y) * size for y in range(half) for x in range(half)]


def material_rgba(config: GridConfig = SMALL_CONFIG) -> bytes:
    """Authoring bytes for :func:`make_material`'s art in the material layout."""
    half = config.half_tile_size
    pixels: List[TilePixel] = []
    for q in Quadrant:
        for vy in range(half):
            for pattern in QUADRANT_PATTERNS[q]:
                pixels.extend(pattern[vy * half : (vy + 1) * half])
    return encode_pixels(pixels)


def solid(pixel: TilePixel, length: int) -> PixelGrid:
    return pixel_grid([pixel] * length)


def window_state(
    quadrant: int, window: Sequence[bool], fill: bool = False
) -> List[bool]:
    """9-entry neighbor ring with ``window`` placed at ``quadrant``'s offset."""
    state = [fill] * 9
    state[2 * quadrant : 2 * quadrant + 3] = list(window)
    return state
