from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from grid_texture.assets import BlockMaterial, Tile, TileTexture
from grid_texture.log_utils import get_logger
from grid_texture.types import RGBA, NeighborState, PixelPosition, SlotIndex, TilePixel
from grid_texture.utils.neighbors import neighbor_state, occupancy_predicate

log = get_logger("render")

UInt8Array = npt.NDArray[np.uint8]
Palette = Dict[TilePixel, RGBA]

TRANSPARENT: RGBA = (0, 0, 0, 0)

DEFAULT_PALETTE: Palette = {
    TilePixel.UP: (214, 196, 160, 255),
    TilePixel.NEUTRAL: (150, 128, 96, 255),
    TilePixel.DOWN: (84, 66, 48, 255),
    TilePixel.NONE: TRANSPARENT,
}


def pixels_to_array(
    pixels: Iterable[TilePixel],
    width: int,
    height: int,
    palette: Palette = DEFAULT_PALETTE,
    transparent: Iterable[TilePixel] = (),
) -> UInt8Array:
    """Color ``pixels`` into a ``(height, width, 4)`` uint8 array."""
    hidden = set(transparent)
    colors = [TRANSPARENT if p in hidden else palette[p] for p in pixels]
    return np.array(colors, dtype=np.uint8).reshape(height, width, 4)


def _to_image(arr: UInt8Array, scale: int) -> Image.Image:
    image = Image.fromarray(arr)
    if scale != 1:
        image = image.resize(
            (image.width * scale, image.height * scale), Image.Resampling.NEAREST
        )
    return image


def render_tile(
    tile: Tile, sub_layer: SlotIndex, palette: Palette = DEFAULT_PALETTE, scale: int = 1
) -> Image.Image:
    """Render one ``T x T`` cell of ``tile`` for a logical slot."""
    size = tile.config.tile_size
    pixels = [tile.get_pixel(sub_layer, rpos) for rpos in range(size * size)]
    return _to_image(pixels_to_array(pixels, size, size, palette), scale)


def render_block(
    material: BlockMaterial,
    sub_layer: SlotIndex,
    neighbors: NeighborState,
    palette: Palette = DEFAULT_PALETTE,
    scale: int = 1,
) -> Image.Image:
    """Render a single block cell for a given neighbor ring."""
    size = material.config.tile_size
    pixels = [
        material.get_pixel(sub_layer, rpos, neighbors) for rpos in range(size * size)
    ]
    return _to_image(pixels_to_array(pixels, size, size, palette), scale)


def render_block_map(
    material: BlockMaterial,
    occupancy: Sequence[Sequence[bool]],
    sub_layer: SlotIndex = 0,
    palette: Palette = DEFAULT_PALETTE,
    scale: int = 1,
) -> Image.Image:
    """Render ``material`` over every occupied cell of ``occupancy[y][x]``.

    Empty cells stay transparent. Cells outside the grid count as empty
    neighbors.
    """
    size = material.config.tile_size
    rows = len(occupancy)
    cols = max((len(row) for row in occupancy), default=0)
    canvas: UInt8Array = np.zeros((rows * size, cols * size, 4), dtype=np.uint8)
    occupied = occupancy_predicate(occupancy)

    cache: Dict[Tuple[bool, ...], UInt8Array] = {}
    for y in range(rows):
        for x in range(cols):
            if not occupied(x, y):
                continue
            ring = neighbor_state(occupied, x, y)
            if ring not in cache:
                pixels = [
                    material.get_pixel(sub_layer, rpos, ring)
                    for rpos in range(size * size)
                ]
                cache[ring] = pixels_to_array(pixels, size, size, palette)
            canvas[y * size : (y + 1) * size, x * size : (x + 1) * size] = cache[ring]

    log.debug("Rendered %dx%d block map with %d distinct cells", cols, rows, len(cache))
    return _to_image(canvas, scale)


def render_texture(
    texture: TileTexture,
    origin: PixelPosition = (0, 0),
    width: Optional[int] = None,
    height: Optional[int] = None,
    palette: Palette = DEFAULT_PALETTE,
    scale: int = 1,
) -> Image.Image:
    """Render a ``width x height`` window of ``texture`` starting at ``origin``.

    The window wraps; pixels in ``texture.filter`` are transparent. Defaults
    to one full period of the texture.
    """
    width = texture.width if width is None else width
    height = texture.height if height is None else height
    ox, oy = origin
    pixels = [
        texture.get_pixel((ox + x, oy + y)) for y in range(height) for x in range(width)
    ]
    arr = pixels_to_array(pixels, width, height, palette, transparent=texture.filter)
    return _to_image(arr, scale)
