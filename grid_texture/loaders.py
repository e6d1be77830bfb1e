"""Decode-time asset construction.

Turns raw RGBA buffers plus their metadata into immutable assets. The
``*_png`` variants first decompress an encoded image with Pillow and check
that its dimensions fit the asset layout.

Source layouts (``T`` = tile size, ``H`` = ``T/2``):

* Tile: layers stacked vertically, each ``T*size.x`` wide and ``T*size.y``
  tall.
* Material: four quadrant rows (TL, TR, BR, BL) stacked vertically, each
  ``H`` tall and holding the five variants side by side (``5*H`` wide).
* Texture: a single ``T*size.x`` by ``T*size.y`` image.
"""

from io import BytesIO
from typing import Tuple

from PIL import Image, UnidentifiedImageError
from pyrsistent import pvector

from grid_texture.assets import (
    AdjacencyVariantSet,
    BlockMaterial,
    Quadrant,
    Tile,
    TileTexture,
)
from grid_texture.config import (
    DEFAULT_GRID_CONFIG,
    DEFAULT_TEXTURE_FILTER,
    GridConfig,
)
from grid_texture.decode import Buffer, classify_pixels
from grid_texture.errors import DecodeError
from grid_texture.grid import PixelGrid
from grid_texture.layers import LayerRepeatTable
from grid_texture.log_utils import get_logger
from grid_texture.meta import MaterialMeta, TextureMeta, TileMeta
from grid_texture.types import GridSize

log = get_logger("loaders")


def decode_image(data: bytes) -> Tuple[bytes, int, int]:
    """Decompress an encoded image into ``(rgba_bytes, width, height)``.

    Raises:
        DecodeError: If Pillow cannot read ``data``.
    """
    try:
        with Image.open(BytesIO(data)) as image:
            rgba = image.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e
    return rgba.tobytes(), rgba.width, rgba.height


def _check_width(name: str, width: int, expected: int) -> None:
    if width != expected:
        raise DecodeError(f"Asset {name!r} is {width}px wide, expected {expected}px")


def _check_size(name: str, size: GridSize) -> None:
    if size.x <= 0 or size.y <= 0:
        raise DecodeError(f"Asset {name!r} has non-positive size {size}")


def load_tile(
    rgba: Buffer, meta: TileMeta, config: GridConfig = DEFAULT_GRID_CONFIG
) -> Tile:
    """Build a :class:`Tile` from RGBA bytes.

    Raises:
        DecodeError: If the size is not positive, the pixels do not split
            into whole layers, or the repeats name a layer that is missing.
    """
    _check_size(meta.name, meta.size)
    grid = classify_pixels(rgba, config.pixel_size)
    layers = pvector(grid.chunks(config.tile_area * meta.size.x * meta.size.y))
    table = LayerRepeatTable.from_repeats(meta.layer_repeats)
    if table.layer_count > len(layers):
        raise DecodeError(
            f"Tile {meta.name!r} repeats {table.layer_count} layers "
            f"but only {len(layers)} are authored"
        )
    log.debug(
        "Loaded tile %r: %d layers, %d slots", meta.name, len(layers), len(table)
    )
    return Tile(layers=layers, layer_table=table, size=meta.size, config=config)


def slice_quadrant_row(
    row: PixelGrid, quadrant: Quadrant, config: GridConfig
) -> AdjacencyVariantSet:
    """Cut one quadrant row into its side-by-side variants."""
    half = config.half_tile_size
    stride = half * config.block_rows
    return AdjacencyVariantSet(
        quadrant=quadrant,
        variants=pvector(
            row.window(variant * half, 0, half, half, stride)
            for variant in range(config.block_rows)
        ),
    )


def load_material(
    rgba: Buffer, meta: MaterialMeta, config: GridConfig = DEFAULT_GRID_CONFIG
) -> BlockMaterial:
    """Build a :class:`BlockMaterial` from RGBA bytes."""
    grid = classify_pixels(rgba, config.pixel_size)
    rows = grid.chunks(config.half_tile_area * config.block_rows)
    if len(rows) != len(Quadrant):
        raise DecodeError(
            f"Material {meta.name!r} has {len(rows)} quadrant rows, "
            f"expected {len(Quadrant)}"
        )
    sub_tiles = pvector(
        slice_quadrant_row(row, Quadrant(q), config) for q, row in enumerate(rows)
    )
    table = LayerRepeatTable.from_repeats(meta.layer_repeats)
    log.debug("Loaded material %r: %d slots", meta.name, len(table))
    return BlockMaterial(sub_tiles=sub_tiles, layer_table=table, config=config)


def load_texture(
    rgba: Buffer, meta: TextureMeta, config: GridConfig = DEFAULT_GRID_CONFIG
) -> TileTexture:
    """Build a :class:`TileTexture` from RGBA bytes."""
    _check_size(meta.name, meta.size)
    grid = classify_pixels(rgba, config.pixel_size)
    expected = meta.size.x * meta.size.y * config.tile_area
    if len(grid) != expected:
        raise DecodeError(
            f"Texture {meta.name!r} has {len(grid)} pixels, expected {expected}"
        )
    log.debug("Loaded texture %r: %dx%d tiles", meta.name, meta.size.x, meta.size.y)
    return TileTexture(
        texture=grid,
        size=meta.size,
        layers=pvector(meta.layers),
        filter=DEFAULT_TEXTURE_FILTER,
        config=config,
    )


def load_tile_png(
    data: bytes, meta: TileMeta, config: GridConfig = DEFAULT_GRID_CONFIG
) -> Tile:
    rgba, width, _ = decode_image(data)
    _check_width(meta.name, width, config.tile_size * meta.size.x)
    return load_tile(rgba, meta, config)


def load_material_png(
    data: bytes, meta: MaterialMeta, config: GridConfig = DEFAULT_GRID_CONFIG
) -> BlockMaterial:
    rgba, width, _ = decode_image(data)
    _check_width(meta.name, width, config.half_tile_size * config.block_rows)
    return load_material(rgba, meta, config)


def load_texture_png(
    data: bytes, meta: TextureMeta, config: GridConfig = DEFAULT_GRID_CONFIG
) -> TileTexture:
    rgba, width, _ = decode_image(data)
    _check_width(meta.name, width, config.tile_size * meta.size.x)
    return load_texture(rgba, meta, config)
