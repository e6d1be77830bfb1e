"""grid_texture
================

Categorical tile-texture compositing.

Raw RGBA buffers authored with a four-color convention are decoded into
:class:`~grid_texture.types.TilePixel` grids once, at load time. Afterwards
every asset is an immutable value object answering ``get_pixel`` queries:

* :class:`~grid_texture.assets.Tile` - flat multi-layer tile.
* :class:`~grid_texture.assets.BlockMaterial` - four-quadrant block whose art
  depends on neighbor occupancy.
* :class:`~grid_texture.assets.TileTexture` - wrapped tiling background.

Example::

    from grid_texture import load_tile, TileMeta

    tile = load_tile(rgba_bytes, TileMeta(name="rock", layer_repeats=(3, 2)))
    tile.get_pixel(4, 0)
"""

from .config import GridConfig, DEFAULT_GRID_CONFIG
from .errors import (
    BufferSizeError,
    DecodeError,
    SlotOutOfRangeError,
    UnrecognizedPixelError,
)
from .types import GridSize, TilePixel
from .grid import PixelGrid
from .layers import LayerRepeatTable
from .decode import classify_pixels, classify_rgba, encode_pixels
from .assets import AdjacencyVariantSet, BlockMaterial, Tile, TileTexture
from .meta import MaterialMeta, TextureMeta, TileMeta
from .loaders import (
    decode_image,
    load_material,
    load_material_png,
    load_texture,
    load_texture_png,
    load_tile,
    load_tile_png,
)

__all__ = [
    "AdjacencyVariantSet",
    "BlockMaterial",
    "BufferSizeError",
    "DEFAULT_GRID_CONFIG",
    "DecodeError",
    "GridConfig",
    "GridSize",
    "LayerRepeatTable",
    "MaterialMeta",
    "PixelGrid",
    "SlotOutOfRangeError",
    "TextureMeta",
    "Tile",
    "TileMeta",
    "TilePixel",
    "TileTexture",
    "UnrecognizedPixelError",
    "classify_pixels",
    "classify_rgba",
    "decode_image",
    "encode_pixels",
    "load_material",
    "load_material_png",
    "load_texture",
    "load_texture_png",
    "load_tile",
    "load_tile_png",
]
