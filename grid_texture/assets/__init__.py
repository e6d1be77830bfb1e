"""Decoded, immutable tile assets.

Each asset is built once at load time (see :mod:`grid_texture.loaders`) and
afterwards only answers ``get_pixel`` queries:

* :class:`Tile` - ordered full-size layers behind a layer repeat table.
* :class:`BlockMaterial` - four :class:`AdjacencyVariantSet` quadrants whose
  art depends on neighbor occupancy.
* :class:`TileTexture` - one large grid addressed with wraparound.
"""

from .subtile import AdjacencyVariantSet, Quadrant
from .block import BlockMaterial
from .tile import Tile
from .texture import TileTexture

__all__ = [
    "AdjacencyVariantSet",
    "BlockMaterial",
    "Quadrant",
    "Tile",
    "TileTexture",
]
