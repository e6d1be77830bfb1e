"""Block materials: adjacency-aware four-quadrant tiles."""

from dataclasses import dataclass
from typing import Dict, Tuple

from pyrsistent.typing import PVector

from grid_texture.config import DEFAULT_GRID_CONFIG, GridConfig
from grid_texture.layers import LayerRepeatTable
from grid_texture.types import NeighborState, PixelIndex, SlotIndex, TilePixel
from .subtile import AdjacencyVariantSet, Quadrant

# (right half, bottom half) -> quadrant
_HALF_TO_QUADRANT: Dict[Tuple[bool, bool], Quadrant] = {
    (False, False): Quadrant.TOP_LEFT,
    (True, False): Quadrant.TOP_RIGHT,
    (True, True): Quadrant.BOTTOM_RIGHT,
    (False, True): Quadrant.BOTTOM_LEFT,
}


@dataclass(frozen=True)
class BlockMaterial:
    """A composable material whose art depends on neighbor occupancy.

    The layer repeat table only gates which logical slots exist; every
    in-range slot renders the same single set of adjacency art.

    Attributes:
        sub_tiles: One variant set per quadrant, indexed by :class:`Quadrant`.
        layer_table: Logical slots this material answers for.
        config: Grid units the variants were sliced with.
    """

    sub_tiles: PVector[AdjacencyVariantSet]
    layer_table: LayerRepeatTable
    config: GridConfig = DEFAULT_GRID_CONFIG

    def __post_init__(self) -> None:
        if len(self.sub_tiles) != len(Quadrant):
            raise ValueError(f"Block needs 4 quadrants, got {len(self.sub_tiles)}")
        for index, sub_tile in enumerate(self.sub_tiles):
            if sub_tile.quadrant != index:
                raise ValueError(
                    f"Quadrant {sub_tile.quadrant.name} stored at position {index}"
                )

    def locate(self, rpos: PixelIndex) -> Tuple[Quadrant, PixelIndex]:
        """Split a ``T x T`` linear position into (quadrant, quadrant-local index)."""
        size = self.config.tile_size
        half = self.config.half_tile_size
        if not 0 <= rpos < size * size:
            raise IndexError(f"Position {rpos} outside {size}x{size} block")
        x, y = rpos % size, rpos // size
        quadrant = _HALF_TO_QUADRANT[(x >= half, y >= half)]
        lx = x - half if x >= half else x
        ly = y - half if y >= half else y
        return quadrant, lx + ly * half

    def get_pixel(
        self, sub_layer: SlotIndex, rpos: PixelIndex, neighbors: NeighborState
    ) -> TilePixel:
        """Return the pixel at ``rpos`` for logical slot ``sub_layer``.

        Arguments:
            sub_layer: Logical variation slot; out of range yields ``NEUTRAL``.
            rpos: Linear index into the ``T x T`` block.
            neighbors: 9-entry occupancy ring; quadrant ``q`` reads entries
                ``2q`` through ``2q + 2``.
        """
        if sub_layer not in self.layer_table:
            return TilePixel.NEUTRAL
        quadrant, index = self.locate(rpos)
        start = 2 * quadrant
        return self.sub_tiles[quadrant].get(neighbors[start : start + 3])[index]
