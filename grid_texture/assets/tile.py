"""Flat multi-layer tiles."""

from dataclasses import dataclass, field

from pyrsistent.typing import PVector

from grid_texture.config import DEFAULT_GRID_CONFIG, GridConfig
from grid_texture.grid import PixelGrid
from grid_texture.layers import LayerRepeatTable
from grid_texture.types import GridSize, PixelIndex, SlotIndex, TilePixel


@dataclass(frozen=True)
class Tile:
    """Ordered physical layers selected through a layer repeat table.

    Attributes:
        layers: One full-size grid per physical layer.
        layer_table: Logical slot -> physical layer mapping.
        size: Footprint hint in tiles, carried from metadata. Not used for
            addressing.
        config: Grid units the layers were decoded with.
    """

    layers: PVector[PixelGrid]
    layer_table: LayerRepeatTable
    size: GridSize = field(default_factory=lambda: GridSize(1, 1))
    config: GridConfig = DEFAULT_GRID_CONFIG

    def get_pixel(self, sub_layer: SlotIndex, rpos: PixelIndex) -> TilePixel:
        """Return the pixel at ``rpos`` of the layer behind slot ``sub_layer``.

        Slots outside the layer table yield ``NEUTRAL``. ``rpos`` must lie in
        the ``T x T`` cell.
        """
        layer = self.layer_table.get(sub_layer)
        if layer is None:
            return TilePixel.NEUTRAL
        if not 0 <= rpos < self.config.tile_area:
            size = self.config.tile_size
            raise IndexError(f"Position {rpos} outside {size}x{size} tile")
        return self.layers[layer][rpos]
