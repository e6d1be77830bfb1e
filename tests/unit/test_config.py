import pytest

from grid_texture.config import DEFAULT_GRID_CONFIG, DEFAULT_TEXTURE_FILTER, GridConfig
from grid_texture.types import TilePixel


def test_reference_convention() -> None:
    assert DEFAULT_GRID_CONFIG.tile_size == 20
    assert DEFAULT_GRID_CONFIG.half_tile_size == 10
    assert DEFAULT_GRID_CONFIG.tile_area == 400
    assert DEFAULT_GRID_CONFIG.half_tile_area == 100
    assert DEFAULT_GRID_CONFIG.pixel_size == 4
    assert DEFAULT_GRID_CONFIG.block_rows == 5


@pytest.mark.parametrize("tile_size", [0, -2, 3, 21])
def test_tile_size_must_be_positive_and_even(tile_size: int) -> None:
    with pytest.raises(ValueError):
        GridConfig(tile_size=tile_size)


def test_default_texture_filter() -> None:
    assert set(DEFAULT_TEXTURE_FILTER) == {TilePixel.NONE, TilePixel.NEUTRAL}
