from itertools import product

import pytest
from pyrsistent import pvector

from grid_texture.assets import AdjacencyVariantSet, Quadrant
from grid_texture.assets.subtile import QUADRANT_AXES, VARIANT_TABLE
from tests.test_utils import VARIANT_PATTERNS, make_variant_set, solid, U


@pytest.mark.parametrize(
    "horizontal, vertical, diagonal, expected",
    [
        (True, True, True, 4),
        (True, True, False, 3),
        (True, False, True, 2),
        (True, False, False, 2),
        (False, True, True, 1),
        (False, True, False, 1),
        (False, False, True, 0),
        (False, False, False, 0),
    ],
)
def test_variant_table(
    horizontal: bool, vertical: bool, diagonal: bool, expected: int
) -> None:
    assert VARIANT_TABLE[(horizontal, vertical, diagonal)] == expected


@pytest.mark.parametrize(
    "quadrant, window, expected",
    [
        # even quadrants: horizontal is position 0, vertical position 2
        (Quadrant.TOP_LEFT, (True, False, False), 2),
        (Quadrant.TOP_LEFT, (False, False, True), 1),
        (Quadrant.BOTTOM_RIGHT, (True, False, False), 2),
        (Quadrant.BOTTOM_RIGHT, (False, False, True), 1),
        # odd quadrants: roles swap
        (Quadrant.TOP_RIGHT, (True, False, False), 1),
        (Quadrant.TOP_RIGHT, (False, False, True), 2),
        (Quadrant.BOTTOM_LEFT, (True, False, False), 1),
        (Quadrant.BOTTOM_LEFT, (False, False, True), 2),
        # diagonal is always the middle
        (Quadrant.TOP_RIGHT, (True, False, True), 3),
        (Quadrant.TOP_RIGHT, (True, True, True), 4),
        (Quadrant.BOTTOM_LEFT, (False, True, False), 0),
    ],
)
def test_select_by_quadrant_parity(
    quadrant: Quadrant, window: tuple[bool, ...], expected: int
) -> None:
    sub_tile = make_variant_set(quadrant)
    assert sub_tile.select(window) == expected
    assert list(sub_tile.get(window)) == list(VARIANT_PATTERNS[expected])


def test_axes_match_parity_formula() -> None:
    for q in Quadrant:
        axes = QUADRANT_AXES[q]
        assert axes.horizontal == 2 * (q % 2)
        assert axes.vertical == 2 * (1 - q % 2)


def test_every_neighbor_state_is_deterministic() -> None:
    for q in Quadrant:
        sub_tile = make_variant_set(q)
        for state in product((False, True), repeat=9):
            window = state[2 * q : 2 * q + 3]
            horizontal = window[2 * (q % 2)]
            vertical = window[2 * (1 - q % 2)]
            diagonal = window[1]
            assert sub_tile.signals(window) == (horizontal, vertical, diagonal)
            expected = VARIANT_TABLE[(horizontal, vertical, diagonal)]
            assert sub_tile.select(window) == expected
            assert sub_tile.select(window) == sub_tile.select(list(window))


def test_lone_diagonal_renders_like_no_neighbors() -> None:
    for q in Quadrant:
        sub_tile = make_variant_set(q)
        assert sub_tile.get((False, True, False)) == sub_tile.get((False, False, False))
        assert sub_tile.select((False, True, False)) == 0


def test_requires_five_variants() -> None:
    with pytest.raises(ValueError):
        AdjacencyVariantSet(
            quadrant=Quadrant.TOP_LEFT, variants=pvector([solid(U, 4)] * 4)
        )


def test_quadrant_index_is_normalized() -> None:
    five = pvector([solid(U, 4)] * 5)
    sub_tile = AdjacencyVariantSet(quadrant=3, variants=five)  # type: ignore[arg-type]
    assert sub_tile.quadrant is Quadrant.BOTTOM_LEFT
    with pytest.raises(ValueError):
        AdjacencyVariantSet(quadrant=4, variants=five)  # type: ignore[arg-type]
