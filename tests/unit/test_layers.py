import pytest
from pyrsistent import pvector

from grid_texture.errors import SlotOutOfRangeError
from grid_texture.layers import LayerRepeatTable, compute_tile_layers


@pytest.mark.parametrize(
    "repeats, expected",
    [
        ([3, 2], [0, 0, 0, 1, 1]),
        ([2, 1, 3], [0, 0, 1, 2, 2, 2]),
        ([1], [0]),
        ([0, 2], [1, 1]),  # zero-length run skips a layer
        ([2, 0, 1], [0, 0, 2]),
        ([], []),
    ],
)
def test_compute_tile_layers(repeats: list[int], expected: list[int]) -> None:
    assert compute_tile_layers(repeats) == pvector(expected)
    table = LayerRepeatTable.from_repeats(repeats)
    assert list(table.lookup) == expected
    assert len(table) == sum(repeats)
    assert table.layer_count == len(repeats)


def test_layer_for_in_range() -> None:
    table = LayerRepeatTable.from_repeats([3, 2])
    assert [table.layer_for(slot) for slot in range(5)] == [0, 0, 0, 1, 1]


@pytest.mark.parametrize("slot", [5, 6, 100, -1])
def test_layer_for_out_of_range(slot: int) -> None:
    table = LayerRepeatTable.from_repeats([3, 2])
    with pytest.raises(SlotOutOfRangeError):
        table.layer_for(slot)
    assert table.get(slot) is None
    assert slot not in table


def test_empty_table_has_no_slots() -> None:
    table = LayerRepeatTable.from_repeats([])
    assert len(table) == 0
    for slot in range(4):
        assert table.get(slot) is None
        with pytest.raises(SlotOutOfRangeError):
            table.layer_for(slot)


def test_out_of_range_error_is_an_index_error() -> None:
    table = LayerRepeatTable.from_repeats([1])
    with pytest.raises(IndexError):
        table.layer_for(1)


def test_negative_repeat_is_rejected() -> None:
    with pytest.raises(ValueError):
        LayerRepeatTable.from_repeats([1, -1])


def test_table_is_a_value_object() -> None:
    from_tuple = LayerRepeatTable.from_repeats((3, 2))
    assert from_tuple == LayerRepeatTable.from_repeats([3, 2])
    assert hash(LayerRepeatTable.from_repeats([3, 2])) == hash(
        LayerRepeatTable.from_repeats([3, 2])
    )
