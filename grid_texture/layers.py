"""Run-length layer repeat tables.

A small number of authored layers can stand in for a larger number of
logical variation slots: ``[3, 2]`` means slots 0-2 draw from layer 0 and
slots 3-4 from layer 1. Asking for a slot past the end is an expected query
(not every asset defines every variation), so :meth:`LayerRepeatTable.get`
answers ``None`` instead of raising.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_texture.errors import SlotOutOfRangeError
from grid_texture.log_utils import get_logger
from grid_texture.types import SlotIndex

log = get_logger("layers")


def compute_tile_layers(layer_repeats: Iterable[int]) -> PVector[int]:
    """Unroll run lengths into a slot -> physical layer lookup.

    Example:
        ``compute_tile_layers([3, 2]) == pvector([0, 0, 0, 1, 1])``
    """
    unrolled = []
    for layer, repeats in enumerate(layer_repeats):
        if repeats < 0:
            raise ValueError(f"Layer {layer} has negative repeat count: {repeats}")
        unrolled.extend([layer] * repeats)
    return pvector(unrolled)


@dataclass(frozen=True)
class LayerRepeatTable:
    """Immutable slot -> layer mapping built from run lengths.

    Attributes:
        repeats: Run length per physical layer, in layer order.
        lookup: Physical layer for each logical slot; ``len(lookup) == sum(repeats)``.
    """

    repeats: PVector[int]
    lookup: PVector[int]

    @classmethod
    def from_repeats(cls, layer_repeats: Iterable[int]) -> "LayerRepeatTable":
        repeats = pvector(layer_repeats)
        lookup = compute_tile_layers(repeats)
        log.debug("Layer repeats %s -> %d logical slots", list(repeats), len(lookup))
        return cls(repeats=repeats, lookup=lookup)

    @property
    def layer_count(self) -> int:
        """Number of physical layers referenced."""
        return len(self.repeats)

    def __len__(self) -> int:
        return len(self.lookup)

    def __contains__(self, slot: object) -> bool:
        return isinstance(slot, Integral) and 0 <= slot < len(self.lookup)

    def layer_for(self, slot: SlotIndex) -> int:
        """Return the physical layer for ``slot``.

        Raises:
            SlotOutOfRangeError: If ``slot`` is negative or ``>= len(self)``.
        """
        if slot not in self:
            raise SlotOutOfRangeError(slot, len(self.lookup))
        return self.lookup[slot]

    def get(self, slot: SlotIndex) -> Optional[int]:
        """Return the physical layer for ``slot`` or ``None`` when out of range."""
        try:
            return self.layer_for(slot)
        except SlotOutOfRangeError:
            return None
