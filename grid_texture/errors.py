"""Exception hierarchy.

Two failure classes exist. Decode failures are fatal for the asset being
loaded and surface to the loader's caller. Slot lookup misses are expected
query patterns: compositors catch them and answer ``TilePixel.NEUTRAL``.
"""

from typing import Tuple


class DecodeError(ValueError):
    """Authored art violates the pixel or layout contract."""


class UnrecognizedPixelError(DecodeError):
    """An RGBA quadruple outside the four-color table."""

    def __init__(self, index: int, rgba: Tuple[int, ...]) -> None:
        super().__init__(f"Unrecognized pixel encoding {rgba} at pixel {index}")
        self.index = index
        self.rgba = rgba


class BufferSizeError(DecodeError):
    """A buffer length that is not a multiple of the expected chunk size."""

    def __init__(self, length: int, chunk: int) -> None:
        super().__init__(f"Buffer of length {length} is not a multiple of {chunk}")
        self.length = length
        self.chunk = chunk


class SlotOutOfRangeError(IndexError):
    """A logical slot beyond what a layer repeat table defines."""

    def __init__(self, slot: int, slots: int) -> None:
        super().__init__(f"Slot {slot} out of range for {slots} logical slots")
        self.slot = slot
        self.slots = slots
