"""RGBA -> categorical pixel classification.

Source art is authored with exactly four colors. Anything else is a contract
violation in the art and fails the decode; nothing is approximated.
"""

from typing import Dict, Iterable, Union

import numpy as np
import numpy.typing as npt
from pyrsistent import pvector

from grid_texture.config import DEFAULT_PIXEL_SIZE
from grid_texture.errors import BufferSizeError, UnrecognizedPixelError
from grid_texture.grid import PixelGrid
from grid_texture.log_utils import get_logger
from grid_texture.types import RGBA, TilePixel

log = get_logger("decode")

UInt8Array = npt.NDArray[np.uint8]
Buffer = Union[bytes, bytearray, memoryview, UInt8Array]

PIXEL_ENCODING: Dict[RGBA, TilePixel] = {
    (0, 0, 0, 0): TilePixel.NONE,
    (0, 0, 255, 255): TilePixel.UP,
    (0, 255, 0, 255): TilePixel.NEUTRAL,
    (255, 0, 0, 255): TilePixel.DOWN,
}

PIXEL_COLORS: Dict[TilePixel, RGBA] = {
    pixel: rgba for rgba, pixel in PIXEL_ENCODING.items()
}

# Row order shared by _ENCODING_TABLE and _ENCODING_PIXELS
_ENCODING_TABLE: UInt8Array = np.array(list(PIXEL_ENCODING.keys()), dtype=np.uint8)
_ENCODING_PIXELS = tuple(PIXEL_ENCODING.values())


def classify_rgba(r: int, g: int, b: int, a: int) -> TilePixel:
    """Classify a single RGBA quadruple.

    Raises:
        UnrecognizedPixelError: If the quadruple is not in :data:`PIXEL_ENCODING`.
    """
    try:
        return PIXEL_ENCODING[(r, g, b, a)]
    except KeyError:
        raise UnrecognizedPixelError(0, (r, g, b, a)) from None


def classify_pixels(buffer: Buffer, pixel_size: int = DEFAULT_PIXEL_SIZE) -> PixelGrid:
    """Decode a raw RGBA buffer into a :class:`PixelGrid`, preserving order.

    Arguments:
        buffer: Uncompressed pixel bytes, ``pixel_size`` bytes per pixel.
        pixel_size: Bytes per pixel; only the first four channels are read.

    Raises:
        BufferSizeError: If the length is not a multiple of ``pixel_size``.
        UnrecognizedPixelError: On the first pixel outside the encoding table.
    """
    if pixel_size < 4:
        raise ValueError(f"pixel_size must be at least 4 (RGBA), got {pixel_size}")
    arr: UInt8Array = np.frombuffer(bytes(buffer), dtype=np.uint8)
    if arr.size % pixel_size != 0:
        raise BufferSizeError(arr.size, pixel_size)

    quads = arr.reshape(-1, pixel_size)[:, :4]
    # matches[i, j]: pixel i equals encoding row j
    matches = np.all(quads[:, None, :] == _ENCODING_TABLE[None, :, :], axis=2)
    recognized = matches.any(axis=1)
    if not recognized.all():
        bad = int(np.argmin(recognized))
        raise UnrecognizedPixelError(bad, tuple(int(c) for c in quads[bad]))

    rows = matches.argmax(axis=1)
    log.debug("Classified %d pixels", rows.size)
    return PixelGrid(pvector(_ENCODING_PIXELS[i] for i in rows.tolist()))


def encode_pixels(pixels: Iterable[TilePixel]) -> bytes:
    """Inverse of :func:`classify_pixels`: emit the authoring RGBA bytes."""
    return bytes(channel for pixel in pixels for channel in PIXEL_COLORS[pixel])
