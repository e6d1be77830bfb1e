"""Per-asset metadata records.

These mirror the settings stored next to each source image. ``from_dict``
accepts the JSON-like mapping a host reads from disk; missing keys take the
defaults below.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_texture.types import GridSize


def _parse_size(raw: Any) -> GridSize:
    if raw is None:
        return GridSize(1, 1)
    if isinstance(raw, GridSize):
        return raw
    if isinstance(raw, Mapping):
        return GridSize(int(raw["x"]), int(raw["y"]))
    x, y = raw
    return GridSize(int(x), int(y))


def _parse_uints(raw: Any, key: str) -> PVector[int]:
    values = pvector(int(v) for v in (raw or ()))
    for v in values:
        if v < 0:
            raise ValueError(f"{key} must be non-negative, got {list(values)}")
    return values


@dataclass(frozen=True)
class TileMeta:
    """Settings for a flat multi-layer tile image."""

    name: str = ""
    size: GridSize = field(default_factory=lambda: GridSize(1, 1))
    layer_repeats: PVector[int] = field(default_factory=pvector)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TileMeta":
        return cls(
            name=str(data.get("name", "")),
            size=_parse_size(data.get("size")),
            layer_repeats=_parse_uints(data.get("layer_repeats"), "layer_repeats"),
        )


@dataclass(frozen=True)
class MaterialMeta:
    """Settings for a block material image (4 quadrant rows x 5 variants)."""

    name: str = ""
    layer_repeats: PVector[int] = field(default_factory=pvector)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MaterialMeta":
        return cls(
            name=str(data.get("name", "")),
            layer_repeats=_parse_uints(data.get("layer_repeats"), "layer_repeats"),
        )


@dataclass(frozen=True)
class TextureMeta:
    """Settings for a wrapping texture image."""

    name: str = ""
    size: GridSize = field(default_factory=lambda: GridSize(1, 1))
    layers: PVector[int] = field(default_factory=pvector)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextureMeta":
        return cls(
            name=str(data.get("name", "")),
            size=_parse_size(data.get("size")),
            layers=_parse_uints(data.get("layers"), "layers"),
        )
