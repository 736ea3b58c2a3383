"""Texture pixel formats and sampling options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_WRAP_MODES = frozenset({"repeat", "mirrored_repeat", "clamp_to_edge", "clamp_to_border"})
_MAG_FILTERS = frozenset({"nearest", "linear"})
_MIN_FILTERS = _MAG_FILTERS | {
    "nearest_mipmap_nearest",
    "linear_mipmap_nearest",
    "nearest_mipmap_linear",
    "linear_mipmap_linear",
}


class TextureFormat(Enum):
    """Pixel layout of a texture."""

    RED = 1
    RG = 2
    RGB = 3
    RGBA = 4


def texture_format(num_components: int) -> TextureFormat:
    """Format for an image with ``num_components`` channels; anything unknown is RGBA."""
    return {
        1: TextureFormat.RED,
        2: TextureFormat.RG,
        3: TextureFormat.RGB,
    }.get(num_components, TextureFormat.RGBA)


@dataclass(frozen=True)
class TextureOptions:
    """How a texture is sampled and prepared when loaded."""

    wrap_mode: str = "repeat"
    mag_filter: str = "linear"
    min_filter: str = "linear_mipmap_linear"
    mipmap: bool = True
    flip_vertically: bool = True
    border_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    def __post_init__(self) -> None:
        if self.wrap_mode not in _WRAP_MODES:
            raise ValueError(f"unknown wrap mode {self.wrap_mode!r}")
        if self.mag_filter not in _MAG_FILTERS:
            raise ValueError(f"unknown magnification filter {self.mag_filter!r}")
        if self.min_filter not in _MIN_FILTERS:
            raise ValueError(f"unknown minification filter {self.min_filter!r}")
        if len(self.border_color) != 4:
            raise ValueError("border colour must have four components")