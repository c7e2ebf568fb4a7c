# median_cut/core_types.py
from __future__ import annotations

"""
Core type aliases and lightweight colour helpers.
"""

from typing import List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .constants import CHANNEL_MAX, CHANNEL_MIN
from .errors import InvalidParameterError

# Basic aliases

RGBTuple = Tuple[int, int, int]  # one colour, channels in [0, 255]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3)
U8Colors = NDArray[np.uint8]  # (N, 3)

Palette = List[RGBTuple]  # ordered, one entry per terminal partition

# Small helpers


def validate_color(value: Sequence[int]) -> RGBTuple:
    """
    Check a 3-channel colour and return it as a plain int tuple.

    Raises InvalidParameterError for the wrong length, non-integer channels,
    or channels outside [0, 255].
    """
    if len(value) != 3:
        raise InvalidParameterError(f"colour must have 3 channels, got {len(value)}")
    out = []
    for channel in value:
        if isinstance(channel, (bool, np.bool_)) or not isinstance(
            channel, (int, np.integer)
        ):
            raise InvalidParameterError(f"channel {channel!r} is not an integer")
        c = int(channel)
        if c < CHANNEL_MIN or c > CHANNEL_MAX:
            raise InvalidParameterError(
                f"channel {c} outside [{CHANNEL_MIN}, {CHANNEL_MAX}]"
            )
        out.append(c)
    return (out[0], out[1], out[2])


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def palette_to_u8_array(palette: Sequence[RGBTuple]) -> U8Colors:
    """Convert a palette to a (P, 3) uint8 array, preserving order."""
    out = np.empty((len(palette), 3), dtype=np.uint8)
    for i, rgb in enumerate(palette):
        r, g, b = validate_color(rgb)
        out[i, 0] = r
        out[i, 1] = g
        out[i, 2] = b
    return out


def assert_u8_image_rgb(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,3 or 4) image and return its RGB planes."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] < 3:
        raise TypeError("expected uint8 (H,W,3/4) image")
    return image[..., :3]  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Image",
    "U8Colors",
    "Palette",
    # helpers
    "validate_color",
    "rgb_to_hex",
    "palette_to_u8_array",
    "assert_u8_image_rgb",
]
