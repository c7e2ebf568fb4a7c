# median_cut/matcher.py
from __future__ import annotations

"""
Nearest-colour matching in RGB space.

Exports:
  color_distance(a, b) -> float
  match_index(pixel, palette) -> int
  match(pixel, palette) -> RGBTuple
  nearest_palette_indices(colors, palette) -> np.ndarray
  remap_image(rgb, palette) -> U8Image

Ties go to the earliest palette entry everywhere: match() only replaces the
current best on a strictly smaller distance, and np.argmin returns the first
minimum.
"""

import math
from typing import Sequence

import numpy as np

from .constants import REMAP_CHUNK_ELEMENTS
from .core_types import RGBTuple, U8Colors, U8Image, assert_u8_image_rgb, palette_to_u8_array
from .errors import EmptyPaletteError


def color_distance(a: Sequence[int], b: Sequence[int]) -> float:
    """Euclidean distance between two RGB colours."""
    dr = int(a[0]) - int(b[0])
    dg = int(a[1]) - int(b[1])
    db = int(a[2]) - int(b[2])
    return math.sqrt(dr * dr + dg * dg + db * db)


def match_index(pixel: Sequence[int], palette: Sequence[RGBTuple]) -> int:
    """Index of the palette entry closest to `pixel`; the first one on ties."""
    if len(palette) == 0:
        raise EmptyPaletteError("cannot match against an empty palette")
    best = 0
    best_dist = color_distance(pixel, palette[0])
    for i in range(1, len(palette)):
        dist = color_distance(pixel, palette[i])
        if dist < best_dist:
            best_dist = dist
            best = i
    return best


def match(pixel: Sequence[int], palette: Sequence[RGBTuple]) -> RGBTuple:
    """Closest palette entry to `pixel` by Euclidean RGB distance."""
    r, g, b = palette[match_index(pixel, palette)]
    return (int(r), int(g), int(b))


def nearest_palette_indices(colors: U8Colors, pal_rgb: U8Colors) -> np.ndarray:
    """For each (N, 3) colour row, the index of the nearest palette row."""
    if pal_rgb.shape[0] == 0:
        raise EmptyPaletteError("cannot match against an empty palette")
    pal = pal_rgb.astype(np.int32)
    out = np.empty(colors.shape[0], dtype=np.int32)
    step = max(1, REMAP_CHUNK_ELEMENTS // pal.shape[0])
    for start in range(0, colors.shape[0], step):
        pts = colors[start : start + step].astype(np.int32)
        diff = pts[:, None, :] - pal[None, :, :]
        # squared distance orders the same as the Euclidean one
        dist2 = np.sum(diff * diff, axis=2)
        out[start : start + pts.shape[0]] = np.argmin(dist2, axis=1)
    return out


def remap_image(rgb: U8Image, palette: Sequence[RGBTuple]) -> U8Image:
    """Replace every pixel of an (H, W, 3) uint8 image with its nearest palette colour."""
    if len(palette) == 0:
        raise EmptyPaletteError("cannot remap onto an empty palette")
    img = assert_u8_image_rgb(rgb)
    pal_rgb = palette_to_u8_array(palette)
    flat = img.reshape(-1, 3)
    indices = nearest_palette_indices(flat, pal_rgb)
    return np.ascontiguousarray(pal_rgb[indices].reshape(img.shape), dtype=np.uint8)


__all__ = [
    "color_distance",
    "match_index",
    "match",
    "nearest_palette_indices",
    "remap_image",
]
