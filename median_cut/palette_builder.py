# median_cut/palette_builder.py
from __future__ import annotations

"""
Palette builder.

Exports:
  max_depth_for(n_colors) -> int
  palette_size_for(n_colors) -> int
  quantize(samples, n_colors) -> Palette
  quantize_image(rgb, n_colors) -> Palette

Palette size:
  The split tree has depth floor(log2(n_colors)), so the palette holds
  2 ** floor(log2(n_colors)) entries: a request that is not a power of two
  gets the next lower power of two (6 -> 4, 255 -> 128). Fewer entries come
  back only when there are fewer samples than that, because a partition
  holding a single sample is never split.
"""

from typing import Sequence

import numpy as np

from .core_types import Palette, RGBTuple, U8Image, validate_color
from .errors import EmptyInputError, InvalidParameterError
from .image_io import extract_samples
from .partition import Partition
from .splitter import split


def max_depth_for(n_colors: int) -> int:
    """floor(log2(n_colors)), exact for any positive int."""
    if isinstance(n_colors, bool) or not isinstance(n_colors, (int, np.integer)):
        raise InvalidParameterError(f"colour count must be an integer, got {n_colors!r}")
    if n_colors < 1:
        raise InvalidParameterError(f"colour count must be >= 1, got {n_colors}")
    return int(n_colors).bit_length() - 1


def palette_size_for(n_colors: int) -> int:
    """Number of palette entries a request for `n_colors` yields (given enough samples)."""
    return 1 << max_depth_for(n_colors)


def quantize(samples: Sequence[RGBTuple], n_colors: int) -> Palette:
    """
    Build a median-cut palette from colour samples.

    Args:
      samples  : sequence of (r, g, b) ints in [0, 255]; order only matters
                 for ties between equal channel values.
      n_colors : requested palette size, >= 1.

    Returns:
      list of (r, g, b) tuples, left-to-right over the split tree.

    Raises:
      InvalidParameterError: n_colors < 1 or a malformed sample.
      EmptyInputError: no samples.
    """
    max_depth = max_depth_for(n_colors)
    if len(samples) == 0:
        raise EmptyInputError("cannot quantize an empty sample set")
    root = Partition(tuple(validate_color(s) for s in samples))

    palette: Palette = []
    split(root, 0, max_depth, palette)
    return palette


def quantize_image(rgb: U8Image, n_colors: int) -> Palette:
    """quantize() over every pixel of an (H, W, 3) uint8 image, row-major."""
    max_depth_for(n_colors)
    return quantize(extract_samples(rgb), n_colors)


__all__ = ["max_depth_for", "palette_size_for", "quantize", "quantize_image"]
