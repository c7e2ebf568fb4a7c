# median_cut/__init__.py
"""
median_cut package.

Purpose:
  Median-cut colour quantization: build a small palette from RGB samples and
  map pixels onto it. See quantize_image.py for the CLI.

Public API:
  quantize        : samples + colour count -> palette (2 ** floor(log2(n)) entries).
  quantize_image  : same, from an (H, W, 3) uint8 array.
  match           : nearest palette colour for one pixel (first entry on ties).
  remap_image     : nearest palette colour for every pixel of an array.
  partition       : Partition / Bounds value objects.
  splitter        : the median-cut recursion.
  image_io        : load, reduce, extract samples, save.
  errors          : QuantizationError and its subclasses.

Quick start:
  from median_cut import quantize, match
  palette = quantize([(0, 0, 0), (255, 255, 255)], 2)
  match((10, 10, 10), palette)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import core_types
from . import errors
from . import partition
from . import splitter
from . import palette_builder
from . import matcher
from . import image_io
from . import utils

from .errors import (  # noqa: E402,F401
    QuantizationError,
    InvalidParameterError,
    EmptyInputError,
    EmptyPaletteError,
)
from .palette_builder import (  # noqa: E402,F401
    max_depth_for,
    palette_size_for,
    quantize,
    quantize_image,
)
from .matcher import match, match_index, remap_image  # noqa: E402,F401

__all__ = [
    "__version__",
    "core_types",
    "errors",
    "partition",
    "splitter",
    "palette_builder",
    "matcher",
    "image_io",
    "utils",
    "QuantizationError",
    "InvalidParameterError",
    "EmptyInputError",
    "EmptyPaletteError",
    "max_depth_for",
    "palette_size_for",
    "quantize",
    "quantize_image",
    "match",
    "match_index",
    "remap_image",
]
