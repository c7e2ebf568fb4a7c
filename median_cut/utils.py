# median_cut/utils.py
from __future__ import annotations

"""
Shared utilities for median_cut.

Includes duration formatting, palette reporting, and tidy print-based logging
used by the CLI. Log lines go to stderr; the quantizer itself never logs.
"""

import sys
from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np

from .core_types import RGBTuple, U8Image, assert_u8_image_rgb, rgb_to_hex


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_total_duration_compact(seconds: float) -> str:
    """Compact total duration: 'Mm Ss', 'Ss.s', or 'ms'."""
    if seconds >= 60.0:
        minutes = int(seconds // 60)
        rem = int(round(seconds - 60 * minutes))
        return f"{minutes}m {rem}s"
    if seconds >= 1.0:
        return f"{seconds:.1f}s"
    return f"{seconds * 1000.0:.1f}ms"


# Palette reporting


def format_palette_line(rgb: RGBTuple) -> str:
    """One palette entry as 'Color: (r, g, b)'."""
    return f"Color: ({rgb[0]}, {rgb[1]}, {rgb[2]})"


def colour_usage_report(
    mapped_rgb: U8Image, palette: Sequence[RGBTuple]
) -> List[Tuple[str, int]]:
    """
    Pixel count per palette entry in a remapped image.

    Returns (hex, count) in palette order; entries no pixel landed on get 0.
    """
    flat = assert_u8_image_rgb(mapped_rgb).reshape(-1, 3)
    uniques, counts = np.unique(flat, axis=0, return_counts=True)
    count_of = {
        (int(r), int(g), int(b)): int(c) for (r, g, b), c in zip(uniques, counts)
    }
    report: List[Tuple[str, int]] = []
    seen = set()
    for rgb in palette:
        key = (int(rgb[0]), int(rgb[1]), int(rgb[2]))
        # duplicate entries never receive pixels; the first one takes them
        report.append((rgb_to_hex(key), 0 if key in seen else count_of.get(key, 0)))
        seen.add(key)
    return report


#  CLI logging


def enable_line_buffered_stdout() -> None:
    """
    Enable line-buffered stdout when supported.
    Helps live printing in terminals that expose .reconfigure().
    """
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return text
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Uses format_bool_on_off / format_number_compact for readability.
    """
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [run] Colours: 16  Palette size: 16  Reduce: on  Samples: 100,000
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", file=sys.stderr, flush=True)


def log(message: str) -> None:
    """Plain log line to stderr; stdout is left for results."""
    print(message, file=sys.stderr, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", file=sys.stderr, flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", file=sys.stderr, flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_total_duration_compact",
    "format_palette_line",
    "colour_usage_report",
    "enable_line_buffered_stdout",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
