#!/usr/bin/env python3
"""
quantize_image.py
Build a median-cut palette from an image and optionally write the image
remapped onto it.

Usage:
  python quantize_image.py INPUT NUM_COLORS [OUTPUT] --samples N --no-reduce --save-reduced PATH --debug

Palette size:
  2 ** floor(log2(NUM_COLORS)). A count that is not a power of two is rounded
  down (e.g. 12 -> 8) and a warning is printed.

Input:
  Any Pillow-readable image. EXIF orientation and ICC profiles are applied,
  alpha is dropped. Files Pillow cannot open are rejected with exit code 2.

Output:
  The palette, one "Color: (r, g, b)" line per entry, on stdout. Progress,
  timings, warnings and errors go to stderr, so stdout can be piped.
  If OUTPUT is given, the full-resolution image is remapped to the nearest
  palette colours and written there (PNG when the suffix is not an image type).

Notes:
  Images larger than --samples pixels are shrunk before sampling; remapping
  always uses the original resolution.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from PIL import UnidentifiedImageError

from median_cut.constants import DEFAULT_TARGET_SAMPLES
from median_cut.errors import QuantizationError
from median_cut.image_io import (
    extract_samples,
    is_image_file,
    load_image_rgb,
    read_image_header,
    reduce_image,
    save_image_rgb,
)
from median_cut.matcher import remap_image
from median_cut.palette_builder import palette_size_for, quantize
from median_cut.utils import (
    # formatting
    format_seconds_compact,
    format_total_duration_compact,
    format_palette_line,
    colour_usage_report,
    # pretty logging
    print_banner,
    print_config_line,
    log,
    debug_log,
    warn,
    error,
    enable_line_buffered_stdout,
)

# CLI args


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: Path to the input image
        num_colors: requested palette size
        dst: optional Path for the remapped image
        samples: pixel budget for sampling
        no_reduce: sample every pixel of the input
        save_reduced: optional Path for the shrunk sampling image
        debug: bool for verbose details
    """
    parser = argparse.ArgumentParser(
        prog="quantize_image",
        description="Median-cut palette extraction and remapping.",
    )
    parser.add_argument("src", type=Path, help="Input image")
    parser.add_argument(
        "num_colors",
        type=int,
        help="Palette size; rounded down to a power of two",
    )
    parser.add_argument(
        "dst", type=Path, nargs="?", default=None, help="Remapped output image (optional)"
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=DEFAULT_TARGET_SAMPLES,
        help="Shrink the image to about this many pixels before sampling.",
    )
    parser.add_argument(
        "--no-reduce",
        action="store_true",
        help="Sample every pixel of the input (no shrinking).",
    )
    parser.add_argument(
        "--save-reduced",
        type=Path,
        default=None,
        help="Also write the shrunk sampling image here.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser.parse_args(argv)


# Pipeline


def run(args: argparse.Namespace) -> int:
    """load -> reduce -> extract -> quantize -> print -> optional remap + save."""
    t_start = time.perf_counter()

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2
    if args.samples < 1:
        error(f"--samples must be >= 1, got {args.samples}")
        return 2
    try:
        palette_size = palette_size_for(args.num_colors)
    except QuantizationError as e:
        error(str(e))
        return 2
    if palette_size != args.num_colors:
        warn(
            f"{args.num_colors} is not a power of two; palette will hold {palette_size} colours"
        )

    print_banner(src.name)
    print_config_line(
        "run",
        [
            ("Colours", args.num_colors),
            ("Palette size", palette_size),
            ("Reduce", not args.no_reduce),
            ("Samples", "all" if args.no_reduce else args.samples),
        ],
        debug=args.debug,
    )

    if not is_image_file(src):
        error(f"not an image: {src}")
        return 2
    header = read_image_header(src)
    if header.interlaced:
        warn(f"{header.format} is interlaced; decoding may be slow")
    if args.debug and header.mode != "RGB":
        debug_log(
            f"source mode {header.mode} with {header.bands} band(s); converted to RGB"
        )

    try:
        rgb_full = load_image_rgb(src)
    except (UnidentifiedImageError, OSError) as e:
        error(f"cannot read {src}: {e}")
        return 1
    height0, width0 = rgb_full.shape[0], rgb_full.shape[1]
    log(f"Image size {width0}x{height0}")

    rgb_sample = rgb_full if args.no_reduce else reduce_image(rgb_full, args.samples)
    height, width = rgb_sample.shape[0], rgb_sample.shape[1]
    if (width, height) != (width0, height0):
        log(f"Shrinking image to {width}x{height}")
    if args.save_reduced is not None:
        written = save_image_rgb(args.save_reduced, rgb_sample)
        if args.debug:
            debug_log(f"reduced image written to {written}")

    samples = extract_samples(rgb_sample)
    t_extract = time.perf_counter()
    log(f"Load & colour extract {format_seconds_compact(t_extract - t_start)}")

    try:
        palette = quantize(samples, args.num_colors)
    except QuantizationError as e:
        error(str(e))
        return 1
    t_quant = time.perf_counter()
    log(f"Colour quantisation {format_seconds_compact(t_quant - t_extract)}")

    for rgb in palette:
        print(format_palette_line(rgb), flush=True)

    if args.dst is not None:
        mapped = remap_image(rgb_full, palette)
        written = save_image_rgb(args.dst, mapped)
        t_save = time.perf_counter()
        log(f"Saved {format_seconds_compact(t_save - t_quant)}")
        log(f"Quantized image saved to {written}")
        if args.debug:
            debug_log("Colours used:")
            for hex_code, count in colour_usage_report(mapped, palette):
                debug_log(f"  {hex_code}: {count:,}")

    log(f"Total time {format_total_duration_compact(time.perf_counter() - t_start)}")
    return 0


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
