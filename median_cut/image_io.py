# median_cut/image_io.py
from __future__ import annotations

import io
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import DEFAULT_TARGET_SAMPLES, IMAGE_EXTENSIONS, OUTPUT_SUFFIX
from .core_types import RGBTuple, U8Image, assert_u8_image_rgb
from .errors import InvalidParameterError

"""
Image I/O helpers (RGB in sRGB), sample-count reduction, and sample extraction.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except Exception:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def _convert_to_srgb_rgb(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im.convert("RGB"),
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGB",
            )
            if im2 is None:
                return im.convert("RGB")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGB")

    return im.convert("RGB")


def load_image_rgb(path: Path) -> U8Image:
    """Decode any Pillow-readable file to an (H, W, 3) uint8 sRGB array."""
    with Image.open(path) as im0:
        im = _convert_to_srgb_rgb(im0)
    return np.array(im, dtype=np.uint8)


def reduced_size(width: int, height: int, target_samples: int) -> tuple[int, int]:
    """
    (W, H) holding about `target_samples` pixels at the same aspect ratio.

    H = sqrt(height / width * target), W = target / H, both rounded.
    """
    h = math.sqrt(height / width * target_samples)
    w = target_samples / h
    return max(1, int(round(w))), max(1, int(round(h)))


def reduce_image(
    rgb: U8Image, target_samples: int = DEFAULT_TARGET_SAMPLES
) -> U8Image:
    """Shrink an image above `target_samples` pixels; smaller images pass through."""
    if target_samples < 1:
        raise InvalidParameterError(
            f"target sample count must be >= 1, got {target_samples}"
        )
    img = assert_u8_image_rgb(rgb)
    height, width = img.shape[0], img.shape[1]
    if width * height <= target_samples:
        return img
    dst_w, dst_h = reduced_size(width, height, target_samples)
    im = Image.fromarray(np.ascontiguousarray(img))
    im2 = im.resize((dst_w, dst_h), resample=Image.Resampling.LANCZOS)
    return np.array(im2, dtype=np.uint8)


def extract_samples(rgb: U8Image) -> List[RGBTuple]:
    """Row-major list of (r, g, b) tuples, one per pixel."""
    img = assert_u8_image_rgb(rgb)
    return [(r, g, b) for r, g, b in img.reshape(-1, 3).tolist()]


def save_image_rgb(path: Path, rgb: U8Image) -> Path:
    """Write an RGB buffer; unknown or missing suffixes become PNG."""
    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        path = path.with_suffix(OUTPUT_SUFFIX)
    img = np.ascontiguousarray(assert_u8_image_rgb(rgb))
    Image.fromarray(img).save(path)
    return path


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


@dataclass(frozen=True)
class ImageHeader:
    """What the file holds before conversion to 8-bit RGB."""

    format: str
    mode: str
    bands: int
    width: int
    height: int
    interlaced: bool  # Adam7 PNG or progressive JPEG


def read_image_header(path: Path) -> ImageHeader:
    """Read format, mode and layout without decoding pixel data."""
    with Image.open(path) as im:
        interlaced = bool(im.info.get("interlace") or im.info.get("progressive"))
        return ImageHeader(
            format=im.format or "?",
            mode=im.mode,
            bands=len(im.getbands()),
            width=im.width,
            height=im.height,
            interlaced=interlaced,
        )


__all__ = [
    "load_image_rgb",
    "reduced_size",
    "reduce_image",
    "extract_samples",
    "save_image_rgb",
    "is_image_file",
    "ImageHeader",
    "read_image_header",
]
