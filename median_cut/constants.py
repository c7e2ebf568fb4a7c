"""
Defaults and tunables used across the project.

- Channel range (CHANNEL_MIN, CHANNEL_MAX)
- Downsampling target (DEFAULT_TARGET_SAMPLES)
- Remap chunking (REMAP_CHUNK_ELEMENTS)
- File handling (IMAGE_EXTENSIONS, OUTPUT_SUFFIX)
"""
from __future__ import annotations

# =========================
# Colour channels
# =========================
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# =========================
# Sampling
# =========================
# Images with more pixels than this are shrunk before colours are sampled.
DEFAULT_TARGET_SAMPLES = 100_000

# =========================
# Remapping
# =========================
# Pixel x palette-entry pairs compared per block. Rows per block shrink as the
# palette grows, so the (rows, palette, 3) distance buffer stays bounded.
REMAP_CHUNK_ELEMENTS = 2_000_000

# =========================
# Files
# =========================
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".tif", ".tiff", ".ppm", ".gif"}
OUTPUT_SUFFIX = ".png"
