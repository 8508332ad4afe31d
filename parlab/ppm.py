"""Rendering of iteration counts as greyscale binary PPM images."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

import numpy as np

PathLike = Union[str, "os.PathLike[str]"]


def ppm_bytes(data, width: int, height: int, max_iterations: int) -> bytes:
    """Encode ``width * height`` iteration counts as a P6 image.

    Each count is clamped to ``max_iterations``, divided by 256 and raised to
    the power 0.5 to brighten low counts, then scaled to an 8-bit grey level.
    """
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    counts = np.asarray(data).reshape(-1)
    pixels = width * height
    if counts.size < pixels:
        raise ValueError(
            f"need {pixels} iteration counts for a {width}x{height} image, got {counts.size}"
        )
    with np.errstate(all="ignore"):
        clamped = np.minimum(np.float32(max_iterations), counts[:pixels].astype(np.float32))
        mapped = np.power(clamped / np.float32(256.0), np.float32(0.5))
        levels = (np.float32(255.0) * mapped).astype(np.int64) & 0xFF
    body = np.repeat(levels.astype(np.uint8), 3).tobytes()
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    return header + body


def write_ppm_image(data, width: int, height: int, filename: PathLike, max_iterations: int) -> None:
    """Write the iteration counts to ``filename`` as a binary PPM image."""
    Path(filename).write_bytes(ppm_bytes(data, width, height, max_iterations))
    print(f"Wrote image file {os.fspath(filename)}")