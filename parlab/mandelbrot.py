"""Mandelbrot set images computed serially and with worker threads."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

MAX_THREADS = 32

_FOUR = np.float32(4.0)
_TWO = np.float32(2.0)


@dataclass(frozen=True)
class View:
    """Rectangle of the complex plane mapped onto the image."""

    x0: float = -2.0
    x1: float = 1.0
    y0: float = -1.0
    y1: float = 1.0

    def scale_and_shift(self, scale: float, shift_x: float, shift_y: float) -> "View":
        """Return a view scaled about the origin and then shifted."""
        s = np.float32(scale)
        sx = np.float32(shift_x)
        sy = np.float32(shift_y)

        def move(value: float, shift: np.float32) -> float:
            return float(np.float32(value) * s + shift)

        return View(
            x0=move(self.x0, sx),
            x1=move(self.x1, sx),
            y0=move(self.y0, sy),
            y1=move(self.y1, sy),
        )


def mandel(c_re: float, c_im: float, count: int) -> int:
    """Count iterations before ``z -> z*z + c`` leaves the radius-2 disc."""
    c_re = np.float32(c_re)
    c_im = np.float32(c_im)
    z_re, z_im = c_re, c_im
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(count):
            if z_re * z_re + z_im * z_im > _FOUR:
                return i
            new_re = z_re * z_re - z_im * z_im
            new_im = _TWO * z_re * z_im
            z_re = c_re + new_re
            z_im = c_im + new_im
    return max(count, 0)


def _check_size(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ValueError(f"image size must be positive, got {width}x{height}")


def _output(out, width: int, height: int) -> np.ndarray:
    if out is None:
        return np.zeros((height, width), dtype=np.int32)
    if np.asarray(out).size != width * height:
        raise ValueError(f"output must hold {width * height} values")
    return out.reshape(height, width)


def _escape_counts(view: View, width: int, height: int, max_iterations: int, rows: np.ndarray) -> np.ndarray:
    """Iteration counts for the given image rows, computed in single precision."""
    x0, x1 = np.float32(view.x0), np.float32(view.x1)
    y0, y1 = np.float32(view.y0), np.float32(view.y1)
    dx = (x1 - x0) / np.float32(width)
    dy = (y1 - y0) / np.float32(height)

    xs = x0 + np.arange(width, dtype=np.float32) * dx
    ys = y0 + rows.astype(np.float32) * dy
    c_re = np.broadcast_to(xs, (rows.size, width)).astype(np.float32)
    c_im = np.broadcast_to(ys[:, None], (rows.size, width)).astype(np.float32)

    z_re = c_re.copy()
    z_im = c_im.copy()
    counts = np.zeros((rows.size, width), dtype=np.int32)
    active = np.ones((rows.size, width), dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(max_iterations):
            active &= ~(z_re * z_re + z_im * z_im > _FOUR)
            if not active.any():
                break
            counts += active
            new_re = z_re * z_re - z_im * z_im
            new_im = _TWO * z_re * z_im
            z_re = c_re + new_re
            z_im = c_im + new_im
    return counts


def mandelbrot_serial(
    view: View,
    width: int,
    height: int,
    max_iterations: int,
    start_row: int = 0,
    total_rows: Optional[int] = None,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Compute ``total_rows`` consecutive rows from ``start_row``.

    Returns a ``(height, width)`` array of iteration counts; rows outside the
    requested band keep whatever ``out`` held (zeros for a fresh array).
    """
    _check_size(width, height)
    if total_rows is None:
        total_rows = height - start_row
    if start_row < 0 or total_rows < 0 or start_row + total_rows > height:
        raise ValueError(f"rows {start_row}..{start_row + total_rows} outside image of height {height}")
    image = _output(out, width, height)
    rows = np.arange(start_row, start_row + total_rows)
    if rows.size:
        image[rows] = _escape_counts(view, width, height, max_iterations, rows)
    return image


def mandelbrot_interleaved(
    view: View,
    width: int,
    height: int,
    max_iterations: int,
    start_row: int,
    step: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Compute every ``step``-th row starting at ``start_row``."""
    _check_size(width, height)
    if step < 1:
        raise ValueError(f"step must be at least 1, got {step}")
    if start_row < 0:
        raise ValueError(f"start row must not be negative, got {start_row}")
    image = _output(out, width, height)
    rows = np.arange(start_row, height, step)
    if rows.size:
        image[rows] = _escape_counts(view, width, height, max_iterations, rows)
    return image


def mandelbrot_thread(num_threads: int, view: View, width: int, height: int, max_iterations: int) -> np.ndarray:
    """Compute the image with ``num_threads`` threads sharing rows round-robin.

    The calling thread acts as worker 0.
    """
    if num_threads > MAX_THREADS:
        raise ValueError(f"Max allowed threads is {MAX_THREADS}")
    if num_threads < 1:
        raise ValueError(f"at least one thread is needed, got {num_threads}")
    _check_size(width, height)
    image = np.zeros((height, width), dtype=np.int32)

    def worker(thread_id: int) -> None:
        mandelbrot_interleaved(view, width, height, max_iterations, thread_id, num_threads, image)
        print(f"Hello world from thread {thread_id}")

    workers = [threading.Thread(target=worker, args=(i,)) for i in range(1, num_threads)]
    for thread in workers:
        thread.start()
    worker(0)
    for thread in workers:
        thread.join()
    return image


def first_mismatch(gold, result, width: int, height: int) -> Optional[Tuple[int, int, int, int]]:
    """Return ``(row, col, expected, actual)`` of the first difference, or None."""
    expected = np.asarray(gold).reshape(-1)[: width * height].reshape(height, width)
    actual = np.asarray(result).reshape(-1)[: width * height].reshape(height, width)
    differing = np.argwhere(expected != actual)
    if differing.size == 0:
        return None
    row, col = differing[0]
    return int(row), int(col), int(expected[row, col]), int(actual[row, col])