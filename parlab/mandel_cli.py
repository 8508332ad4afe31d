"""Command that times the serial and threaded Mandelbrot renderers."""

from __future__ import annotations

import getopt
import re
import sys
from typing import Any, Callable, Optional, Sequence, Tuple

from parlab.mandelbrot import MAX_THREADS, View, first_mismatch, mandelbrot_serial, mandelbrot_thread
from parlab.ppm import write_ppm_image
from parlab.timer import current_seconds

WIDTH = 1600
HEIGHT = 1200
MAX_ITERATIONS = 256
DEFAULT_THREADS = 8
RUNS = 5
PROGRAM_NAME = "mandelbrot"

ZOOM_SCALE = 0.015
ZOOM_SHIFT_X = -0.986
ZOOM_SHIFT_Y = 0.30


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _apply_view(view: View, index: int) -> View:
    if index == 2:
        return view.scale_and_shift(ZOOM_SCALE, ZOOM_SHIFT_X, ZOOM_SHIFT_Y)
    if index > 1:
        raise ValueError(f"Invalid view index {index}")
    return view


def view_for_index(index: int) -> View:
    """Return the view numbered ``index``: 1 (or lower) is the full set, 2 a zoom."""
    return _apply_view(View(), index)


def _usage(progname: str) -> None:
    print(f"Usage: {progname} [options]")
    print("Program Options:")
    print("  -t  --threads <N>  Use N threads")
    print("  -v  --view <INT>   Use specified view settings")
    print("  -?  --help         This message")


def _timed(func: Callable[[], Any], repeats: int) -> Tuple[float, Any]:
    best = float("inf")
    result = None
    for _ in range(repeats):
        start = current_seconds()
        result = func()
        best = min(best, current_seconds() - start)
    return best, result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the image serially and with threads, compare and report the speedup."""
    args = sys.argv[1:] if argv is None else list(argv)
    num_threads = DEFAULT_THREADS
    view = View()
    try:
        opts, _ = getopt.gnu_getopt(args, "t:v:?", ["threads=", "view=", "help"])
    except getopt.GetoptError:
        _usage(PROGRAM_NAME)
        return 1
    for opt, value in opts:
        if opt in ("-t", "--threads"):
            num_threads = _atoi(value)
        elif opt in ("-v", "--view"):
            try:
                view = _apply_view(view, _atoi(value))
            except ValueError:
                print("Invalid view index", file=sys.stderr)
                return 1
        else:
            _usage(PROGRAM_NAME)
            return 1

    if num_threads > MAX_THREADS:
        print(f"Error: Max allowed threads is {MAX_THREADS}", file=sys.stderr)
        return 1
    if num_threads < 1:
        print(f"Error: need at least one thread, got {num_threads}", file=sys.stderr)
        return 1

    min_serial, serial = _timed(
        lambda: mandelbrot_serial(view, WIDTH, HEIGHT, MAX_ITERATIONS), RUNS
    )
    print(f"[mandelbrot serial]:\t\t[{min_serial * 1000:.3f}] ms")
    write_ppm_image(serial, WIDTH, HEIGHT, "mandelbrot-serial.ppm", MAX_ITERATIONS)

    min_thread, threaded = _timed(
        lambda: mandelbrot_thread(num_threads, view, WIDTH, HEIGHT, MAX_ITERATIONS), RUNS
    )
    print(f"[mandelbrot thread]:\t\t[{min_thread * 1000:.3f}] ms")
    write_ppm_image(threaded, WIDTH, HEIGHT, "mandelbrot-thread.ppm", MAX_ITERATIONS)

    mismatch = first_mismatch(serial, threaded, WIDTH, HEIGHT)
    if mismatch is not None:
        row, col, expected, actual = mismatch
        print(f"Mismatch : [{row}][{col}], Expected : {expected}, Actual : {actual}")
        print("Error : Output from threads does not match serial output")
        return 1

    print(f"\t\t\t\t({min_serial / min_thread:.2f}x speedup from {num_threads} threads)")
    return 0