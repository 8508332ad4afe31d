"""Commands timing the Newton square-root and SAXPY kernels."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Tuple

import numpy as np

from parlab.kernels import saxpy_serial, sqrt_serial
from parlab.timer import current_seconds

DEFAULT_N = 20 * 1000 * 1000
INITIAL_GUESS = 1.0
SQRT_TOLERANCE = 1e-4
SAXPY_SCALE = 2.0
RUNS = 3
FLOAT_BYTES = 4


def to_bandwidth(num_bytes: int, seconds: float) -> float:
    """Return bandwidth in GiB per second."""
    return float(num_bytes) / (1024.0 * 1024.0 * 1024.0) / seconds


def to_gflops(ops: int, seconds: float) -> float:
    """Return throughput in billions of operations per second."""
    return float(ops) / 1e9 / seconds


def mismatches(result, gold, tolerance: float = 0.0) -> List[Tuple[int, float, float]]:
    """Return ``(index, got, expected)`` for each entry off by more than ``tolerance``."""
    got = np.asarray(result, dtype=np.float64).reshape(-1)
    expected = np.asarray(gold, dtype=np.float64).reshape(-1)
    if got.shape != expected.shape:
        raise ValueError(f"result and gold differ in length: {got.size} vs {expected.size}")
    with np.errstate(all="ignore"):
        bad = np.flatnonzero(np.abs(got - expected) > tolerance)
    return [(int(i), float(got[i]), float(expected[i])) for i in bad]


def _report(result, gold, tolerance: float) -> None:
    for index, got, expected in mismatches(result, gold, tolerance):
        print(f"Error: [{index}] Got {got:f} expected {expected:f}")


def _parse(prog: str, argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("--size", type=int, default=DEFAULT_N, help="number of elements")
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error(f"size must be positive, got {args.size}")
    return args


def _best(func, repeats: int):
    best = float("inf")
    result = None
    for _ in range(repeats):
        start = current_seconds()
        result = func()
        best = min(best, current_seconds() - start)
    return best, result


def sqrt_main(argv: Optional[Sequence[str]] = None) -> int:
    """Time the Newton square root on random inputs in [0.001, 2.999]."""
    args = _parse("sqrt", argv)
    rng = np.random.default_rng()
    values = (np.float32(0.001) + np.float32(2.998) * rng.random(args.size).astype(np.float32)).astype(
        np.float32
    )
    gold = np.sqrt(values)

    min_serial, output = _best(lambda: sqrt_serial(INITIAL_GUESS, values), RUNS)
    print(f"[sqrt serial]:\t\t[{min_serial * 1000:.3f}] ms")
    _report(output, gold, SQRT_TOLERANCE)
    return 0


def saxpy_main(argv: Optional[Sequence[str]] = None) -> int:
    """Time SAXPY on ``x[i] = y[i] = i`` and report bandwidth and GFLOPS."""
    args = _parse("saxpy", argv)
    n = args.size
    total_bytes = 4 * n * FLOAT_BYTES
    total_flops = 2 * n
    x = np.arange(n, dtype=np.float32)
    y = np.arange(n, dtype=np.float32)
    gold = np.float32(SAXPY_SCALE) * x + y

    min_serial, result = _best(lambda: saxpy_serial(SAXPY_SCALE, x, y), RUNS)
    _report(result, gold, 0.0)
    print(
        f"[saxpy serial]:\t\t[{min_serial * 1000:.3f}] ms\t"
        f"[{to_bandwidth(total_bytes, min_serial):.3f}] GB/s\t"
        f"[{to_gflops(total_flops, min_serial):.3f}] GFLOPS"
    )
    return 0