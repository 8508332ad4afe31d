"""Single-precision numeric kernels: Newton square root and SAXPY."""

from __future__ import annotations

import numpy as np

THRESHOLD = np.float32(0.00001)

_ONE = np.float32(1.0)
_THREE = np.float32(3.0)
_HALF = np.float32(0.5)


def sqrt_serial(initial_guess: float, values) -> np.ndarray:
    """Square roots via Newton's method on ``1/sqrt(x)``, per element.

    Each element iterates from ``initial_guess`` until
    ``|guess*guess*x - 1|`` drops to the threshold; the result is ``x*guess``.
    """
    x = np.asarray(values, dtype=np.float32).reshape(-1)
    guess = np.full(x.shape, initial_guess, dtype=np.float32)
    with np.errstate(all="ignore"):
        error = np.abs(guess * guess * x - _ONE)
        pending = error > THRESHOLD
        while pending.any():
            g = guess[pending]
            xp = x[pending]
            g = (_THREE * g - xp * g * g * g) * _HALF
            guess[pending] = g
            pending[pending] = np.abs(g * g * xp - _ONE) > THRESHOLD
        return x * guess


def saxpy_serial(scale: float, x, y) -> np.ndarray:
    """Return ``scale * x + y`` in single precision."""
    xs = np.asarray(x, dtype=np.float32)
    ys = np.asarray(y, dtype=np.float32)
    if xs.shape != ys.shape:
        raise ValueError(f"x and y differ in shape: {xs.shape} vs {ys.shape}")
    return np.float32(scale) * xs + ys