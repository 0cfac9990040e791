"""
twiddle_const.py

Shared constants for the FFT scripts.

Precision names map to numpy complex types:
    single -> complex64  (float32 re/im, default)
    double -> complex128 (float64 re/im)
"""

import numpy as np

PI = 3.1415926535897932

DEFAULT_N = 1024
DEFAULT_PRECISION = "single"
TOLERANCE = 1e-5

PRECISIONS = {
    "single": np.complex64,
    "double": np.complex128,
}


class FFTPreconditionError(ValueError):
    """Bad FFT length, array length or array type passed to the FFT routines."""


def complex_dtype(precision: str) -> type:
    if precision not in PRECISIONS:
        raise ValueError(
            f"Unknown precision '{precision}' (expected one of {sorted(PRECISIONS)})"
        )
    return PRECISIONS[precision]


def real_dtype(precision: str) -> type:
    """Component type for a precision name (float32 / float64)."""
    return np.finfo(complex_dtype(precision)).dtype.type
