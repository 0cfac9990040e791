#!/usr/bin/env python3
"""
fft_compute.py

In-place radix-2 FFT on a complex numpy array:

- Butterfly stages with span = N/2, N/4, .., 1
- twiddle stride = 1, 2, 4, .. (doubles per stage)
- butterfly:  x[i]      = x[i] + x[i+span]
              x[i+span] = (x[i] - x[i+span]) * W[j * stride]
- output of the stages is in bit-reversed order and is put back into
  natural order by an in-place bit-reversal pass.

All arithmetic stays in the array's component type (float32 for complex64,
float64 for complex128). In single precision the rounding error grows with
the number of stages, O(log2 N) relative to the intermediate sums.

CLI:
    python fft_compute.py --in_file sine_time.txt --out_file sine_freq.txt --n 1024
"""

import argparse
import math
import numpy as np
from typing import Optional

from sample_io import load_sample_file, write_sample_file
from twiddle_const import DEFAULT_PRECISION, PRECISIONS, FFTPreconditionError, complex_dtype
from twiddle_gen import gen_twiddles

__all__ = [
    "FFTPreconditionError",
    "is_power_of_two",
    "check_fft_args",
    "fft_butterfly",
    "bit_reverse_inplace",
    "fft_transform",
    "compute_fft",
    "bit_reverse_indices",
    "bit_reverse_array",
]


def is_power_of_two(n) -> bool:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        return False
    return n > 0 and (n & (n - 1)) == 0


def _check_complex_array(name: str, arr, n: int):
    if not isinstance(arr, np.ndarray):
        raise FFTPreconditionError(f"{name} must be a numpy array, got {type(arr).__name__}")
    if arr.ndim != 1:
        raise FFTPreconditionError(f"{name} must be 1-D, got shape {arr.shape}")
    if not np.iscomplexobj(arr):
        raise FFTPreconditionError(f"{name} must have a complex dtype, got {arr.dtype}")
    if arr.shape[0] != n:
        raise FFTPreconditionError(f"{name} has length {arr.shape[0]}, expected N={n}")


def check_fft_args(n: int, x: np.ndarray, W: np.ndarray):
    """
    Validate the arguments of fft_transform. Raises FFTPreconditionError.
    """
    if not is_power_of_two(n):
        raise FFTPreconditionError(f"FFT length must be a positive power of 2, got {n!r}")
    _check_complex_array("x", x, n)
    _check_complex_array("W", W, n)
    if not x.flags.writeable:
        raise FFTPreconditionError("x must be writeable (the FFT runs in place)")


# ----------------------------
# Phase 1: butterfly network
# ----------------------------
def fft_butterfly(n: int, x: np.ndarray, W: np.ndarray):
    """
    Run the log2(n) butterfly stages on x in place.

    Leaves the spectrum in bit-reversed order. No validation; call
    fft_transform unless the arguments are already checked.
    """
    rtype = x.real.dtype.type
    re = x.real   # views into x
    im = x.imag

    stride = 1
    span = n // 2
    while span > 0:
        step = 2 * span
        for j in range(span):
            u = W[j * stride]
            ur = rtype(u.real)
            ui = rtype(u.imag)

            # every i = j, j+step, .. < n for this twiddle
            a_re = re[j:n:step]
            a_im = im[j:n:step]
            b_re = re[j + span:n:step]
            b_im = im[j + span:n:step]

            sum_re = a_re + b_re
            sum_im = a_im + b_im
            d_re = a_re - b_re
            d_im = a_im - b_im

            # (a + ib)(x + iy) = (ax - by) + i(ay + bx)
            b_re[:] = d_re * ur - d_im * ui
            b_im[:] = d_re * ui + d_im * ur
            a_re[:] = sum_re
            a_im[:] = sum_im
        stride *= 2
        span //= 2


# ----------------------------
# Phase 2: bit-reversal reorder
# ----------------------------
def bit_reverse_inplace(n: int, x: np.ndarray):
    """
    Reorder x in place so x[i] moves to bitrev(i) (log2(n) bits).

    Uses an incremental reversed counter j; swaps only when i < j so each
    pair is swapped once and fixed points are left alone.
    """
    j = 0
    for i in range(1, n - 1):
        k = n // 2
        while k <= j:
            j -= k
            k //= 2
        j += k
        if i < j:
            x[i], x[j] = x[j], x[i]


def fft_transform(n: int, x: np.ndarray, W: np.ndarray) -> None:
    """
    Replace x with its DFT, in place.

    n: FFT length (power of 2)
    x: complex array of length n, overwritten with the FFT bins
    W: twiddle table of length n from twiddle_gen.gen_twiddles(n)

    Raises FFTPreconditionError on a bad length, shape or dtype.
    """
    check_fft_args(n, x, W)
    fft_butterfly(n, x, W)
    # must run after all butterfly stages
    bit_reverse_inplace(n, x)


def compute_fft(data, precision: Optional[str] = None, W: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Convenience wrapper: copy `data` into a new array and FFT it.

    precision defaults to the dtype of `data` when it is complex64/complex128,
    otherwise to DEFAULT_PRECISION. If W is not given it is generated.
    """
    if precision is None:
        dtype = getattr(data, "dtype", None)
        precision = "double" if dtype == np.complex128 else DEFAULT_PRECISION
    x = np.array(data, dtype=complex_dtype(precision))
    if x.ndim != 1:
        raise FFTPreconditionError(f"data must be 1-D, got shape {x.shape}")
    N = x.shape[0]
    if W is None:
        if not is_power_of_two(N):
            raise FFTPreconditionError(f"FFT length must be a positive power of 2, got {N}")
        W = gen_twiddles(N, precision)

    fft_transform(N, x, W)
    return x


def bit_reverse_indices(N: int) -> np.ndarray:
    """
    Return an array of length N where each entry is the bit-reversed index.
    N must be a power of 2.
    """
    if not is_power_of_two(N):
        raise FFTPreconditionError("N must be a power of 2 for bit-reversal")
    nbits = int(math.log2(N))
    rev = np.zeros(N, dtype=int)
    for i in range(N):
        b = i
        r = 0
        for _ in range(nbits):
            r = (r << 1) | (b & 1)
            b >>= 1
        rev[i] = r
    return rev


def bit_reverse_array(x: np.ndarray) -> np.ndarray:
    """
    Return a new array whose elements are reordered in bit-reversed index order.
    x is a 1D numpy array of length N (power of 2).
    """
    N = x.shape[0]
    idx = bit_reverse_indices(N)
    return x[idx]


# ----------------------------
# CLI
# ----------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="In-place radix-2 FFT on a complex sample file."
    )
    parser.add_argument(
        "--in_file",
        required=True,
        help="Input time-domain sample file."
    )
    parser.add_argument(
        "--out_file",
        default="fft_out.txt",
        help="Output sample file path for the FFT result."
    )
    parser.add_argument(
        "--n",
        type=int,
        default=None,
        help="FFT length N (optional; defaults to length of in_file)."
    )
    parser.add_argument(
        "--precision",
        choices=sorted(PRECISIONS),
        default=DEFAULT_PRECISION,
        help=f"Component precision (default: {DEFAULT_PRECISION})."
    )
    args = parser.parse_args(argv)

    x = load_sample_file(args.in_file, args.precision)
    N_file = len(x)

    if args.n is not None and args.n != N_file:
        print(f"[WARN] Provided N={args.n}, but file has {N_file} samples. Using N={N_file}.")
    N = N_file

    print(f"[INFO] Generating twiddles, N={N}, precision={args.precision}")
    W = gen_twiddles(N, args.precision)

    print(f"[INFO] Running FFT, N={N}")
    fft_transform(N, x, W)

    print(f"[INFO] Writing FFT result to {args.out_file}")
    write_sample_file(args.out_file, x)
    print("[INFO] Done.")

if __name__ == "__main__":
    main()
