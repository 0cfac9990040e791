#!/usr/bin/env python3

'''
Generate the twiddle factor table for a radix-2 FFT.
'''


import argparse
import numpy as np

from sample_io import write_sample_file
from twiddle_const import (
    DEFAULT_PRECISION,
    PI,
    PRECISIONS,
    FFTPreconditionError,
    complex_dtype,
    real_dtype,
)


def gen_twiddles(N: int, precision: str = DEFAULT_PRECISION) -> np.ndarray:
    """
    Twiddles W_N^i = exp(-j 2π i / N) for i = 0..N-1.

    The angle step a = 2π/N and the angles -i*a are formed in the component
    type of `precision`; cos/sin run in double and are narrowed on store.
    N does not have to be a power of 2 here, only the FFT needs that.
    """
    if isinstance(N, bool) or not isinstance(N, (int, np.integer)) or N <= 0:
        raise FFTPreconditionError(f"twiddle table length must be a positive int, got {N!r}")

    rtype = real_dtype(precision)
    a = rtype(2.0 * PI / N)
    angles = -np.arange(N, dtype=rtype) * a   # stays in rtype

    W = np.empty(N, dtype=complex_dtype(precision))
    W.real = np.cos(angles.astype(np.float64))
    W.imag = np.sin(angles.astype(np.float64))
    return W


def write_twiddle_file(path: str, W: np.ndarray):
    write_sample_file(path, W)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate twiddle factor table for radix-2 FFT."
    )
    parser.add_argument(
        "--N",
        type=int,
        required=True,
        help="FFT length N (should be a power of 2).",
    )
    parser.add_argument(
        "--precision",
        choices=sorted(PRECISIONS),
        default=DEFAULT_PRECISION,
        help=f"Component precision (default: {DEFAULT_PRECISION}).",
    )
    parser.add_argument(
        "--outfile",
        default="twiddle.txt",
        help="Output table path (default: twiddle.txt).",
    )

    args = parser.parse_args(argv)

    N = args.N
    if N & (N - 1) != 0:
        print(f"[WARN] N={N} is not a power of 2; the table will not be usable by the FFT.")

    print(f"[INFO] Generating twiddles for N={N}, precision={args.precision}...")
    W = gen_twiddles(N, args.precision)
    print(f"[INFO] Generated {len(W)} twiddle entries (N).")

    print(f"[INFO] Writing to {args.outfile}")
    write_twiddle_file(args.outfile, W)

    print("[INFO] Done.")


if __name__ == "__main__":
    main()
