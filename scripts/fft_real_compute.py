#!/usr/bin/env python3

import argparse
import numpy as np

from sample_io import load_sample_file, write_sample_file


def compute_fft_real(x: np.ndarray) -> np.ndarray:
    """Wrapper for numpy.fft.fft on complex float array."""
    return np.fft.fft(x)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="NumPy reference FFT on a complex sample file."
    )
    parser.add_argument(
        "--in_file",
        required=True,
        help="Input time-domain sample file."
    )
    parser.add_argument(
        "--out_file",
        default="fft_np_out.txt",
        help="Output sample file path for numpy FFT result."
    )
    parser.add_argument(
        "--n",
        type=int,
        default=None,
        help="FFT length N (optional; defaults to file length)."
    )
    args = parser.parse_args(argv)

    x = load_sample_file(args.in_file)
    N_file = len(x)

    if args.n is not None and args.n != N_file:
        print(f"[WARN] Provided N={args.n}, but file has {N_file} samples. Using N={N_file}.")
    N = N_file

    print(f"[INFO] Running numpy FFT, N={N}")
    X = compute_fft_real(x)

    print(f"[INFO] Writing numpy FFT result to {args.out_file}")
    write_sample_file(args.out_file, X)
    print("[INFO] Done.")

if __name__ == "__main__":
    main()
