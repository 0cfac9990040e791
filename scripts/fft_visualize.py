#!/usr/bin/env python3
"""
fft_visualize.py

Plot FFT spectra from complex sample files.

Modes:
  --time_file : load time-domain samples, compute both
                  - NumPy FFT      (reference)
                  - in-place FFT   (fft_compute.py)
                print error metrics and plot both magnitudes side by side.
  --spec_file : plot an existing spectrum (magnitude + real/imag parts).
                No FFT computations are performed.

Usage examples:

  python fft_visualize.py --time_file sine_time.txt
  python fft_visualize.py --time_file sine_time.txt --fs 20000 --half
  python fft_visualize.py --spec_file fft_out.txt --half
"""

import argparse
import os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fft_check import compare_results
from fft_compute import compute_fft
from fft_real_compute import compute_fft_real
from sample_io import load_sample_file
from twiddle_const import DEFAULT_PRECISION, PRECISIONS


def _x_axis(N: int, fs, half: bool):
    k = np.arange(N // 2) if half else np.arange(N)
    if fs is not None:
        return k, k * fs / N, "Frequency (Hz)"
    return k, k, "Bin index k"


def plot_spectrum(X: np.ndarray, out_png: str, fs=None, half: bool = False,
                  title: str = "FFT Visualization") -> str:
    """
    Save magnitude and real/imag plots of spectrum X to out_png.
    """
    N = len(X)
    k, x_axis, x_label = _x_axis(N, fs, half)

    mag = np.abs(X[k])
    real = X.real[k]
    imag = X.imag[k]

    fig = plt.figure(figsize=(12, 8))
    fig.suptitle(title, fontsize=14)

    # Magnitude spectrum
    ax1 = fig.add_subplot(2, 1, 1)
    ax1.plot(x_axis, mag, label="|X[k]|")
    ax1.set_xlabel(x_label)
    ax1.set_ylabel("Magnitude")
    ax1.set_title("Magnitude spectrum")
    ax1.grid(True)
    ax1.legend()

    # Real/Imag parts
    ax2 = fig.add_subplot(2, 1, 2)
    ax2.plot(x_axis, real, label="Re{X[k]}")
    ax2.plot(x_axis, imag, label="Im{X[k]}", linestyle="--")
    ax2.set_xlabel(x_label)
    ax2.set_ylabel("Amplitude")
    ax2.set_title("Real and Imag parts")
    ax2.grid(True)
    ax2.legend()

    fig.tight_layout(rect=[0, 0.03, 1, 0.95])
    fig.savefig(out_png)
    plt.close(fig)
    return out_png


def plot_comparison(X_ref: np.ndarray, X_dut: np.ndarray, out_png: str, fs=None,
                    half: bool = False, title: str = "FFT Magnitude: NumPy vs in-place") -> str:
    """
    Save side-by-side magnitude plots of a reference and a DUT spectrum.
    """
    N = len(X_ref)
    k, x_axis, x_label = _x_axis(N, fs, half)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5), sharey=True)
    fig.suptitle(title, fontsize=14)

    ax1.plot(x_axis, np.abs(X_ref[k]))
    ax1.set_title("NumPy FFT |X_np[k]|")
    ax1.set_xlabel(x_label)
    ax1.set_ylabel("Magnitude")
    ax1.grid(True)

    ax2.plot(x_axis, np.abs(X_dut[k]))
    ax2.set_title("In-place FFT |X[k]|")
    ax2.set_xlabel(x_label)
    ax2.grid(True)

    fig.tight_layout(rect=[0, 0.03, 1, 0.95])
    fig.savefig(out_png)
    plt.close(fig)
    return out_png


def _png_name(path: str, suffix: str) -> str:
    return os.path.splitext(path)[0] + suffix


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Plot FFT spectra from complex sample files."
    )
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument(
        "--time_file",
        help="Time-domain sample file; FFT'd with numpy and the in-place FFT."
    )
    src.add_argument(
        "--spec_file",
        help="Spectrum sample file to plot as-is."
    )
    parser.add_argument(
        "--fs",
        type=float,
        default=None,
        help="Sampling frequency in Hz (optional, for x-axis in Hz)."
    )
    parser.add_argument(
        "--half",
        action="store_true",
        help="Plot only first N/2 bins (positive frequencies)."
    )
    parser.add_argument(
        "--precision",
        choices=sorted(PRECISIONS),
        default=DEFAULT_PRECISION,
        help=f"Precision of the in-place FFT (default: {DEFAULT_PRECISION})."
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Figure title (optional)."
    )
    args = parser.parse_args(argv)

    if args.fs is not None:
        print(f"[INFO] Using fs = {args.fs} Hz for x-axis.")
    else:
        print("[INFO] No fs provided; x-axis is bin index.")

    if args.spec_file is not None:
        print(f"[INFO] Loading FFT data from {args.spec_file}")
        X = load_sample_file(args.spec_file)
        print(f"[INFO] Loaded {len(X)} complex bins.")
        out_png = plot_spectrum(
            X, _png_name(args.spec_file, "_fft_visualization.png"), args.fs, args.half,
            args.title or "FFT Visualization",
        )
        print(f"[INFO] Saved figure to {out_png}")
        return

    print(f"[INFO] Loading time-domain data from {args.time_file}")
    x = load_sample_file(args.time_file)
    print(f"[INFO] N = {len(x)}")

    print("[INFO] Computing NumPy FFT...")
    X_np = compute_fft_real(x)

    print(f"[INFO] Computing in-place FFT ({args.precision})...")
    X = compute_fft(x, args.precision)

    compare_results(X_np, X)

    out_png = plot_comparison(
        X_np, X, _png_name(args.time_file, "_fft_mag_compare_side_by_side.png"), args.fs,
        args.half, args.title or "FFT Magnitude: NumPy vs in-place",
    )
    print(f"[INFO] Saved magnitude comparison figure to {out_png}")


if __name__ == "__main__":
    main()
