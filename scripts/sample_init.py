"""
sample_init.py

Generate an input sample file for FFT testing.

- Output format: one complex sample per line, "<re> <im>" (see sample_io.py).
  The imaginary part is 0 for every pattern.

- Patterns:
    impulse  : x[0] = 1.0, others = 0
    constant : x[n] = 1.0 for all n
    sine     : single-tone sine wave at bin k
    noise    : uniform noise in [-0.5, 0.5)

Usage examples:

    # Default: impulse, N=1024, samples_init.txt
    python sample_init.py

    # Sine wave at bin 5, N=1024
    python sample_init.py --pattern sine --k 5 --amp 0.8

    # Noise, different length, custom file
    python sample_init.py --pattern noise --N 256 --out noise_256.txt
"""

import argparse
import math
import numpy as np

from sample_io import write_sample_file
from twiddle_const import DEFAULT_N


def gen_impulse(N: int) -> np.ndarray:
    sig = np.zeros(N, dtype=float)
    sig[0] = 1.0
    return sig


def gen_constant(N: int, value: float = 1.0) -> np.ndarray:
    return np.full(N, value, dtype=float)


def gen_sine(N: int, k: int, amp: float) -> np.ndarray:
    n = np.arange(N, dtype=float)
    return amp * np.sin(2.0 * math.pi * k * n / N)


def gen_noise(N: int, seed: int = 1234) -> np.ndarray:
    rng = np.random.default_rng(seed=seed)
    return rng.uniform(low=-0.5, high=0.5, size=N)


def gen_pattern(pattern: str, N: int, k: int = 5, amp: float = 0.8) -> np.ndarray:
    if pattern == "impulse":
        print(f"[INFO] Pattern: impulse (x[0]=1.0, others=0)")
        return gen_impulse(N)
    elif pattern == "constant":
        print(f"[INFO] Pattern: constant (x[n]=1.0)")
        return gen_constant(N)
    elif pattern == "sine":
        print(f"[INFO] Pattern: sine wave, bin k={k}, amplitude={amp}")
        return gen_sine(N, k, amp)
    elif pattern == "noise":
        print(f"[INFO] Pattern: noise in [-0.5, 0.5), seed=1234")
        return gen_noise(N)
    else:
        raise ValueError(f"Unknown pattern: {pattern}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate an input sample file for FFT testing")
    parser.add_argument(
        "--pattern",
        type=str,
        default="impulse",
        choices=["impulse", "constant", "sine", "noise"],
        help="Input pattern: impulse | constant | sine | noise (default: impulse)",
    )
    parser.add_argument(
        "--out",
        type=str,
        default="samples_init.txt",
        help="Output filename (default: samples_init.txt)",
    )
    parser.add_argument(
        "--N",
        type=int,
        default=DEFAULT_N,
        help=f"Number of samples / FFT length (default: {DEFAULT_N})",
    )
    parser.add_argument(
        "--k",
        type=int,
        default=5,
        help="Sine bin index (used only for pattern == sine, default: 5)",
    )
    parser.add_argument(
        "--amp",
        type=float,
        default=0.8,
        help="Sine amplitude (used only for pattern == sine, default: 0.8)",
    )

    args = parser.parse_args(argv)

    real = gen_pattern(args.pattern, args.N, args.k, args.amp)

    # Imaginary part = 0 for all samples (real input)
    data = real.astype(np.complex128)

    write_sample_file(args.out, data)
    print(f"[INFO] Wrote {len(data)} samples to '{args.out}'")


if __name__ == "__main__":
    main()
