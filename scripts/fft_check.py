#!/usr/bin/env python3
"""
fft_check.py

Compare two complex sample files (one "<re> <im>" per line).

No FFT computations are performed. This is just a comparator:
  - ref: reference output (e.g. numpy FFT)
  - dut: output under test (e.g. fft_compute.py)

Usage:
    python fft_check.py --ref ref_fft.txt --dut fft_out.txt
"""

import argparse
import sys
import numpy as np

from sample_io import load_sample_file
from twiddle_const import TOLERANCE


def compare_results(ref: np.ndarray, dut: np.ndarray, tol: float = TOLERANCE) -> dict:
    ref = np.asarray(ref, dtype=np.complex128)
    dut = np.asarray(dut, dtype=np.complex128)

    if len(ref) != len(dut):
        print(f"[WARN] Length mismatch: ref={len(ref)}, dut={len(dut)}. Truncating to min.")
        n = min(len(ref), len(dut))
        ref = ref[:n]
        dut = dut[:n]

    if len(ref) == 0:
        return {"length": 0, "max_err": 0.0, "mean_err": 0.0, "rms_err": 0.0, "match": True}

    diff = ref - dut
    abs_err = np.abs(diff)

    max_err = float(np.max(abs_err))
    mean_err = float(np.mean(abs_err))
    rms_err = float(np.sqrt(np.mean(abs_err**2)))

    print("[RESULT] Comparison between reference and DUT:")
    print(f"         Length          : {len(ref)} samples")
    print(f"         Max abs error   : {max_err:.6e}")
    print(f"         Mean abs error  : {mean_err:.6e}")
    print(f"         RMS error       : {rms_err:.6e}")

    result = {
        "length": len(ref),
        "max_err": max_err,
        "mean_err": mean_err,
        "rms_err": rms_err,
        "match": max_err <= tol,
    }

    if not result["match"]:
        # Dump first few bins for sanity
        print("\n[DEBUG] First 8 samples (ref, dut, diff):")
        for i in range(min(8, len(ref))):
            print(
                f"  k={i:2d}: "
                f"ref={ref[i]: .6f}, "
                f"dut={dut[i]: .6f}, "
                f"diff={diff[i]: .6e}"
            )
        print("\n[ERROR] Mismatch detected between reference and DUT!")
        return result

    print("\n[INFO] Comparison complete. Results match within tolerance.")
    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Compare two complex FFT sample files.")
    parser.add_argument(
        "--ref",
        required=True,
        help="Reference sample file.",
    )
    parser.add_argument(
        "--dut",
        required=True,
        help="Sample file under test.",
    )
    parser.add_argument(
        "--tol",
        type=float,
        default=TOLERANCE,
        help=f"Max abs error allowed (default: {TOLERANCE:g}).",
    )
    args = parser.parse_args(argv)

    print(f"[INFO] Loading reference from {args.ref}")
    ref = load_sample_file(args.ref)

    print(f"[INFO] Loading DUT from {args.dut}")
    dut = load_sample_file(args.dut)

    result = compare_results(ref, dut, args.tol)
    return 0 if result["match"] else 1


if __name__ == "__main__":
    sys.exit(main())
