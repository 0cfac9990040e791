"""
sample_io.py

Read / write complex sample files.

File format:
  - One complex sample per line: "<re> <im>" (floats, written as %.9e).
  - Blank lines and lines starting with '#' are ignored.

The same format is used for time-domain inputs, FFT outputs and twiddle
tables.
"""

import numpy as np
from typing import List

from twiddle_const import complex_dtype


def parse_sample_line(line: str) -> complex:
    fields = line.split()
    if len(fields) != 2:
        raise ValueError(f"expected 2 fields '<re> <im>', got {len(fields)}")
    return complex(float(fields[0]), float(fields[1]))


def load_sample_file(path: str, precision: str = "double") -> np.ndarray:
    """Load a sample file and return a complex numpy array."""
    samples: List[complex] = []
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                samples.append(parse_sample_line(line))
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc

    return np.array(samples, dtype=complex_dtype(precision))


def write_sample_file(path: str, data: np.ndarray):
    """
    Write complex data to a sample file, one "<re> <im>" pair per line.
    """
    with open(path, "w") as f:
        for c in data:
            f.write(f"{float(c.real): .9e} {float(c.imag): .9e}\n")
