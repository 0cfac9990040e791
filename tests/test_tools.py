"""
Tests for the supporting scripts: sample files, signal generation,
comparison, plotting and the FFT command lines.
"""

import numpy as np
import pytest

import fft_check
import fft_compute
import fft_real_compute
import fft_visualize
import sample_init
from sample_io import load_sample_file, write_sample_file


class TestSampleIO:
    """Sample file read / write."""

    def test_write_then_load(self, tmp_path):
        path = tmp_path / "x.txt"
        data = np.array([1 + 2j, -0.5 + 0j, 0 - 3.25j], dtype=np.complex128)

        write_sample_file(str(path), data)
        loaded = load_sample_file(str(path))

        np.testing.assert_allclose(loaded, data, rtol=1e-9)
        assert len(path.read_text().splitlines()) == 3

    def test_skips_comments_and_blank_lines(self, tmp_path):
        path = tmp_path / "x.txt"
        path.write_text("# header\n\n1.0 0.0\n  \n0.0 -1.0\n")

        loaded = load_sample_file(str(path), "single")

        assert loaded.dtype == np.complex64
        np.testing.assert_array_equal(loaded, [1, -1j])

    def test_malformed_line(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("1.0 0.0\n2.0\n")

        with pytest.raises(ValueError, match=r"bad.txt:2:"):
            load_sample_file(str(path))

    def test_not_a_number(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("1.0 abc\n")

        with pytest.raises(ValueError, match=r"bad.txt:1:"):
            load_sample_file(str(path))


class TestSampleInit:
    """Test signal generators."""

    def test_impulse(self):
        sig = sample_init.gen_impulse(8)

        assert sig[0] == 1.0
        assert np.count_nonzero(sig) == 1

    def test_constant(self):
        np.testing.assert_array_equal(sample_init.gen_constant(4), [1, 1, 1, 1])

    def test_sine_peaks_at_bin(self):
        N, k = 64, 5
        sig = sample_init.gen_sine(N, k, 0.8)

        mag = np.abs(np.fft.fft(sig))

        assert np.argmax(mag[: N // 2]) == k

    def test_noise_is_seeded(self):
        a = sample_init.gen_noise(32)
        b = sample_init.gen_noise(32)

        np.testing.assert_array_equal(a, b)
        assert np.all(a >= -0.5) and np.all(a < 0.5)

    def test_unknown_pattern(self):
        with pytest.raises(ValueError, match="Unknown pattern"):
            sample_init.gen_pattern("chirp", 8)

    def test_cli_writes_file(self, tmp_path):
        out = tmp_path / "sine.txt"

        sample_init.main(["--pattern", "sine", "--N", "16", "--k", "2", "--out", str(out)])

        x = load_sample_file(str(out))
        assert len(x) == 16
        np.testing.assert_array_equal(x.imag, 0)


class TestCompareResults:
    """fft_check comparator."""

    def test_match(self):
        ref = np.array([1 + 1j, 2, 3])

        result = fft_check.compare_results(ref, ref + 1e-7)

        assert result["match"]
        assert result["length"] == 3
        assert result["max_err"] == pytest.approx(1e-7, rel=1e-3)

    def test_mismatch(self, capsys):
        ref = np.array([1, 2, 3], dtype=complex)
        dut = np.array([1, 2, 4], dtype=complex)

        result = fft_check.compare_results(ref, dut)

        assert not result["match"]
        assert result["max_err"] == pytest.approx(1.0)
        assert "[ERROR] Mismatch" in capsys.readouterr().out

    def test_length_mismatch_truncates(self, capsys):
        result = fft_check.compare_results(np.ones(4, dtype=complex), np.ones(2, dtype=complex))

        assert result["length"] == 2
        assert result["match"]
        assert "[WARN] Length mismatch" in capsys.readouterr().out

    def test_cli_exit_status(self, tmp_path):
        ref = tmp_path / "ref.txt"
        good = tmp_path / "good.txt"
        bad = tmp_path / "bad.txt"
        write_sample_file(str(ref), np.array([1, 2], dtype=complex))
        write_sample_file(str(good), np.array([1, 2], dtype=complex))
        write_sample_file(str(bad), np.array([1, 3], dtype=complex))

        assert fft_check.main(["--ref", str(ref), "--dut", str(good)]) == 0
        assert fft_check.main(["--ref", str(ref), "--dut", str(bad)]) == 1


class TestFFTCommandLines:
    """fft_compute / fft_real_compute end to end through files."""

    def test_constant_signal(self, tmp_path):
        time_file = tmp_path / "const.txt"
        out_file = tmp_path / "const_fft.txt"
        sample_init.main(["--pattern", "constant", "--N", "8", "--out", str(time_file)])

        fft_compute.main(["--in_file", str(time_file), "--out_file", str(out_file)])

        X = load_sample_file(str(out_file))
        expected = np.zeros(8)
        expected[0] = 8
        np.testing.assert_allclose(X, expected, atol=1e-5)

    def test_matches_numpy_reference(self, tmp_path):
        time_file = tmp_path / "noise.txt"
        out_file = tmp_path / "noise_fft.txt"
        ref_file = tmp_path / "noise_np.txt"
        sample_init.main(["--pattern", "noise", "--N", "256", "--out", str(time_file)])

        fft_compute.main(["--in_file", str(time_file), "--out_file", str(out_file),
                          "--precision", "double"])
        fft_real_compute.main(["--in_file", str(time_file), "--out_file", str(ref_file)])

        assert fft_check.main(["--ref", str(ref_file), "--dut", str(out_file)]) == 0

    def test_warns_on_n_mismatch(self, tmp_path, capsys):
        time_file = tmp_path / "imp.txt"
        out_file = tmp_path / "imp_fft.txt"
        sample_init.main(["--pattern", "impulse", "--N", "4", "--out", str(time_file)])

        fft_compute.main(["--in_file", str(time_file), "--out_file", str(out_file), "--n", "8"])

        assert "[WARN] Provided N=8" in capsys.readouterr().out
        assert len(load_sample_file(str(out_file))) == 4

    def test_rejects_non_power_of_two_file(self, tmp_path):
        time_file = tmp_path / "six.txt"
        write_sample_file(str(time_file), np.ones(6, dtype=complex))

        with pytest.raises(fft_compute.FFTPreconditionError):
            fft_compute.main(["--in_file", str(time_file), "--out_file", str(tmp_path / "o.txt")])


class TestVisualize:
    """Plots are written as PNG files."""

    def test_plot_spectrum(self, tmp_path):
        X = np.fft.fft(sample_init.gen_sine(32, 3, 1.0))
        out = tmp_path / "spec.png"

        fft_visualize.plot_spectrum(X, str(out), fs=1000.0, half=True)

        assert out.exists() and out.stat().st_size > 0

    def test_plot_comparison(self, tmp_path):
        x = sample_init.gen_noise(64)
        out = tmp_path / "cmp.png"

        fft_visualize.plot_comparison(np.fft.fft(x), fft_compute.compute_fft(x), str(out))

        assert out.exists()

    def test_cli_time_file(self, tmp_path):
        time_file = tmp_path / "sine.txt"
        sample_init.main(["--pattern", "sine", "--N", "64", "--out", str(time_file)])

        fft_visualize.main(["--time_file", str(time_file), "--half"])

        assert (tmp_path / "sine_fft_mag_compare_side_by_side.png").exists()

    def test_cli_spec_file(self, tmp_path):
        spec_file = tmp_path / "spec.txt"
        write_sample_file(str(spec_file), np.fft.fft(sample_init.gen_impulse(16)))

        fft_visualize.main(["--spec_file", str(spec_file)])

        assert (tmp_path / "spec_fft_visualization.png").exists()
