import numpy as np
import pytest

from parlab.bench_cli import mismatches, saxpy_main, sqrt_main, to_bandwidth, to_gflops


def test_bandwidth_of_one_gib_per_second():
    assert to_bandwidth(1024 ** 3, 1.0) == pytest.approx(1.0)


def test_bandwidth_halves_when_time_doubles():
    assert to_bandwidth(4096, 2.0) == pytest.approx(to_bandwidth(4096, 1.0) / 2)


def test_gflops():
    assert to_gflops(2_000_000_000, 2.0) == pytest.approx(1.0)


def test_mismatches_exact():
    assert mismatches([1.0, 2.0, 3.0], [1.0, 2.5, 3.0]) == [(1, 2.0, 2.5)]


def test_mismatches_within_tolerance():
    assert mismatches([1.0, 2.00001], [1.0, 2.0], 1e-4) == []


def test_mismatches_identical_arrays():
    data = np.linspace(0, 1, 20, dtype=np.float32)
    assert mismatches(data, data.copy()) == []


def test_mismatches_length_error():
    with pytest.raises(ValueError):
        mismatches([1.0], [1.0, 2.0])


def test_sqrt_main_small(capsys):
    assert sqrt_main(["--size", "500"]) == 0
    out = capsys.readouterr().out
    assert "[sqrt serial]:" in out
    assert "Error" not in out


def test_saxpy_main_small(capsys):
    assert saxpy_main(["--size", "1000"]) == 0
    out = capsys.readouterr().out
    assert "[saxpy serial]:" in out
    assert "GFLOPS" in out
    assert "Error" not in out


def test_sqrt_main_rejects_nonpositive_size():
    with pytest.raises(SystemExit):
        sqrt_main(["--size", "0"])