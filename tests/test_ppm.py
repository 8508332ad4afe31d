import numpy as np
import pytest

from parlab.ppm import ppm_bytes, write_ppm_image


def _split(blob):
    parts = blob.split(b"\n", 3)
    return b"\n".join(parts[:3]) + b"\n", parts[3]


def test_header_matches_format():
    blob = ppm_bytes([0, 256], 2, 1, 256)
    header, _ = _split(blob)
    assert header == b"P6\n2 1\n255\n"


def test_extreme_counts_map_to_black_and_white():
    _, body = _split(ppm_bytes([0, 256], 2, 1, 256))
    assert list(body) == [0, 0, 0, 255, 255, 255]


def test_body_has_three_equal_channels_per_pixel():
    data = np.arange(12, dtype=np.int32) * 20
    _, body = _split(ppm_bytes(data, 4, 3, 256))
    assert len(body) == 3 * 12
    triples = [body[i:i + 3] for i in range(0, len(body), 3)]
    assert all(t[0] == t[1] == t[2] for t in triples)


def test_grey_level_is_monotonic_in_count():
    data = np.arange(0, 257, dtype=np.int32)
    _, body = _split(ppm_bytes(data, data.size, 1, 256))
    levels = list(body[::3])
    assert levels == sorted(levels)


def test_counts_are_clamped_to_max_iterations():
    clamped = ppm_bytes([100], 1, 1, 100)
    higher = ppm_bytes([250], 1, 1, 100)
    assert clamped == higher


def test_accepts_two_dimensional_input():
    grid = np.array([[1, 2], [3, 4]], dtype=np.int32)
    assert ppm_bytes(grid, 2, 2, 256) == ppm_bytes([1, 2, 3, 4], 2, 2, 256)


def test_too_few_counts_raises():
    with pytest.raises(ValueError):
        ppm_bytes([1, 2, 3], 2, 2, 256)


def test_write_ppm_image_writes_encoded_bytes(tmp_path, capsys):
    target = tmp_path / "image.ppm"
    data = [0, 16, 64, 256]
    write_ppm_image(data, 2, 2, target, 256)
    assert target.read_bytes() == ppm_bytes(data, 2, 2, 256)
    assert f"Wrote image file {target}" in capsys.readouterr().out