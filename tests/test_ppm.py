import pytest

from streamsort.ppm import PPMError, read_ppm, write_ppm


def test_round_trip(tmp_path):
    path = tmp_path / "img.ppm"
    data = bytes(range(2 * 3 * 3))
    write_ppm(path, 3, 2, data)
    image = read_ppm(path)
    assert (image.width, image.height) == (3, 2)
    assert image.pixels == data


def test_written_file_is_plain_ppm(tmp_path):
    path = tmp_path / "img.ppm"
    write_ppm(path, 1, 1, bytes([10, 20, 30]))
    content = path.read_bytes()
    assert content.startswith(b"P3\n")
    assert b"10 20 30" in content


def test_raw_ppm_rows_are_flipped(tmp_path):
    top = bytes([1, 2, 3, 4, 5, 6])
    bottom = bytes([7, 8, 9, 10, 11, 12])
    path = tmp_path / "raw.ppm"
    path.write_bytes(b"P6\n2 2 255\n" + top + bottom)
    image = read_ppm(path)
    assert image.pixels == bottom + top


def test_plain_ppm_is_scaled_to_255(tmp_path):
    path = tmp_path / "plain.ppm"
    path.write_text("P3\n1 1 1\n1 0 1\n")
    image = read_ppm(path)
    assert image.pixels == bytes([255, 0, 255])
    assert image.max_value == 1


def test_comments_after_magic(tmp_path):
    path = tmp_path / "c.ppm"
    path.write_text("P3\n# hello\n1 1 255\n1 2 3\n")
    image = read_ppm(path)
    assert image.comments == ("hello",)
    assert image.pixels == bytes([1, 2, 3])


def test_not_a_ppm(tmp_path):
    path = tmp_path / "x.ppm"
    path.write_bytes(b"P5\n1 1 255\n\x00")
    with pytest.raises(PPMError):
        read_ppm(path)


def test_truncated_raw_data(tmp_path):
    path = tmp_path / "t.ppm"
    path.write_bytes(b"P6\n2 2 255\n" + bytes(5))
    with pytest.raises(PPMError):
        read_ppm(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ppm(tmp_path / "absent.ppm")


def test_write_with_short_data(tmp_path):
    with pytest.raises(ValueError):
        write_ppm(tmp_path / "s.ppm", 2, 2, bytes(3))