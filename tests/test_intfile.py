import pytest

from streamsort.intfile import count_ints, load_ints, load_window, store_ints

VALUES = [5, -3, 0, 2147483647, -2147483648, 42, 7, 7]


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.bin"
    store_ints(path, VALUES)
    return path


def test_round_trip(data_file):
    assert load_ints(data_file) == VALUES


def test_store_returns_count(tmp_path):
    assert store_ints(tmp_path / "a.bin", iter(VALUES)) == len(VALUES)


def test_count(data_file):
    assert count_ints(data_file) == len(VALUES)


def test_little_endian_layout(tmp_path):
    path = tmp_path / "one.bin"
    store_ints(path, [1])
    assert path.read_bytes() == b"\x01\x00\x00\x00"


@pytest.mark.parametrize("offset,count", [(0, 3), (2, 4), (6, 2), (6, 10), (8, 1)])
def test_window(data_file, offset, count):
    assert load_window(data_file, offset, count) == VALUES[offset:offset + count]


def test_negative_window(data_file):
    with pytest.raises(ValueError):
        load_window(data_file, -1, 2)


def test_value_out_of_range(tmp_path):
    with pytest.raises(ValueError):
        store_ints(tmp_path / "b.bin", [2**31])


def test_bad_size(tmp_path):
    path = tmp_path / "odd.bin"
    path.write_bytes(b"\x00" * 5)
    with pytest.raises(ValueError):
        count_ints(path)
    with pytest.raises(ValueError):
        load_ints(path)