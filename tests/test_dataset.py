from array import array

import pytest

from ordenamientos.dataset import (
    DatasetError,
    find_dataset_dir,
    list_datasets,
    load_dataset,
    read_values,
)


def _write_ints(path, values):
    path.write_bytes(array("i", values).tobytes())


def test_find_dataset_dir_first_existing(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    second.mkdir()
    assert find_dataset_dir([first, second]) == second


def test_find_dataset_dir_prefers_earlier(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    assert find_dataset_dir([first, second]) == first


def test_find_dataset_dir_ignores_files(tmp_path):
    not_dir = tmp_path / "dataset"
    not_dir.write_text("x")
    with pytest.raises(DatasetError):
        find_dataset_dir([not_dir])


def test_find_dataset_dir_missing(tmp_path):
    with pytest.raises(DatasetError, match="dataset"):
        find_dataset_dir([tmp_path / "nope"])


def test_list_datasets_sorted_bin_only(tmp_path):
    (tmp_path / "b.bin").write_bytes(b"")
    (tmp_path / "a.bin").write_bytes(b"")
    (tmp_path / "c.txt").write_bytes(b"")
    (tmp_path / "d.bin").mkdir()
    assert [p.name for p in list_datasets(tmp_path)] == ["a.bin", "b.bin"]


def test_list_datasets_empty(tmp_path):
    (tmp_path / "notes.txt").write_text("x")
    with pytest.raises(DatasetError):
        list_datasets(tmp_path)


def test_read_values_round_trip(tmp_path):
    values = [0, -1, 2**31 - 1, -(2**31), 42]
    path = tmp_path / "v.bin"
    _write_ints(path, values)
    assert read_values(path) == values


def test_read_values_drops_partial_tail(tmp_path):
    path = tmp_path / "v.bin"
    path.write_bytes(array("i", [10, 20]).tobytes() + b"\x01\x02")
    assert read_values(path) == [10, 20]


def test_read_values_missing_file(tmp_path):
    with pytest.raises(DatasetError):
        read_values(tmp_path / "missing.bin")


def test_load_dataset_by_index(tmp_path):
    _write_ints(tmp_path / "z.bin", [9, 8])
    _write_ints(tmp_path / "a.bin", [1, 2, 3])
    assert load_dataset(1, [tmp_path]) == [1, 2, 3]
    assert load_dataset(2, [tmp_path]) == [9, 8]


@pytest.mark.parametrize("index", [0, 3, -1])
def test_load_dataset_index_out_of_range(tmp_path, index):
    _write_ints(tmp_path / "a.bin", [1])
    _write_ints(tmp_path / "b.bin", [2])
    with pytest.raises(DatasetError):
        load_dataset(index, [tmp_path])