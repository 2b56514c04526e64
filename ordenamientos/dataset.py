"""Locating and reading the binary integer datasets."""

from __future__ import annotations

from array import array
from collections.abc import Iterable
from pathlib import Path

DEFAULT_CANDIDATES: tuple[Path, ...] = (Path("../../dataset"), Path("arch") / "dataset")


class DatasetError(Exception):
    """Raised when a dataset directory or file cannot be found or read."""


def find_dataset_dir(candidates: Iterable[Path | str] = DEFAULT_CANDIDATES) -> Path:
    """Return the first candidate that is an existing directory."""
    tried = [Path(candidate) for candidate in candidates]
    for directory in tried:
        if directory.is_dir():
            return directory
    names = " or ".join(f"'{path}'" for path in tried)
    raise DatasetError(
        f"could not locate the 'dataset' directory in {names} (cwd = {Path.cwd()})"
    )


def list_datasets(directory: Path | str) -> list[Path]:
    """Return the ``.bin`` files in ``directory``, sorted by file name."""
    directory = Path(directory)
    files = sorted(
        (entry for entry in directory.iterdir() if entry.is_file() and entry.suffix == ".bin"),
        key=lambda entry: entry.name,
    )
    if not files:
        raise DatasetError(f"no .bin files in {directory}")
    return files


def read_values(path: Path | str) -> list[int]:
    """Read native ``int`` values from a binary file; a trailing partial value is dropped."""
    numbers = array("i")
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise DatasetError(f"could not open {path}") from exc
    usable = len(data) - len(data) % numbers.itemsize
    numbers.frombytes(data[:usable])
    return numbers.tolist()


def load_dataset(index: int, candidates: Iterable[Path | str] = DEFAULT_CANDIDATES) -> list[int]:
    """Read the ``index``-th dataset (counting from 1) in name order."""
    files = list_datasets(find_dataset_dir(candidates))
    if not 1 <= index <= len(files):
        raise DatasetError(f"dataset index {index} out of range 1..{len(files)}")
    return read_values(files[index - 1])