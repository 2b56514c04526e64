"""Command that sorts one dataset with one algorithm and prints a CSV line."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from ordenamientos.dataset import DatasetError, load_dataset
from ordenamientos.sorts import (
    count_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    std_sort,
)

DATASET_NAMES: tuple[str, ...] = (
    "ordenado_ascendente_100mb.bin",
    "ordenado_ascendente_10mb.bin",
    "ordenado_ascendente_1mb.bin",
    "ordenado_ascendente_50mb.bin",
    "ordenado_descendente_100mb.bin",
    "ordenado_descendente_10mb.bin",
    "ordenado_descendente_1mb.bin",
    "ordenado_descendente_50mb.bin",
    "parcialmente_ordenado_100mb.bin",
    "parcialmente_ordenado_10mb.bin",
    "parcialmente_ordenado_1mb.bin",
    "parcialmente_ordenado_50mb.bin",
    "totalmente_desordenado_100mb.bin",
    "totalmente_desordenado_10mb.bin",
    "totalmente_desordenado_1mb.bin",
    "totalmente_desordenado_50mb.bin",
)


class Algorithm(Enum):
    """Sorting algorithms, numbered as on the command line."""

    INSERTION = (1, "Insertion Sort")
    MERGE = (2, "Merge Sort")
    QUICK = (3, "Quick Sort")
    HEAP = (4, "Heap Sort")
    STD = (5, "STD Sort")
    COUNT = (6, "Count Sort")

    def __new__(cls, number: int, label: str) -> "Algorithm":
        member = object.__new__(cls)
        member._value_ = number
        member.label = label
        return member

    def sort(self, values: Sequence[int]) -> list[int]:
        """Return ``values`` sorted with this algorithm."""
        return _SORTERS[self](values)


_SORTERS: dict[Algorithm, Callable[[Sequence[int]], list[int]]] = {
    Algorithm.INSERTION: insertion_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.QUICK: quick_sort,
    Algorithm.HEAP: heap_sort,
    Algorithm.STD: std_sort,
    Algorithm.COUNT: count_sort,
}


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of sorting one dataset."""

    size: int
    dataset: str
    algorithm: str
    seconds: float

    def csv_line(self) -> str:
        """Render as ``size;dataset;algorithm;seconds``."""
        return f"{self.size};{self.dataset};{self.algorithm};{self.seconds:g}"


def dataset_name(index: int) -> str:
    """File name of the dataset with this 1-based index, or "" if unknown."""
    if 1 <= index <= len(DATASET_NAMES):
        return DATASET_NAMES[index - 1]
    return ""


def run_benchmark(values: Sequence[int], dataset: int, algorithm: Algorithm | int) -> BenchmarkResult:
    """Time sorting ``values`` with ``algorithm``; raise ValueError for an unknown algorithm."""
    chosen = Algorithm(algorithm)
    start = time.perf_counter_ns()
    ordered = chosen.sort(values)
    elapsed = (time.perf_counter_ns() - start) * 1e-9
    return BenchmarkResult(len(ordered), dataset_name(dataset), chosen.label, elapsed)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark for ``<dataset_index> <algorithm_index>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("usage: ordenamientos <dataset_index> <algorithm_index>", file=sys.stderr)
        return 1
    try:
        dataset = int(args[0])
        algorithm = int(args[1])
    except ValueError:
        print("error: both arguments must be integers", file=sys.stderr)
        return 1
    try:
        values = load_dataset(dataset)
    except DatasetError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    try:
        result = run_benchmark(values, dataset, algorithm)
    except ValueError:
        return 1
    print(result.csv_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())