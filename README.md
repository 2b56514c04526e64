# ordenamientos

This tool times classic sorting algorithms on datasets of raw binary integers. Each run sorts one dataset with one algorithm and prints one CSV line. You can append that line to a results file.

## Installation

```
pip install .
```

## Datasets

The tool looks for a `dataset` directory in two places, in this order. Both paths are relative to the current working directory:

1. `../../dataset`
2. `arch/dataset`

Each dataset is a `.bin` file of native C `int` values, which are 4-byte signed integers on common platforms. If a file ends with an incomplete value, that value is dropped. The `.bin` files in the directory are sorted by file name and numbered from 1. With the standard set of sixteen files the numbering is:

| Index | File |
|------:|------|
| 1–4   | `ordenado_ascendente_{100,10,1,50}mb.bin` |
| 5–8   | `ordenado_descendente_{100,10,1,50}mb.bin` |
| 9–12  | `parcialmente_ordenado_{100,10,1,50}mb.bin` |
| 13–16 | `totalmente_desordenado_{100,10,1,50}mb.bin` |

The name printed in the CSV line comes from this fixed table of sixteen names. It is not the name of the file that was actually read. For an index outside 1–16 the name is empty.

## Usage

```
ordenamientos <dataset_index> <algorithm_index>
```

Algorithms:

1. Insertion Sort
2. Merge Sort
3. Quick Sort (random pivot, Lomuto partitioning)
4. Heap Sort
5. STD Sort (Python's built-in `sorted`)
6. Count Sort

Example:

```
ordenamientos 3 2
```

The output has the form `count;dataset;algorithm;seconds`. The time is the sort alone and does not include loading the file:

```
<count>;ordenado_ascendente_1mb.bin;Merge Sort;<seconds>
```

The command exits with status 1 in any of these cases:

- it gets fewer than two arguments;
- an argument is not an integer;
- the dataset directory or a `.bin` file cannot be found;
- the dataset index is out of range;
- the algorithm index is not known.

## Library use

Every sorting function in `ordenamientos.sorts` takes an iterable of integers. It returns a new sorted list and leaves the input unchanged:

```python
import random
from ordenamientos.sorts import (
    count_sort, heap_sort, insertion_sort, merge_sort, quick_sort, std_sort,
)

data = [5, 3, 9, 1]
merge_sort(data)                    # [1, 3, 5, 9]
quick_sort(data, random.Random(0))  # the generator chooses pivots; optional
count_sort(data)
```

The module `ordenamientos.dataset` provides:

- `find_dataset_dir(candidates)`
- `list_datasets(directory)`
- `read_values(path)`
- `load_dataset(index, candidates)`

Each of them raises `DatasetError` on failure.

The module `ordenamientos.cli` provides:

- the `Algorithm` enum, numbered as on the command line;
- `dataset_name(index)`;
- `run_benchmark(values, dataset, algorithm)`. It returns a `BenchmarkResult`, and `csv_line()` on that result gives the printed line. It raises `ValueError` for an unknown algorithm number.

## Tests

```
pip install .[test]
pytest
```