# streamsort

Tools for sorting files of 32-bit integers in three ways:

* a plain sequential quicksort,
* a pivot-based sample sort that spreads the work over several threads,
* a streaming merge tree, in which leaf tasks sort their share of the
  input once and every task merges two bounded FIFOs into its parent's
  FIFO until its inputs are used up.

It also has a generator for input files, a checker that compares a sorted
result with its input, a stopwatch, and a small reader and writer for PPM
images.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### Generating input

Give the output path, how many numbers to write, and one pattern:
`--uniform-random`, `--increasing`, `--decreasing` or `--constant <value>`.

```
streamsort-generate --output data.bin --size 1048576 --uniform-random
streamsort-generate --output const.bin --size 1000 --constant 7
```

Files hold little-endian 32-bit signed integers with no header. Random values
lie between 0 and 2^31 - 1. Unknown arguments are ignored. If the output path,
the size or the pattern is missing (or the size is negative), every problem is
printed and the command exits with status 1. A second pattern option is
ignored with a logged warning.

### Sorting in memory

```
streamsort-parallel-sort data.bin
streamsort-parallel-sort data.bin --threads 4
```

`--threads 0` (the default) sorts with the sequential quicksort; any other
number uses the sample sort with that many threads. The time spent sorting is
printed in seconds, then the result is checked against the file.

### Sorting through the merge tree

```
streamsort-merge data.bin
streamsort-merge data.bin --tasks 15 --link-capacity 128 --threads 2
```

`--tasks` is the number of merge tasks and must be one less than a power of
two (default 7). `--link-capacity` is the capacity of the FIFOs between tasks
(default 64). `--threads` is passed to the initial sort of each leaf's input
windows (default 0, sequential). The time spent is printed, then the result is
checked against the file.

Each leaf loads two windows of `len(input) // leaves // 2` integers; values
after the last full window are not loaded. If the input does not divide
evenly, the result is shorter than the input and the check fails.

For both sort commands a failed check, an unreadable file or an invalid
option value is reported on standard error and the command exits with
status 1.

## Library

### Integer files — `streamsort.intfile`

```python
from streamsort.intfile import store_ints, load_ints, load_window, count_ints

store_ints("data.bin", [5, 3, 9, 1])   # returns 4
count_ints("data.bin")                 # 4, from the file size alone
load_ints("data.bin")                  # [5, 3, 9, 1]
load_window("data.bin", 1, 2)          # [3, 9]
```

`store_ints` raises `ValueError` for a value that does not fit in 32 bits;
`count_ints` and `load_ints` raise `ValueError` when the file size is not a
multiple of four. `load_window` returns fewer values when the file ends early.

### Sorting — `streamsort.sorting`

```python
from streamsort.sorting import simple_quicksort, sample_sort, sort

simple_quicksort([4, 2, 2, 8])       # [2, 2, 4, 8]
sample_sort([9, 1, 7, 3, 5, 2], 3)   # [1, 2, 3, 5, 7, 9]
sort([9, 1, 7, 3], 0)                # zero threads: sequential quicksort
```

All three return a new list. `sample_sort` takes its pivots at evenly spaced
positions of the input, lets each thread split its share into buckets around
the pivots, then sorts each gathered bucket on its own thread.

### FIFOs — `streamsort.fifo`

`IntFifo(capacity)` is a bounded queue with `push`, `pop`, `peek(skip)`,
`is_full`, `is_empty`, `len()` and iteration from head to tail.
`IntFifo.from_values(values)` makes a full FIFO. Pushing to a full FIFO or
popping or peeking past the end raises `IndexError`.

### The merge tree — `streamsort.merge`

```python
from streamsort.merge import merge_sort, build_merge_tree, run_pipeline

merge_sort([8, 3, 5, 1, 7, 2, 6, 4], 3, 4, 1)   # [1, 2, 3, 4, 5, 6, 7, 8]

tasks = build_merge_tree([8, 3, 5, 1, 7, 2, 6, 4], 3, 4)
run_pipeline(tasks, 0)
list(tasks[0].succ[0].buffer)                     # the merged output
```

`build_merge_tree` returns `MergeTask` objects, root first, joined by `Link`s
whose `buffer` is an `IntFifo`. A link with no producer holds input data; the
root's output link has no consumer. `MergeTask.start` sorts a task's input
links, `MergeTask.run` merges what is available and returns `True` once
`MergeTask.is_depleted` holds. `run_pipeline` starts every task and runs them
leaves first, round after round, until all are finished; it raises
`RuntimeError` if a round makes no progress. An invalid task count or a link
capacity below 1 raises `ValueError`.

### Checking a result — `streamsort.verify`

```python
from streamsort.verify import check_sorted, check_sorted_file, SortCheckError

check_sorted([3, 1, 2], [1, 2, 3])       # returns 3
check_sorted_file("data.bin", result)    # compares with the file's contents
```

On a length difference or on differing values `SortCheckError` is raised;
it carries `expected_length`, `actual_length` and `mismatches`, a list of
`(index, got, expected)` tuples. Success is logged at INFO level.

### Generating values — `streamsort.generate`

```python
import random
from streamsort.generate import parse_arguments, generate_values, Pattern

options = parse_arguments(["--size", "10", "--increasing", "--output", "out.bin"])
options.pattern is Pattern.INCREASING     # True
generate_values(options, random.Random(0))   # [0, 1, ..., 9]
```

`parse_arguments` raises `UsageError`, whose `messages` lists every problem.

### Timing — `streamsort.timer`

```python
from streamsort.timer import Stopwatch

watch = Stopwatch()
watch.reset()
...
print(watch.seconds(), watch.milliseconds(), watch.microseconds())
```

Without `reset` or `set_start(seconds, microseconds)`, the first reading sets
the start point and reads zero.

### PPM images — `streamsort.ppm`

```python
from streamsort.ppm import read_ppm, write_ppm, PPMError

image = read_ppm("picture.ppm")
write_ppm("copy.ppm", image.width, image.height, image.pixels)
```

`read_ppm` reads plain (`P3`) and raw (`P6`) files into a `PPMImage` with
`width`, `height`, `pixels` (RGB bytes, rows bottom-up), `max_value` and
`comments`. Plain samples are scaled to 0–255. Comment lines are accepted
only directly after the magic number. `write_ppm` always writes the plain
form with a maximum of 255. A file that is not a PPM image, or is cut short,
raises `PPMError`.

## What it does not do

The package only reads and writes PPM files: it does not display images,
filter them or upload them anywhere. The merge tree runs its tasks one after
another in a single thread; only the initial sorts may use threads.