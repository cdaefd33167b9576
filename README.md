# hashbench

This package has three integer-keyed dictionaries built from scratch. It
also has a benchmark that times how long each one takes to insert and
remove a key.

- `HashTableOpenAddressing` (`hashbench.open_addressing`) uses double
  hashing over a table whose size is always prime. The requested size is
  rounded up with `next_prime`.
  - It grows to the next prime at or above `2 * capacity + 1` when one more
    entry would push the load past 0.8.
  - It rebuilds itself at the same size once more than a quarter of its
    slots hold deleted entries.
  - If a probe sequence finds no room, it raises `HashTableFullError`, which
    is a subclass of `OverflowError`.
  - `len(table)` gives the number of entries, `count_occupied()` counts the
    occupied slots, and `capacity` gives the current slot count.
  - The helpers `is_prime(n)` and `next_prime(n)` are also public.
- `HashTableCuckoo` (`hashbench.cuckoo`) uses two tables with two hash
  functions, and entries evict one another.
  - After 32 displacements without finding a free slot, both tables grow to
    `2 * capacity + 1` and the insert goes on.
  - After more than a quarter of the capacity has been removed, the tables
    are rebuilt at the same size.
  - `capacity` is the slot count of each table.
- `HashTableAVL` (`hashbench.hash_table_avl`) has a fixed number of buckets,
  101 by default. Each bucket is an `AVLTree`. `bucket_index(key)` tells you
  which bucket a key hashes to.

All three implement the abstract `Dictionary` interface
(`hashbench.dictionary`). It defines `insert`, `remove` and `find`, and on
top of those it provides `in`, `d[key]`, `d[key] = value` and `del d[key]`.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Using the tables

```python
from hashbench.open_addressing import HashTableOpenAddressing
from hashbench.cuckoo import HashTableCuckoo
from hashbench.hash_table_avl import HashTableAVL

table = HashTableCuckoo(17)
table.insert(1, 100)
table[2] = 200
assert table.find(1) == 100
assert 2 in table
table.remove(2)
assert table.find(2) is None
```

These are the rules for missing keys:

- `find` returns the stored value, or `None` when the key is absent. A key
  stored with the value `None` therefore looks absent.
- `remove` does nothing if the key is missing.
- `d[key]` and `del d[key]` raise `KeyError` if the key is missing.
- Inserting a key that is already present replaces its value.

`HashTableCuckoo` and `HashTableAVL` reject a size below 1 with
`ValueError`. `HashTableOpenAddressing` rejects a negative size.

An `AVLTree` (`hashbench.avl_tree`) can also be used on its own:

```python
from hashbench.avl_tree import AVLTree

tree = AVLTree()
for k in (5, 3, 8):
    tree.insert(k, k * 10)
print(list(tree.items()))   # [(3, 30), (5, 50), (8, 80)]
print(tree.height())        # 2
print(len(tree), list(tree))  # 3 [3, 5, 8]
```

## Running the benchmark

```
hashbench
```

For each size, the benchmark does the following for every structure:

1. It fills a fresh table to 80% of its nominal size with shuffled, unique
   keys.
2. It inserts and removes a fresh key once.
3. It times one more insert and one more remove of that key in nanoseconds.
4. It averages those times over the trials.

It prints `Test size: N` as it starts each size. When it is done, it writes
the averages as CSV with this header:

```
size,structure,avg_insert_time_ns,avg_remove_time_ns
```

Options:

- `-o`, `--output FILE`: the CSV file to write. The default is `results.csv`.
- `--sizes N [N ...]`: the table sizes. The default is 10000, 45000, 80000,
  115000, 150000, 185000, 220000 and 255000.
- `--trials N`: the number of trials per size. The default is 100, and the
  value must be at least 1.
- `--fill-ratio R`: the fraction of each size to fill first. The default is
  0.8.
- `--check`: runs a fixed insert/find/remove scenario on each structure at
  size 17 instead of the benchmark. It prints `OK` or `FAIL` for each check,
  and exits with status 1 if any check failed.

For example:

```
hashbench --sizes 1000 5000 --trials 10 -o small.csv
hashbench --check
```

If an open-addressing table raises `HashTableFullError` during a trial,
the error is logged to standard error and that trial is skipped. It is
still counted in the average.

The pieces behind the command live in `hashbench.benchmark`:

- `run_benchmark(sizes, trials, fill_ratio)` returns a list of
  `BenchmarkResult` records. Each record has `size`, `structure`,
  `avg_insert_ns`, `avg_remove_ns` and `as_row()`.
- `measure_structure(factory, size, trial, fill_ratio)` returns the
  `(insert_ns, remove_ns)` timings of one trial.
- `write_csv(results, stream)` writes results to an open text stream.
- `check_dictionary(dictionary)` runs the correctness scenario on any
  `Dictionary`. It returns a mapping from each check's name to whether it
  passed.
- `main(argv=None)` is the command itself, and it returns the exit status.

## What it does not do

The benchmark records only average times. It makes no plots and does no
other analysis of the CSV.

None of the tables keeps anything on disk, and none is safe to share
between threads.

There is one limitation in how `HashTableCuckoo` rebuilds its tables. It
places each entry in its first-table slot, or else in its second-table
slot. If that second slot is already taken, the entry already there is
overwritten.