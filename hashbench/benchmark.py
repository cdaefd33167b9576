"""Timing benchmark and sanity checks for the dictionary implementations."""

from __future__ import annotations

import argparse
import csv
import logging
import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TextIO, Tuple

from .cuckoo import HashTableCuckoo
from .dictionary import Dictionary
from .hash_table_avl import HashTableAVL
from .open_addressing import HashTableFullError, HashTableOpenAddressing

log = logging.getLogger(__name__)

DEFAULT_SIZES: Tuple[int, ...] = (10000, 45000, 80000, 115000, 150000, 185000, 220000, 255000)
DEFAULT_TRIALS = 100
DEFAULT_FILL_RATIO = 0.8
CSV_HEADER = ("size", "structure", "avg_insert_time_ns", "avg_remove_time_ns")
CHECK_TABLE_SIZE = 17

_VALUE_RANGE = (1, 10_000_000)

Factory = Callable[[int], Dictionary]

STRUCTURES: Tuple[Tuple[str, Factory], ...] = (
    ("OpenAddressing", HashTableOpenAddressing),
    ("Cuckoo", HashTableCuckoo),
    ("AVL", HashTableAVL),
)


@dataclass(frozen=True)
class BenchmarkResult:
    """Average cost of one insert and one remove for a structure at a size."""

    size: int
    structure: str
    avg_insert_ns: int
    avg_remove_ns: int

    def as_row(self) -> Tuple[int, str, int, int]:
        return (self.size, self.structure, self.avg_insert_ns, self.avg_remove_ns)


def check_dictionary(dictionary: Dictionary) -> Dict[str, bool]:
    """Run a fixed insert/find/remove scenario; map each check to its outcome."""
    for key, value in (
        (1, 100), (2, 200), (3, 300), (3, 200), (7, 200),
        (15, 600), (64, 700), (13, 100), (5, 400), (66, 400),
    ):
        dictionary.insert(key, value)

    results: Dict[str, bool] = {
        "find(1)": dictionary.find(1) == 100,
        "find(2)": dictionary.find(2) == 200,
        "find(3)": dictionary.find(3) == 200,
        "find(66)": dictionary.find(66) == 400,
        "find(4)": dictionary.find(4) is None,
    }
    for key in (2, 1, 3):
        dictionary.remove(key)
        results[f"remove({key}), find({key})"] = dictionary.find(key) is None
    return results


def _workload(size: int, trial: int, fill_ratio: float) -> Tuple[List[int], List[int], int, int]:
    rng = random.Random(size + trial)
    fill_count = int(size * fill_ratio)
    keys = list(range(trial * size, trial * size + fill_count))
    rng.shuffle(keys)
    values = [0] * fill_count
    if values:
        values[0] = rng.randint(*_VALUE_RANGE)
    probe_key = size * 100 + trial
    probe_value = rng.randint(*_VALUE_RANGE)
    return keys, values, probe_key, probe_value


def measure_structure(
    factory: Factory, size: int, trial: int, fill_ratio: float = DEFAULT_FILL_RATIO
) -> Tuple[int, int]:
    """Fill a fresh table, then time one insert and one remove in nanoseconds."""
    keys, values, probe_key, probe_value = _workload(size, trial, fill_ratio)
    table = factory(size)
    for key, value in zip(keys, values):
        table.insert(key, value)
    table.insert(probe_key, probe_value)
    table.remove(probe_key)

    start = time.perf_counter_ns()
    table.insert(probe_key, probe_value)
    mid = time.perf_counter_ns()
    table.remove(probe_key)
    end = time.perf_counter_ns()
    return mid - start, end - mid


def run_benchmark(
    sizes: Iterable[int] = DEFAULT_SIZES,
    trials: int = DEFAULT_TRIALS,
    fill_ratio: float = DEFAULT_FILL_RATIO,
) -> List[BenchmarkResult]:
    """Benchmark every structure at every size, averaging over ``trials`` runs."""
    if trials < 1:
        raise ValueError("trials must be at least 1")
    if fill_ratio < 0:
        raise ValueError("fill_ratio must not be negative")

    results: List[BenchmarkResult] = []
    for size in sizes:
        totals = {name: [0, 0] for name, _ in STRUCTURES}
        for trial in range(trials):
            for name, factory in STRUCTURES:
                try:
                    insert_ns, remove_ns = measure_structure(factory, size, trial, fill_ratio)
                except HashTableFullError as exc:
                    log.error("[%s] Exception: %s", name, exc)
                    continue
                totals[name][0] += insert_ns
                totals[name][1] += remove_ns
        results.extend(
            BenchmarkResult(size, name, total_insert // trials, total_remove // trials)
            for name, (total_insert, total_remove) in totals.items()
        )
    return results


def write_csv(results: Iterable[BenchmarkResult], stream: TextIO) -> None:
    """Write results as CSV with a header line."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(result.as_row() for result in results)


def _run_checks(out: TextIO) -> bool:
    all_ok = True
    for label, factory in (
        ("OpenAddressing", HashTableOpenAddressing),
        ("Cuckoo", HashTableCuckoo),
        ("AVLBucket", HashTableAVL),
    ):
        print(f"Test: {label}", file=out)
        for check, ok in check_dictionary(factory(CHECK_TABLE_SIZE)).items():
            print(f"{check}: {'OK' if ok else 'FAIL'}", file=out)
            all_ok = all_ok and ok
        print(file=out)
    return all_ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark (or the sanity checks) from the command line."""
    parser = argparse.ArgumentParser(
        prog="hashbench", description="Benchmark hash table implementations."
    )
    parser.add_argument("-o", "--output", default="results.csv", help="CSV file to write")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    parser.add_argument("--fill-ratio", type=float, default=DEFAULT_FILL_RATIO)
    parser.add_argument(
        "--check", action="store_true", help="run the correctness checks instead"
    )
    args = parser.parse_args(argv)

    if args.check:
        return 0 if _run_checks(sys.stdout) else 1

    if args.trials < 1:
        parser.error("--trials must be at least 1")

    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    results: List[BenchmarkResult] = []
    for size in args.sizes:
        print(f"Test size: {size}", flush=True)
        results.extend(run_benchmark([size], args.trials, args.fill_ratio))

    with open(args.output, "w", newline="", encoding="utf-8") as stream:
        write_csv(results, stream)
    print(f"Benchmark finished. Results written to {args.output}")
    return 0