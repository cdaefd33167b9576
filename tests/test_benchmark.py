import csv
import io

import pytest

from hashbench.benchmark import (
    BenchmarkResult,
    check_dictionary,
    main,
    measure_structure,
    run_benchmark,
    write_csv,
)
from hashbench.cuckoo import HashTableCuckoo
from hashbench.hash_table_avl import HashTableAVL
from hashbench.open_addressing import HashTableOpenAddressing

EXPECTED_CHECKS = [
    "find(1)",
    "find(2)",
    "find(3)",
    "find(66)",
    "find(4)",
    "remove(2), find(2)",
    "remove(1), find(1)",
    "remove(3), find(3)",
]


@pytest.mark.parametrize(
    "factory", [HashTableOpenAddressing, HashTableCuckoo, HashTableAVL]
)
def test_check_dictionary_passes_for_every_structure(factory):
    results = check_dictionary(factory(17))
    assert list(results) == EXPECTED_CHECKS
    assert all(results.values())


def test_check_dictionary_leaves_remaining_keys():
    table = HashTableAVL(17)
    check_dictionary(table)
    assert table.find(66) == 400
    assert table.find(1) is None


@pytest.mark.parametrize(
    "factory", [HashTableOpenAddressing, HashTableCuckoo, HashTableAVL]
)
def test_measure_structure_returns_nonnegative_times(factory):
    insert_ns, remove_ns = measure_structure(factory, 200, 0, 0.8)
    assert insert_ns >= 0
    assert remove_ns >= 0


def test_run_benchmark_shape_and_order():
    results = run_benchmark([50, 120], trials=2, fill_ratio=0.8)
    assert [(r.size, r.structure) for r in results] == [
        (50, "OpenAddressing"),
        (50, "Cuckoo"),
        (50, "AVL"),
        (120, "OpenAddressing"),
        (120, "Cuckoo"),
        (120, "AVL"),
    ]
    assert all(r.avg_insert_ns >= 0 and r.avg_remove_ns >= 0 for r in results)


def test_run_benchmark_rejects_zero_trials():
    with pytest.raises(ValueError):
        run_benchmark([10], trials=0)


def test_write_csv_format():
    stream = io.StringIO()
    write_csv(
        [BenchmarkResult(10000, "AVL", 12, 34), BenchmarkResult(10000, "Cuckoo", 5, 6)],
        stream,
    )
    assert stream.getvalue().splitlines() == [
        "size,structure,avg_insert_time_ns,avg_remove_time_ns",
        "10000,AVL,12,34",
        "10000,Cuckoo,5,6",
    ]


def test_write_csv_round_trip():
    results = run_benchmark([30], trials=1)
    stream = io.StringIO()
    write_csv(results, stream)
    stream.seek(0)
    rows = list(csv.DictReader(stream))
    assert [
        BenchmarkResult(
            int(row["size"]),
            row["structure"],
            int(row["avg_insert_time_ns"]),
            int(row["avg_remove_time_ns"]),
        )
        for row in rows
    ] == results


def test_main_writes_csv(tmp_path, capsys):
    output = tmp_path / "out.csv"
    code = main(["--output", str(output), "--sizes", "40", "--trials", "2"])
    assert code == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "size,structure,avg_insert_time_ns,avg_remove_time_ns"
    assert [line.split(",")[1] for line in lines[1:]] == ["OpenAddressing", "Cuckoo", "AVL"]
    assert "Test size: 40" in capsys.readouterr().out


def test_main_check_mode(capsys):
    assert main(["--check"]) == 0
    out = capsys.readouterr().out
    assert "Test: AVLBucket" in out
    assert "FAIL" not in out
    assert out.count("OK") == 3 * len(EXPECTED_CHECKS)


def test_main_rejects_zero_trials(tmp_path):
    with pytest.raises(SystemExit):
        main(["--output", str(tmp_path / "x.csv"), "--trials", "0"])