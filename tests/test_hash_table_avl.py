import random

import pytest

from hashbench.hash_table_avl import HashTableAVL


def _filled():
    table = HashTableAVL(17)
    for key, value in [(1, 100), (2, 200), (3, 300), (3, 200), (7, 200),
                       (15, 600), (64, 700), (13, 100), (5, 400), (66, 400)]:
        table.insert(key, value)
    return table


def test_find_after_insert():
    table = _filled()
    assert table.find(1) == 100
    assert table.find(2) == 200
    assert table.find(3) == 200
    assert table.find(66) == 400
    assert table.find(4) is None


def test_remove_then_find():
    table = _filled()
    table.remove(2)
    assert table.find(2) is None
    table.remove(1)
    assert table.find(1) is None
    table.remove(3)
    assert table.find(3) is None
    assert table.find(64) == 700


def test_remove_missing_is_ignored():
    table = _filled()
    table.remove(4)
    assert table.find(5) == 400


@pytest.mark.parametrize("key", [0, 1, -1, 12345, -98765, 2**31 - 1, -(2**31)])
def test_bucket_index_in_range_and_deterministic(key):
    table = HashTableAVL(17)
    idx = table.bucket_index(key)
    assert 0 <= idx < 17
    assert table.bucket_index(key) == idx


def test_bucket_index_of_zero():
    assert HashTableAVL(17).bucket_index(0) == 0


def test_default_size_holds_many_keys():
    rng = random.Random(42)
    keys = rng.sample(range(-10**6, 10**6), 2000)
    values = [rng.randint(1, 10**7) for _ in keys]
    table = HashTableAVL()
    for key, value in zip(keys, values):
        table.insert(key, value)
    assert [table.find(key) for key in keys] == values

    removed = keys[:500]
    for key in removed:
        table.remove(key)
    assert [table.find(key) for key in removed] == [None] * 500
    assert [table.find(key) for key in keys[500:]] == values[500:]


def test_mapping_protocol():
    table = HashTableAVL(5)
    table[10] = 1
    assert 10 in table
    assert table[10] == 1
    del table[10]
    assert 10 not in table
    with pytest.raises(KeyError):
        table[10]


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        HashTableAVL(0)