import pytest

from hashbench.dictionary import Dictionary
from hashbench.hash_table_avl import HashTableAVL


@pytest.fixture
def table():
    return HashTableAVL(17)


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Dictionary()


def test_hash_table_is_a_dictionary(table):
    assert isinstance(table, Dictionary)
    table[1] = 100
    assert table.find(1) == 100


def test_setitem_and_getitem_round_trip(table):
    table[5] = 400
    assert table[5] == 400
    assert table.find(5) == 400


def test_getitem_missing_raises_key_error(table):
    table[1] = 100
    with pytest.raises(KeyError):
        table[4]
    assert table.find(4) is None
    assert table[1] == 100


def test_contains_reflects_insert_and_remove(table):
    table.insert(1, 100)
    assert 1 in table
    assert 2 not in table
    table.remove(1)
    assert 1 not in table


def test_delitem_removes_key(table):
    table[3] = 300
    del table[3]
    assert table.find(3) is None


def test_delitem_missing_raises_key_error(table):
    table[2] = 200
    with pytest.raises(KeyError):
        del table[7]
    assert table.find(2) == 200
    assert 7 not in table


def test_setitem_overwrites(table):
    table[3] = 300
    table[3] = 200
    assert table[3] == 200