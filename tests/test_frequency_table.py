import pytest
import numpy as np
from collections import Counter
import eprng
from eprng import FrequencyTable, Extremes, distribution

SEQUENCES = [
    [],
    [1, 1, 2, 3, 3, 3],
    [7, 7, 7, 7],
    [5, -2, 9, -2, 0, 5, 5],
    list("hello world"),
    [0.5, 0.25, 0.5, 1.0],
    list(np.random.default_rng(3).integers(0, 20, 500)),
]


@pytest.mark.parametrize("values", SEQUENCES)
def test_counts_sum_to_length(values):
    assert distribution(values).total == len(values)


@pytest.mark.parametrize("values", SEQUENCES)
def test_one_key_per_distinct_value(values):
    table = distribution(values)
    assert len(table) == len(set(values))
    assert dict(table) == dict(Counter(values))


@pytest.mark.parametrize("values", SEQUENCES)
def test_keys_ascending(values):
    keys = list(distribution(values))
    assert keys == sorted(keys)


@pytest.mark.parametrize("values", SEQUENCES[1:])
def test_extremes_bound_and_attained(values):
    table = distribution(values)
    ext = table.extremes()
    counts = list(table.values())
    assert all(ext.minimum <= c <= ext.maximum for c in counts)
    assert ext.minimum in counts
    assert ext.maximum in counts


def test_permutation_gives_identical_table():
    rng = np.random.default_rng(11)
    values = rng.integers(0, 50, 1000)
    shuffled = rng.permutation(values)
    a, b = distribution(values), distribution(shuffled)
    assert a == b
    assert list(a.items()) == list(b.items())


def test_scenario_small():
    table = distribution([1, 1, 2, 3, 3, 3])
    assert dict(table) == {1: 2, 2: 1, 3: 3}
    assert list(table) == [1, 2, 3]
    assert table.extremes() == Extremes(1, 3)
    assert eprng.extremes(table) == Extremes(1, 3)


def test_all_identical():
    table = distribution([7, 7, 7, 7])
    assert dict(table) == {7: 4}
    assert table.extremes() == Extremes(4, 4)


def test_empty_input():
    """Empty input is a valid empty table whose extremes are explicitly absent."""
    table = distribution([])
    assert len(table) == 0
    assert table.total == 0
    assert table.extremes() is None
    assert table.columns() == []


def test_empty_numpy_array():
    assert len(distribution(np.array([], dtype=np.uint8))) == 0


def test_keys_are_native_python_values():
    table = distribution(np.array([3, 1, 3], dtype=np.uint8))
    keys = list(table)
    assert keys == [1, 3]
    assert all(type(k) is int for k in keys)
    assert all(type(v) is int for v in table.values())


def test_character_keys():
    table = distribution("banana")
    assert list(table.items()) == [("a", 3), ("b", 1), ("n", 2)]


def test_signed_zero_collapses():
    table = distribution([0.0, -0.0, 1.0])
    assert len(table) == 2
    assert table[0.0] == 2
    assert table[-0.0] == 2


def test_trailing_nul_strings_stay_distinct():
    """NUL-padded characters are their own values, not empty strings."""
    table = distribution(["\0", "\0", "a", "a\0"])
    assert dict(table) == {"\0": 2, "a": 1, "a\0": 1}
    assert len(table) == 3


def test_nul_initialised_char_buffer():
    buf = ["\0"] * 8
    buf[:4] = eprng.fill_digit_chars(["\0"] * 4, 0, 10)
    table = distribution(buf)
    assert list(table.items()) == [("\0", 4), ("2", 1), ("3", 2), ("4", 1)]


def test_mixed_int_and_float_keep_their_text():
    table = distribution([1, 1, 2.5])
    assert list(table.items()) == [(1, 2), (2.5, 1)]
    assert type(next(iter(table))) is int
    assert [c.key_text for c in table.columns()] == ["1", "2.5"]


def test_tuple_values():
    table = distribution([(1, 2), (1, 2), (0, 5)])
    assert list(table.items()) == [((0, 5), 1), ((1, 2), 2)]
    assert table.extremes() == Extremes(1, 2)


def test_generator_input():
    table = distribution(x % 3 for x in range(10))
    assert dict(table) == {0: 4, 1: 3, 2: 3}


def test_multidimensional_input_rejected():
    with pytest.raises(ValueError, match="one-dimensional"):
        distribution(np.zeros((2, 3)))


def test_constructor_sorts_keys():
    table = FrequencyTable({3: 1, 1: 5, 2: 2})
    assert list(table) == [1, 2, 3]
    assert repr(table) == "FrequencyTable({1: 5, 2: 2, 3: 1})"


def test_constructor_rejects_negative_counts():
    with pytest.raises(ValueError, match="non-negative"):
        FrequencyTable({1: -1})


def test_table_is_read_only():
    table = distribution([1, 2])
    with pytest.raises(TypeError):
        table[1] = 5
    with pytest.raises(TypeError):
        del table[1]


def test_merge_of_partitions_equals_whole():
    values = eprng.gen_bytes(4096, 0x5000)
    whole = distribution(values)
    parts = [distribution(values[i:i + 1000]) for i in range(0, len(values), 1000)]
    merged = FrequencyTable()
    for part in parts:
        merged = merged + part
    assert merged == whole
    assert list(merged) == list(whole)


def test_merge_is_commutative_and_keeps_inputs():
    a = distribution([1, 2, 2])
    b = distribution([2, 3])
    assert a.merge(b) == b.merge(a) == {1: 1, 2: 3, 3: 1}
    assert dict(a) == {1: 1, 2: 2}
    assert dict(b) == {2: 1, 3: 1}


def test_add_with_non_table_unsupported():
    with pytest.raises(TypeError):
        distribution([1]) + {1: 1}


def test_columns_format_once():
    cols = distribution([10, 10, 5]).columns()
    assert [(c.key_text, c.count_text, c.width) for c in cols] == [("5", "1", 1), ("10", "2", 2)]
