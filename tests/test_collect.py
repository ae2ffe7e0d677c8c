import pytest

from minimizers.collect import SKIPPED, collect_and_dedup, collect_and_dedup_with_index


def test_dedup_distinct_values_kept():
    assert collect_and_dedup([0, 1, 2, 3, 4, 5]) == [0, 1, 2, 3, 4, 5]


def test_dedup_adjacent_duplicates_removed():
    assert collect_and_dedup([0, 0, 1, 1, 2, 2]) == [0, 1, 2]


def test_dedup_empty():
    assert collect_and_dedup([]) == []


def test_dedup_non_adjacent_repeats_kept():
    assert collect_and_dedup(iter([3, 3, 1, 3, 3])) == [3, 1, 3]


def test_with_index_distinct():
    out, pos = collect_and_dedup_with_index([0, 1, 2, 3, 4, 5])
    assert out == [0, 1, 2, 3, 4, 5]
    assert pos == [0, 1, 2, 3, 4, 5]


def test_with_index_duplicates():
    out, pos = collect_and_dedup_with_index([0, 0, 1, 1, 2, 2])
    assert out == [0, 1, 2]
    assert pos == [0, 2, 4]


def test_with_index_empty():
    assert collect_and_dedup_with_index([]) == ([], [])


X = SKIPPED


@pytest.mark.parametrize(
    "values, skip, expected",
    [
        ([0, 1, 1, X, 2, 3, X, X, 4], False, [0, 1, X, 2, 3, X, 4]),
        ([0, 1, 1, X, 2, 3, X, X, 4], True, [0, 1, 2, 3, 4]),
        ([1, X, X, X, X, X, X, 2, X, X, X, X], False, [1, X, 2, X]),
        ([1, X, X, X, X, X, X, 2, X, X, X, X], True, [1, 2]),
    ],
)
def test_dedup_skip_max(values, skip, expected):
    assert collect_and_dedup(values, skip) == expected


def test_skip_compares_with_raw_predecessor():
    assert collect_and_dedup([5, X, 5], skip_skipped=True) == [5, 5]


def test_with_index_lengths_match():
    values = [4, 4, 4, 7, 7, 2, 9, 9, 9, 9]
    out, pos = collect_and_dedup_with_index(values)
    assert len(out) == len(pos)
    assert [values[p] for p in pos] == out