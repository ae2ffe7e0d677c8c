import itertools
import random

import pytest

from minimizers.dedup import SKIPPED, append_unique_vals, append_unique_vals_2

U32_MAX = 0xFFFF_FFFF


@pytest.mark.parametrize("max_value", [100, 333, 1000, 3000, 10000])
def test_blockwise_dedup_matches_full_dedup(max_value):
    rng = random.Random(max_value)
    length = 1 << 12
    values = sorted(rng.randrange(max_value) for _ in range(length))
    expected = [key for key, _ in itertools.groupby(values)]

    old = [U32_MAX] * 8
    out = []
    for start in range(0, length, 8):
        new = values[start : start + 8]
        out.extend(append_unique_vals(old, new, new))
        old = new
    assert out == expected


def test_first_element_compared_with_last_of_old():
    assert append_unique_vals([9, 9, 9, 9, 9, 9, 9, 5], [5, 5, 6, 6, 7, 7, 7, 8], list(range(8))) == [2, 4, 7]


def test_all_equal_to_old_gives_nothing():
    assert append_unique_vals([3] * 8, [3] * 8, list(range(8))) == []


def test_values_taken_from_vals_block():
    new = [1, 1, 2, 3, 3, 3, 4, 4]
    vals = [10, 11, 12, 13, 14, 15, 16, 17]
    assert append_unique_vals([0] * 8, new, vals) == [10, 12, 13, 16]


def test_skipped_kept_without_flag():
    x = SKIPPED
    new = [0, 1, 1, x, 2, 3, x, x]
    assert append_unique_vals([U32_MAX] * 8, new, new) == [0, 1, x, 2, 3, x]


def test_skipped_dropped_with_flag():
    x = SKIPPED
    new = [0, 1, 1, x, 2, 3, x, x]
    assert append_unique_vals([U32_MAX] * 8, new, new, True) == [0, 1, 2, 3]


def test_skip_compares_against_raw_predecessor():
    x = SKIPPED
    new = [1, x, 1, x, x, 2, x, 2]
    assert append_unique_vals([U32_MAX] * 8, new, new, True) == [1, 1, 2, 2]


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        append_unique_vals([0] * 8, [1, 2, 3], [1, 2])


def test_empty_old_raises():
    with pytest.raises(ValueError):
        append_unique_vals([], [1, 2], [1, 2])


def test_two_blocks_selected_together():
    new = [4, 4, 5, 5, 5, 6, 7, 7]
    vals = new
    vals2 = [100, 101, 102, 103, 104, 105, 106, 107]
    out, idx = append_unique_vals_2([3] * 8, new, vals, vals2)
    assert out == [4, 5, 6, 7]
    assert idx == [100, 102, 105, 106]


def test_two_blocks_does_not_skip_marker():
    x = SKIPPED
    new = [x, x, 1, 1, x, 2, 2, 2]
    out, idx = append_unique_vals_2([0] * 8, new, new, list(range(8)))
    assert out == [x, 1, x, 2]
    assert idx == [0, 2, 4, 5]


def test_two_blocks_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        append_unique_vals_2([0] * 8, [1, 2], [1, 2], [1])