import random

import pytest

from minimizers.sliding_min import sliding_lr_min_positions, sliding_min_positions


def _hashes(n, seed, spread=2**32):
    rng = random.Random(seed)
    return [rng.randrange(spread) for _ in range(n)]


def _check_minima(hashes, w, positions, left):
    keys = [h >> 16 for h in hashes]
    assert len(positions) == max(0, len(hashes) - w + 1)
    for start, pos in enumerate(positions):
        window = keys[start : start + w]
        assert start <= pos < start + w
        assert keys[pos] == min(window)
        ties = [start + i for i, key in enumerate(window) if key == keys[pos]]
        assert pos == (ties[0] if left else ties[-1])


@pytest.mark.parametrize("left", [True, False])
@pytest.mark.parametrize("w", [1, 2, 3, 5, 31, 64])
def test_minima_are_correct(w, left):
    # A small range of upper bits forces many ties.
    hashes = _hashes(400, w, spread=8 << 16)
    _check_minima(hashes, w, sliding_min_positions(hashes, w, left), left)


def test_only_upper_bits_are_compared():
    hashes = [0x0001_FFFF, 0x0001_0000]
    assert sliding_min_positions(hashes, 2, left=True) == [0]
    assert sliding_min_positions(hashes, 2, left=False) == [1]


def test_window_of_one_returns_every_position():
    hashes = _hashes(50, 1)
    assert sliding_min_positions(hashes, 1) == list(range(50))


@pytest.mark.parametrize("w", [1, 4, 17])
def test_lr_matches_separate_runs(w):
    hashes = _hashes(300, 40 + w, spread=16 << 16)
    pairs = sliding_lr_min_positions(hashes, w)
    assert [p[0] for p in pairs] == sliding_min_positions(hashes, w, True)
    assert [p[1] for p in pairs] == sliding_min_positions(hashes, w, False)
    assert all(left <= right for left, right in pairs)


def test_short_input_has_no_windows():
    assert sliding_min_positions([1, 2], 3) == []
    assert sliding_lr_min_positions([1, 2], 3) == []


@pytest.mark.parametrize("w", [0, 1 << 15])
def test_invalid_window_rejected(w):
    with pytest.raises(ValueError):
        sliding_min_positions([1, 2, 3], w)
    with pytest.raises(ValueError):
        sliding_lr_min_positions([1, 2, 3], w)