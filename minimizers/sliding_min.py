"""Sliding window minimum over the upper 16 bits of 32-bit hashes."""

from __future__ import annotations

from collections import deque
from typing import Iterable

_MAX_W = 1 << 15


def _check_window(w: int) -> None:
    if w < 1:
        raise ValueError(f"window size must be positive, got {w}")
    if w >= _MAX_W:
        raise ValueError("sliding_min is not tested for windows of length >= 2^15")


def _keys(hashes: Iterable[int]) -> list:
    return [(h & 0xFFFF_FFFF) >> 16 for h in hashes]


def _window_minima(keys: list, w: int, left: bool) -> list:
    window: deque = deque()
    positions = []
    for pos, key in enumerate(keys):
        while window and (window[-1][0] > key if left else window[-1][0] >= key):
            window.pop()
        window.append((key, pos))
        if window[0][1] <= pos - w:
            window.popleft()
        if pos >= w - 1:
            positions.append(window[0][1])
    return positions


def sliding_min_positions(hashes: Iterable[int], w: int, left: bool = True) -> list:
    """Position of the minimum in each window of ``w`` hashes.

    Only the upper 16 bits of each hash are compared. Ties go to the leftmost
    position when ``left`` is true and to the rightmost otherwise.
    """
    _check_window(w)
    return _window_minima(_keys(hashes), w, left)


def sliding_lr_min_positions(hashes: Iterable[int], w: int) -> list:
    """Pairs of (leftmost, rightmost) minimum positions for each window of ``w`` hashes."""
    _check_window(w)
    keys = _keys(hashes)
    return list(zip(_window_minima(keys, w, True), _window_minima(keys, w, False)))