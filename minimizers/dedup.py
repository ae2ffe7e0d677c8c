"""Deduplicate one block of adjacent values against its predecessor."""

from __future__ import annotations

from typing import Sequence, Tuple

SKIPPED = 0xFFFF_FFFF - 1
"""Marker for windows that were skipped, e.g. because they contain ambiguous bases."""


def _kept_indices(old: Sequence[int], new: Sequence[int], skip_skipped: bool) -> list:
    if not old:
        raise ValueError("old block must not be empty")
    previous = [old[-1], *new[:-1]]
    return [
        i
        for i, (prev, cur) in enumerate(zip(previous, new))
        if cur != prev and not (skip_skipped and cur == SKIPPED)
    ]


def _check_same_length(new: Sequence[int], *others: Sequence[int]) -> None:
    for other in others:
        if len(other) != len(new):
            raise ValueError(f"blocks differ in length: {len(new)} and {len(other)}")


def append_unique_vals(
    old: Sequence[int],
    new: Sequence[int],
    vals: Sequence[int],
    skip_skipped: bool = False,
) -> list:
    """Values of ``vals`` at the positions where ``new`` differs from the element before it.

    The element before the first one of ``new`` is the last element of ``old``.
    With ``skip_skipped``, positions where ``new`` equals :data:`SKIPPED` are
    dropped as well; the comparison is still against the raw preceding element.
    """
    _check_same_length(new, vals)
    return [vals[i] for i in _kept_indices(old, new, skip_skipped)]


def append_unique_vals_2(
    old: Sequence[int],
    new: Sequence[int],
    vals: Sequence[int],
    vals2: Sequence[int],
) -> Tuple[list, list]:
    """Like :func:`append_unique_vals`, selecting from two value blocks at once."""
    _check_same_length(new, vals, vals2)
    kept = _kept_indices(old, new, False)
    return [vals[i] for i in kept], [vals2[i] for i in kept]