"""Collect per-window minimizer positions into deduplicated flat lists."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .dedup import SKIPPED, append_unique_vals, append_unique_vals_2

# Stands for "no previous value", so that the first value is always kept.
_NO_PREVIOUS = (None,)


def collect_and_dedup(values: Iterable[int], skip_skipped: bool = False) -> List[int]:
    """Collect ``values``, dropping each one equal to the value just before it.

    With ``skip_skipped``, values equal to :data:`~minimizers.dedup.SKIPPED`
    are dropped as well. Duplicates are still judged against the raw preceding
    value, so a position reappearing after a skipped run is kept again.
    """
    values = list(values)
    if not values:
        return []
    return append_unique_vals(_NO_PREVIOUS, values, values, skip_skipped)


def collect_and_dedup_with_index(values: Iterable[int]) -> Tuple[List[int], List[int]]:
    """Deduplicate adjacent values and also return where each run starts.

    The second list holds, for each kept value, the index in ``values`` at
    which it first appeared: the start of its super-k-mer.
    """
    values = list(values)
    if not values:
        return [], []
    return append_unique_vals_2(_NO_PREVIOUS, values, values, range(len(values)))


__all__ = ["SKIPPED", "collect_and_dedup", "collect_and_dedup_with_index"]