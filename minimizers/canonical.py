"""Decide per window which strand is preferred, by counting G and T bases."""

from __future__ import annotations

from typing import Iterable


def canonical_flags(seq: Iterable[int], l: int) -> list:
    """For each window of ``l`` bases, whether more than half of them are T or G.

    ``l`` must be odd so that no window ties.
    """
    if l < 1 or l % 2 == 0:
        raise ValueError(f"window length l={l} must be odd to guarantee canonicality")
    bases = bytes(seq)
    # Twice the number of T/G bases, offset by -l so that > 0 means canonical.
    count = -l
    for b in bases[: l - 1]:
        count += b & 2
    flags = []
    for add, remove in zip(bases[l - 1 :], bases):
        count += add & 2
        flags.append(count > 0)
        count -= remove & 2
    return flags