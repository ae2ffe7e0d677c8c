"""Minimizer positions for every window of a sequence."""

from __future__ import annotations

from typing import Iterable, List

from .canonical import canonical_flags
from .dedup import SKIPPED
from .nthash import NtHasher
from .seq import PackedNSeq
from .sliding_min import sliding_lr_min_positions, sliding_min_positions

_VALUE_MASK = 0xFFFF_0000


def one_minimizer(seq: Iterable[int], hasher: NtHasher) -> int:
    """Position of the leftmost smallest k-mer in a single window.

    Only the upper 16 bits of each hash are compared.
    """
    hashes = hasher.hash_kmers(seq)
    if not hashes:
        raise ValueError("the window holds no k-mer")
    keys = [h & _VALUE_MASK for h in hashes]
    return keys.index(min(keys))


def minimizer_window_positions(seq: Iterable[int], hasher: NtHasher, w: int) -> List[int]:
    """Absolute minimizer position of each window of ``w`` consecutive k-mers."""
    return sliding_min_positions(hasher.hash_kmers(seq), w, left=True)


def _require_canonical(hasher: NtHasher) -> None:
    if not hasher.canonical:
        raise ValueError("canonical minimizers need a canonical hasher")


def canonical_minimizer_window_positions(seq: Iterable[int], hasher: NtHasher, w: int) -> List[int]:
    """Canonical minimizer position of each window.

    The leftmost smallest k-mer is taken on windows whose preferred strand is
    the forward one, and the rightmost otherwise. ``k + w - 1`` must be odd.
    """
    _require_canonical(hasher)
    bases = bytes(seq)
    flags = canonical_flags(bases, hasher.k + w - 1)
    minima = sliding_lr_min_positions(hasher.hash_kmers(bases), w)
    return [left if forward else right for forward, (left, right) in zip(flags, minima)]


def canonical_minimizer_window_positions_skip_ambiguous(
    nseq: PackedNSeq, hasher: NtHasher, w: int
) -> List[int]:
    """Like :func:`canonical_minimizer_window_positions`, with SKIPPED for ambiguous windows.

    A window is ambiguous when any of its ``k + w - 1`` bases is.
    """
    positions = canonical_minimizer_window_positions(nseq.seq, hasher, w)
    l = hasher.k + w - 1
    return [SKIPPED if nseq.is_ambiguous(l, i) else pos for i, pos in enumerate(positions)]