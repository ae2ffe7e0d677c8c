"""Builder interface for computing (canonical) minimizer positions and values."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .collect import collect_and_dedup, collect_and_dedup_with_index
from .nthash import NtHasher
from .seq import PackedNSeq, PackedSeq
from .windows import (
    canonical_minimizer_window_positions,
    canonical_minimizer_window_positions_skip_ambiguous,
    minimizer_window_positions,
)

SeqLike = Union[PackedSeq, str, bytes, bytearray]


def _as_packed(seq: SeqLike) -> PackedSeq:
    if isinstance(seq, PackedSeq):
        return seq
    if isinstance(seq, (str, bytes, bytearray)):
        return PackedSeq.from_ascii(seq)
    raise TypeError(f"expected a PackedSeq or DNA text, got {type(seq).__name__}")


def _as_nseq(nseq: Union[PackedNSeq, str, bytes, bytearray]) -> PackedNSeq:
    if isinstance(nseq, PackedNSeq):
        return nseq
    if isinstance(nseq, (str, bytes, bytearray)):
        return PackedNSeq.from_ascii(nseq)
    raise TypeError(f"expected a PackedNSeq or text, got {type(nseq).__name__}")


@dataclass(frozen=True)
class Output:
    """Minimizer positions of one run, with access to the k-mer values at them."""

    k: int
    seq: PackedSeq
    positions: List[int]
    canonical: bool
    super_kmers: Optional[List[int]] = None

    def _value(self, pos: int) -> int:
        forward = self.seq.read_kmer(self.k, pos)
        if not self.canonical:
            return forward
        return min(forward, self.seq.read_revcomp_kmer(self.k, pos))

    def values(self) -> Iterator[int]:
        """The (canonical) k-mer value at each minimizer position."""
        return (value for _, value in self.positions_and_values())

    def positions_and_values(self) -> Iterator[Tuple[int, int]]:
        """Pairs of minimizer position and (canonical) k-mer value."""
        return ((pos, self._value(pos)) for pos in self.positions)


@dataclass(frozen=True)
class Builder:
    """Configuration of a minimizer computation: ``k``, ``w``, strand handling and hasher."""

    k: int
    w: int
    canonical: bool = False
    hasher: Optional[NtHasher] = None
    super_kmers: bool = False

    def __post_init__(self) -> None:
        if self.k < 1:
            raise ValueError(f"k must be positive, got {self.k}")
        if self.w < 1:
            raise ValueError(f"w must be positive, got {self.w}")

    def with_hasher(self, hasher: NtHasher) -> "Builder":
        """A copy of this builder that hashes k-mers with ``hasher``."""
        return replace(self, hasher=hasher)

    def with_super_kmers(self) -> "Builder":
        """A copy of this builder that also reports the start of each super-k-mer."""
        return replace(self, super_kmers=True)

    def _hasher(self) -> NtHasher:
        if self.hasher is not None:
            return self.hasher
        return NtHasher(self.k, canonical=self.canonical)

    def run(self, seq: SeqLike) -> Output:
        """Compute the deduplicated minimizer positions of ``seq``."""
        packed = _as_packed(seq)
        hasher = self._hasher()
        if self.canonical:
            window_positions = canonical_minimizer_window_positions(packed, hasher, self.w)
        else:
            window_positions = minimizer_window_positions(packed, hasher, self.w)
        if self.super_kmers:
            positions, starts = collect_and_dedup_with_index(window_positions)
            return Output(self.k, packed, positions, self.canonical, starts)
        return Output(self.k, packed, collect_and_dedup(window_positions), self.canonical)

    def run_skip_ambiguous_windows(self, nseq: Union[PackedNSeq, str, bytes]) -> Output:
        """Canonical minimizer positions, leaving out windows with ambiguous bases."""
        if not self.canonical:
            raise ValueError("skipping ambiguous windows needs canonical minimizers")
        if self.super_kmers:
            raise ValueError("skipping ambiguous windows does not report super-k-mers")
        nseq = _as_nseq(nseq)
        window_positions = canonical_minimizer_window_positions_skip_ambiguous(
            nseq, self._hasher(), self.w
        )
        positions = collect_and_dedup(window_positions, skip_skipped=True)
        return Output(self.k, nseq.seq, positions, True)


def minimizers(k: int, w: int) -> Builder:
    """Builder for forward minimizers."""
    return Builder(k, w, canonical=False)


def canonical_minimizers(k: int, w: int) -> Builder:
    """Builder for canonical minimizers; ``k + w - 1`` must be odd."""
    return Builder(k, w, canonical=True)


def minimizer_positions(seq: SeqLike, k: int, w: int) -> List[int]:
    """Positions of all minimizers of ``seq``."""
    return minimizers(k, w).run(seq).positions


def canonical_minimizer_positions(seq: SeqLike, k: int, w: int) -> List[int]:
    """Positions of all canonical minimizers of ``seq``."""
    return canonical_minimizers(k, w).run(seq).positions


__all__: Iterable[str] = [
    "Builder",
    "Output",
    "minimizers",
    "canonical_minimizers",
    "minimizer_positions",
    "canonical_minimizer_positions",
]