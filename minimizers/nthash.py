"""32-bit ntHash rolling hash over packed DNA k-mers."""

from __future__ import annotations

from typing import Iterable

from .seq import complement_base

_MASK = 0xFFFF_FFFF
_R = 7
_TABLE = (0x95C60474, 0x62A02B4C, 0x82572324, 0x4BE24456)


def _rotl(x: int, r: int) -> int:
    r %= 32
    return ((x << r) | (x >> (32 - r))) & _MASK if r else x


def _rotr(x: int, r: int) -> int:
    return _rotl(x, 32 - r % 32)


class NtHasher:
    """ntHash of k-mers; canonical hashes are equal for a k-mer and its reverse complement."""

    def __init__(self, k: int, canonical: bool = True) -> None:
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")
        self.k = k
        self.canonical = canonical
        shift = (k - 1) * _R
        self._fw_out = tuple(_rotl(h, shift) for h in _TABLE)
        self._rc = tuple(_TABLE[complement_base(b)] for b in range(4))
        self._rc_in = tuple(_rotl(h, shift) for h in self._rc)

    def _finish(self, fw: int, rc: int) -> int:
        return (fw + rc) & _MASK if self.canonical else fw

    def hash_kmers(self, seq: Iterable[int]) -> list:
        """Hashes of all k-mers of ``seq``, in order of position."""
        bases = bytes(seq)
        k = self.k
        fw = rc = 0
        for b in bases[: k - 1]:
            fw = _rotl(fw, _R) ^ _TABLE[b]
            rc = _rotr(rc, _R) ^ self._rc_in[b]
        hashes = []
        for add, remove in zip(bases[k - 1 :], bases):
            fw = _rotl(fw, _R) ^ _TABLE[add]
            rc = _rotr(rc, _R) ^ self._rc_in[add]
            hashes.append(self._finish(fw, rc))
            fw ^= self._fw_out[remove]
            rc ^= self._rc[remove]
        return hashes

    def hash_kmer(self, seq: Iterable[int], pos: int) -> int:
        """Hash of the single k-mer of ``seq`` starting at ``pos``."""
        bases = bytes(seq)
        if pos < 0 or pos + self.k > len(bases):
            raise IndexError(f"k-mer of length {self.k} at {pos} is outside a sequence of length {len(bases)}")
        fw = rc = 0
        for i, b in enumerate(bases[pos : pos + self.k]):
            fw ^= _rotl(_TABLE[b], (self.k - 1 - i) * _R)
            rc ^= _rotl(self._rc[b], i * _R)
        return self._finish(fw, rc)