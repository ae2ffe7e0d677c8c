"""Packed 2-bit DNA sequences and k-mer reading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

_LETTERS = "ACTG"
_CODES = {letter: code for code, letter in enumerate(_LETTERS)}
_CODES.update({letter.lower(): code for letter, code in list(_CODES.items())})

Text = Union[str, bytes, bytearray]


def pack_char(char: Union[str, int]) -> int:
    """Return the 2-bit code of a DNA character: A=0, C=1, T=2, G=3."""
    if isinstance(char, int):
        char = chr(char)
    try:
        return _CODES[char]
    except KeyError:
        raise ValueError(f"not a DNA base: {char!r}") from None


def complement_base(base: int) -> int:
    """Return the 2-bit code of the complementary base (A<->T, C<->G)."""
    if not 0 <= base < 4:
        raise ValueError(f"not a 2-bit base code: {base!r}")
    return base ^ 2


def _as_str(text: Text) -> str:
    if isinstance(text, (bytes, bytearray)):
        return text.decode("ascii")
    return text


@dataclass(frozen=True)
class PackedSeq:
    """An immutable DNA sequence stored as 2-bit base codes."""

    bases: bytes = b""

    def __post_init__(self) -> None:
        bases = bytes(self.bases)
        if any(b > 3 for b in bases):
            raise ValueError("base codes must be in 0..3")
        object.__setattr__(self, "bases", bases)

    @classmethod
    def from_ascii(cls, text: Text) -> "PackedSeq":
        """Pack a string of ACGT characters (either case)."""
        return cls(bytes(pack_char(c) for c in _as_str(text)))

    def __len__(self) -> int:
        return len(self.bases)

    def __iter__(self) -> Iterator[int]:
        return iter(self.bases)

    def __bytes__(self) -> bytes:
        return self.bases

    def __str__(self) -> str:
        return "".join(_LETTERS[b] for b in self.bases)

    def slice(self, start: int, stop: int) -> "PackedSeq":
        """Return the subsequence ``[start, stop)``."""
        return PackedSeq(self.bases[start:stop])

    def revcomp(self) -> "PackedSeq":
        """Return the reverse complement of this sequence."""
        return PackedSeq(bytes(b ^ 2 for b in reversed(self.bases)))

    def _kmer(self, k: int, pos: int) -> bytes:
        if k < 0 or pos < 0 or pos + k > len(self.bases):
            raise IndexError(f"k-mer of length {k} at {pos} is outside a sequence of length {len(self)}")
        return self.bases[pos : pos + k]

    def read_kmer(self, k: int, pos: int) -> int:
        """Value of the k-mer at ``pos``, first base in the lowest two bits."""
        return sum(b << (2 * i) for i, b in enumerate(self._kmer(k, pos)))

    def read_revcomp_kmer(self, k: int, pos: int) -> int:
        """Value of the reverse complement of the k-mer at ``pos``."""
        kmer = self._kmer(k, pos)
        return sum((b ^ 2) << (2 * i) for i, b in enumerate(reversed(kmer)))


@dataclass(frozen=True)
class PackedNSeq:
    """A packed sequence together with a flag per position for ambiguous bases."""

    seq: PackedSeq
    ambiguous: tuple

    def __post_init__(self) -> None:
        flags = tuple(bool(x) for x in self.ambiguous)
        if len(flags) != len(self.seq):
            raise ValueError("ambiguity flags must cover the whole sequence")
        object.__setattr__(self, "ambiguous", flags)

    @classmethod
    def from_ascii(cls, text: Text) -> "PackedNSeq":
        """Pack text; characters other than ACGT are marked ambiguous and stored as A."""
        codes = [_CODES.get(c) for c in _as_str(text)]
        bases = bytes(0 if code is None else code for code in codes)
        return cls(PackedSeq(bases), tuple(code is None for code in codes))

    def __len__(self) -> int:
        return len(self.seq)

    def is_ambiguous(self, k: int, pos: int) -> bool:
        """Whether the k-mer at ``pos`` contains an ambiguous base."""
        if k < 0 or pos < 0 or pos + k > len(self.ambiguous):
            raise IndexError(f"k-mer of length {k} at {pos} is outside a sequence of length {len(self)}")
        return any(self.ambiguous[pos : pos + k])