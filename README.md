# minimizers

Compute the minimizers of DNA sequences. For every window of `w`
consecutive k-mers (`l = k + w - 1` bases), the position of the k-mer
with the smallest ntHash value is sampled; only the upper 16 bits of each
32-bit hash are compared, and ties go to the leftmost position. Adjacent
equal positions are collapsed, so a position is reported once for each
run of consecutive windows that share it.

*Canonical* minimizers are meant to sample the same k-mers from a
sequence and from its reverse complement. Each window gets a preferred
strand from whether more than half of its bases are `T` or `G`; the
leftmost smallest k-mer is taken on forward-preferred windows and the
rightmost otherwise. This needs `l = k + w - 1` to be odd, and a
`ValueError` is raised when it is not.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from minimizers.seq import PackedSeq
from minimizers.api import canonical_minimizer_positions, minimizer_positions

seq = PackedSeq.from_ascii("ACGTGCTCAGAGACTCAGAGGA")

print(canonical_minimizer_positions(seq, 5, 7))
print(minimizer_positions(seq, 5, 7))
```

Both functions also accept the DNA text (`str`, `bytes` or `bytearray`)
directly; it is packed with `PackedSeq.from_ascii`, which accepts
`ACGT` in either case and raises `ValueError` on anything else.

## Sequences

`minimizers.seq.PackedSeq` is an immutable sequence of 2-bit base codes
(`A=0, C=1, T=2, G=3`). It supports `len`, iteration, `slice(start, stop)`,
`revcomp()`, and reading k-mer values with `read_kmer(k, pos)` and
`read_revcomp_kmer(k, pos)`; the first base sits in the lowest two bits.
`pack_char` and `complement_base` convert single bases.

`minimizers.seq.PackedNSeq` pairs a `PackedSeq` with a flag per position
for ambiguous bases. `PackedNSeq.from_ascii` marks every character other
than `ACGT` (either case) as ambiguous and stores it as `A`;
`is_ambiguous(k, pos)` tells whether a k-mer holds such a base.

## The builder

`minimizers(k, w)` and `canonical_minimizers(k, w)` in `minimizers.api`
return a `Builder`, an immutable configuration. `with_hasher(hasher)` and
`with_super_kmers()` return modified copies. `run(seq)` returns an
`Output` with these fields:

- `positions`: the deduplicated minimizer positions;
- `super_kmers`: with `with_super_kmers()`, for each position the index
  of the first window in which it was the minimizer (the start of its
  super-k-mer); otherwise `None`;
- `k`, `seq` and `canonical`, as used for the run.

```python
from minimizers.api import canonical_minimizers
from minimizers.nthash import NtHasher
from minimizers.seq import PackedSeq

k, w = 5, 7
seq = PackedSeq.from_ascii("ACGTGCTCAGAGACTCAGAGGA")

out = (
    canonical_minimizers(k, w)
    .with_hasher(NtHasher(k, canonical=True))
    .with_super_kmers()
    .run(seq)
)
positions = out.positions
starts = out.super_kmers
values = list(out.values())               # 2-bit packed k-mer values
pairs = list(out.positions_and_values())  # (position, value) pairs
```

For a canonical run each value is the smaller of the forward k-mer and
its reverse complement. Running on `seq.revcomp()` is expected to give
the mirrored positions, `fwd + rc == len(seq) - k`, with the same values
in reverse order.

Without `with_hasher`, a run uses `NtHasher(k, canonical=...)` matching
the builder. A canonical run with a non-canonical hasher raises
`ValueError`.

## Ambiguous bases

`Builder.run_skip_ambiguous_windows(nseq)` computes canonical minimizers
and leaves out every window that holds an ambiguous base. It takes a
`PackedNSeq` or text, and raises `ValueError` on a non-canonical builder
or one with super-k-mers switched on.

```python
from minimizers.api import canonical_minimizers
from minimizers.seq import PackedNSeq

nseq = PackedNSeq.from_ascii("ACGTNACGTACGTAGCTAGCATCGA")
positions = canonical_minimizers(5, 7).run_skip_ambiguous_windows(nseq).positions
```

## Lower-level pieces

- `minimizers.nthash.NtHasher`: forward or canonical 32-bit ntHash;
  `hash_kmers(seq)` hashes every k-mer, `hash_kmer(seq, pos)` a single one.
- `minimizers.sliding_min`: `sliding_min_positions(hashes, w, left)` and
  `sliding_lr_min_positions(hashes, w)` give minimum positions over
  sliding windows, breaking ties to the left, the right, or both.
- `minimizers.canonical.canonical_flags(seq, l)`: the preferred strand of
  each window of `l` bases.
- `minimizers.windows`: one minimizer position per window, before
  adjacent equal positions are merged; `one_minimizer` finds the
  minimizer of a single window. Skipped windows are marked with
  `minimizers.dedup.SKIPPED`.
- `minimizers.dedup`: `append_unique_vals` and `append_unique_vals_2`
  select values where a block differs from the element before it.
- `minimizers.collect`: `collect_and_dedup(values, skip_skipped)` merges
  adjacent equal values, optionally dropping `SKIPPED`;
  `collect_and_dedup_with_index(values)` also returns where each run starts.

## What it does not do

This is a library only: it has no command-line tool, and it does not read
sequence files such as FASTA or FASTQ; sequences are passed in as text or
`PackedSeq` values. Only the ntHash hasher is provided. Everything is
plain Python, written for clarity rather than speed, so very long
sequences take correspondingly long.