"""Random and canonical minimizers of packed DNA sequences, with ntHash k-mer hashing."""

__version__ = "2.2.0"