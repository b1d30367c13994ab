"""Sequence algorithms: merging, counting sort, hashing, union-find and suffix arrays."""

__version__ = "0.1.0"