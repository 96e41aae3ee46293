"""Observed booleans, sets and maps with interval error rates, plus Bloom filters, a count-min sketch and MinHash."""

__version__ = "1.0.0"