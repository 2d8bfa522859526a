"""Sorting of integer files by quicksort, sample sort and a streaming merge tree."""

__version__ = "0.1.0"