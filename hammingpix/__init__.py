"""Encode text as Hamming-coded grids of coloured cells in images and decode it back."""

__version__ = "0.1.0"