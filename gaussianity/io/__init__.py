"""Gaussianity I/O: file readers."""

from gaussianity.io.reader import read_frame, read_series

__all__ = ['read_frame', 'read_series']
