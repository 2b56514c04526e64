"""Time insertion, merge, quick, heap, counting and built-in sorts on binary integer datasets."""

__version__ = "0.1.0"