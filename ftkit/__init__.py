"""C-style character, string, memory and output helpers with a printf-style formatter."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "search", "build", "output", "printf"]