"""Character, number, byte-buffer and output helpers with a printf-style formatter."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "memory",
    "output",
    "spec",
    "text",
    "integers",
    "floats",
    "printf",
]