"""Small algorithms, data structures and command-line tools built on them."""

__version__ = "1.0.0"