"""Classic data structures, algorithms and small image and sound experiments."""

__version__ = "0.1.0"