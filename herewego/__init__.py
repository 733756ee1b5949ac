"""Small data structures, line-driven terminal tools and helper servers."""

__version__ = "0.1.0"