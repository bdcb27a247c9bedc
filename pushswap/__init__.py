"""Two-stack integer sorting with a limited set of operations."""

__version__ = "0.1.0"
__all__ = ["__version__"]