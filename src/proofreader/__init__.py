"""Proofreader: pluggable text validators with a name-based factory."""

__version__ = "0.1.0"

__all__ = ["__version__"]
