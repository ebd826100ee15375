"""Exceptions for config module.

This module defines exceptions related to configuration loading,
parsing, and validation errors.
"""

from proofreader.exceptions import ProofreaderError

__all__ = ["ConfigurationError"]


class ConfigurationError(ProofreaderError):
    """Raised for invalid configuration files or property values."""

    pass
