"""Base exceptions for proofreader.

This module defines the root exception hierarchy for the entire
proofreader package. All domain-specific exceptions should
inherit from ProofreaderError.
"""

__all__ = ["ProofreaderError"]


class ProofreaderError(Exception):
    """Base exception for all proofreader errors.

    All exceptions in the proofreader package inherit from this base.
    Provides a common exception type for clients to catch framework errors.
    """

    pass
