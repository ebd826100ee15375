"""Shared data models for proofreader."""

from proofreader.models.base import BaseSchema

__all__ = ["BaseSchema"]
