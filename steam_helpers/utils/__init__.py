"""Utility functions."""

from .sequences import chunk, dedupe, group_by, index_by

__all__ = ["chunk", "dedupe", "group_by", "index_by"]
