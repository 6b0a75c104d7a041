"""Endpoint switching and pagination."""

from .navigator import Direction, Navigator

__all__ = ["Direction", "Navigator"]
