"""Utility functions and classes for reqidlog."""

__all__ = ()
