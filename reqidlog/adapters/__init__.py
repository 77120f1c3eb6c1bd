"""Database adapters that trace their statements through a request-scoped logger."""

__all__ = ()
