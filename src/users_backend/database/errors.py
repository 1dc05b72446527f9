"""Errors raised by the persistence layer."""


class StoreError(Exception):
    """Raised when the underlying database fails to execute an operation."""
