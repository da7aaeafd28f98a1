"""Errors raised by port implementations."""


class RepositoryError(RuntimeError):
    """Raised when records cannot be fetched or decoded."""


__all__ = ["RepositoryError"]
