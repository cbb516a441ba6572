"""Errors raised by repository backends."""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for every error a repository raises."""


class EntityNotFoundError(RepositoryError, LookupError):
    def __init__(self, id: str, location: str | None = None) -> None:
        self.id = id
        self.location = location
        msg = f"No entity stored under id {id!r}"
        if location:
            msg = f"{msg} ({location})"
        super().__init__(msg)


class DeserializationError(RepositoryError, ValueError):
    """Stored content does not parse into the element type."""


class StorageIOError(RepositoryError):
    """The store directory or a record file could not be accessed."""


class InvalidKeyError(RepositoryError, ValueError):
    """A key is empty or does not name a single file."""


class InvalidEntityTypeError(RepositoryError, TypeError):
    """The element type cannot be stored by key."""


__all__ = [
    "DeserializationError",
    "EntityNotFoundError",
    "InvalidEntityTypeError",
    "InvalidKeyError",
    "RepositoryError",
    "StorageIOError",
]
