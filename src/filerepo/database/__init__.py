from filerepo.database.errors import (
    DeserializationError,
    EntityNotFoundError,
    InvalidEntityTypeError,
    InvalidKeyError,
    RepositoryError,
    StorageIOError,
)
from filerepo.database.factory import build_repository
from filerepo.database.filesystem import FileRepository
from filerepo.database.inmemory import InMemoryRepository
from filerepo.database.interfaces import Entity, ReadOnlyRepo, Repository, WriteOnlyRepo
from filerepo.database.views import ReadOnlyView, WriteOnlyView, as_read_only, as_write_only

__all__ = [
    "DeserializationError",
    "Entity",
    "EntityNotFoundError",
    "FileRepository",
    "InMemoryRepository",
    "InvalidEntityTypeError",
    "InvalidKeyError",
    "ReadOnlyRepo",
    "ReadOnlyView",
    "Repository",
    "RepositoryError",
    "StorageIOError",
    "WriteOnlyRepo",
    "WriteOnlyView",
    "as_read_only",
    "as_write_only",
    "build_repository",
]
