from filerepo.app.settings import RepositoryConfig, load_repository_config
from filerepo.database import (
    DeserializationError,
    Entity,
    EntityNotFoundError,
    FileRepository,
    InMemoryRepository,
    ReadOnlyRepo,
    Repository,
    RepositoryError,
    StorageIOError,
    WriteOnlyRepo,
    build_repository,
)

__all__ = [
    "DeserializationError",
    "Entity",
    "EntityNotFoundError",
    "FileRepository",
    "InMemoryRepository",
    "ReadOnlyRepo",
    "Repository",
    "RepositoryConfig",
    "RepositoryError",
    "StorageIOError",
    "WriteOnlyRepo",
    "build_repository",
    "load_repository_config",
]
