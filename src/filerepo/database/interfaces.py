from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    """A value stored under its own non-empty string key."""

    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=Entity)
T_co = TypeVar("T_co", bound=Entity, covariant=True)
T_contra = TypeVar("T_contra", bound=Entity, contravariant=True)


@runtime_checkable
class ReadOnlyRepo(Protocol[T_co]):
    """Read capability.

    Covariant: a ``ReadOnlyRepo[Employee]`` can stand in wherever a
    ``ReadOnlyRepo[Person]`` is expected.
    """

    def get(self, id: str) -> T_co: ...

    def get_all(self) -> Iterator[T_co]: ...


@runtime_checkable
class WriteOnlyRepo(Protocol[T_contra]):
    """Write capability.

    Contravariant: a ``WriteOnlyRepo[Employee]`` can stand in wherever a
    ``WriteOnlyRepo[RemoteEmployee]`` is expected.
    """

    def insert(self, item: T_contra) -> None: ...


@runtime_checkable
class Repository(ReadOnlyRepo[T], WriteOnlyRepo[T], Protocol[T]):
    """Combined read and write capability. Invariant in ``T``."""


__all__ = [
    "Entity",
    "ReadOnlyRepo",
    "Repository",
    "T",
    "T_co",
    "T_contra",
    "WriteOnlyRepo",
]
