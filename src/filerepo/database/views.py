"""Runtime capability views over a combined repository.

The protocols in :mod:`filerepo.database.interfaces` already narrow what a
type checker lets a caller do. These wrappers narrow what the object itself
offers, so a read-only holder cannot reach ``insert`` even dynamically.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic

from filerepo.database.interfaces import ReadOnlyRepo, T_co, T_contra, WriteOnlyRepo


class ReadOnlyView(Generic[T_co]):
    __slots__ = ("_repo",)

    def __init__(self, repo: ReadOnlyRepo[T_co]) -> None:
        self._repo = repo

    def get(self, id: str) -> T_co:
        return self._repo.get(id)

    def get_all(self) -> Iterator[T_co]:
        return self._repo.get_all()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._repo!r})"


class WriteOnlyView(Generic[T_contra]):
    __slots__ = ("_repo",)

    def __init__(self, repo: WriteOnlyRepo[T_contra]) -> None:
        self._repo = repo

    def insert(self, item: T_contra) -> None:
        self._repo.insert(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._repo!r})"


def as_read_only(repo: ReadOnlyRepo[T_co]) -> ReadOnlyView[T_co]:
    return ReadOnlyView(repo)


def as_write_only(repo: WriteOnlyRepo[T_contra]) -> WriteOnlyView[T_contra]:
    return WriteOnlyView(repo)


__all__ = ["ReadOnlyView", "WriteOnlyView", "as_read_only", "as_write_only"]
