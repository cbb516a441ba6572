"""Filesystem repository implementation."""

from filerepo.database.filesystem.repo import FileRepository

__all__ = ["FileRepository"]
