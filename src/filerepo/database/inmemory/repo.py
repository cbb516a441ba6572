from __future__ import annotations

import logging
from collections.abc import Iterator

from filerepo.database.base import RepoBase, validate_key
from filerepo.database.errors import EntityNotFoundError
from filerepo.database.interfaces import T

logger = logging.getLogger(__name__)


class InMemoryRepository(RepoBase[T]):
    """Dict-backed store keeping the serialized JSON of each entity.

    Values go through the same encode/validate cycle as ``FileRepository``,
    so reads return the element type rather than the inserted instance.
    """

    def __init__(self, model: type[T], *, indent: int | None = None) -> None:
        super().__init__(model, indent=indent)
        self._records: dict[str, str] = {}

    def insert(self, item: T) -> None:
        key = self._key_of(item)
        self._records[key] = self._encode(item)
        logger.debug("Stored %s %r in memory", self.model.__name__, key)

    def get(self, id: str) -> T:
        key = validate_key(id)
        payload = self._records.get(key)
        if payload is None:
            raise EntityNotFoundError(key)
        return self._decode(payload, source=f"memory record {key!r}")

    def get_all(self) -> Iterator[T]:
        for key, payload in list(self._records.items()):
            yield self._decode(payload, source=f"memory record {key!r}")

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["InMemoryRepository"]
