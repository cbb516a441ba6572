"""File-backed repository: one JSON file per entity."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from filerepo.database.base import RepoBase, validate_key
from filerepo.database.errors import DeserializationError, EntityNotFoundError, StorageIOError
from filerepo.database.interfaces import T

logger = logging.getLogger(__name__)


class FileRepository(RepoBase[T]):
    """Stores each entity as ``<data_dir>/<StoreType>/<ElementType>/<id>.<ext>``.

    The directory is created on construction. Inserting an existing id
    overwrites the file; nothing is ever deleted.

    Attributes:
        model: Pydantic model records are validated into on read.
        directory: Directory holding the record files.
        extension: File extension of record files, without the dot.
    """

    def __init__(
        self,
        model: type[T],
        *,
        data_dir: str | Path = "data",
        extension: str = "json",
        indent: int | None = None,
    ) -> None:
        """Initialize the store and create its directory.

        Args:
            model: Element type. Must be a pydantic model exposing ``id``.
            data_dir: Root under which per-store directories live.
            extension: Record file extension.
            indent: JSON indent used when writing records.
        """
        super().__init__(model, indent=indent)
        self.extension = extension.lstrip(".")
        self.directory = Path(data_dir) / type(self).__name__ / model.__name__
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Cannot create store directory {self.directory}: {exc}"
            raise StorageIOError(msg) from exc
        logger.debug("%s store ready at %s", model.__name__, self.directory)

    def _path(self, id: str) -> Path:
        return self.directory / f"{validate_key(id)}.{self.extension}"

    def insert(self, item: T) -> None:
        path = self._path(self._key_of(item))
        payload = self._encode(item)
        try:
            path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot write {path}: {exc}"
            raise StorageIOError(msg) from exc
        logger.debug("Wrote %s", path)

    def get(self, id: str) -> T:
        path = self._path(id)
        try:
            return self._load(path)
        except FileNotFoundError as exc:
            raise EntityNotFoundError(id, str(path)) from exc

    def get_all(self) -> Iterator[T]:
        """Yield every record in directory listing order.

        The directory is read when iteration starts, so each call sees the
        files present at that moment. A bad file aborts the listing.
        """
        try:
            entries = list(self.directory.iterdir())
        except OSError as exc:
            msg = f"Cannot list {self.directory}: {exc}"
            raise StorageIOError(msg) from exc
        for path in entries:
            if not path.is_file():
                continue
            try:
                item = self._load(path)
            except FileNotFoundError as exc:
                msg = f"{path} disappeared while listing {self.directory}"
                raise StorageIOError(msg) from exc
            yield item

    def _load(self, path: Path) -> T:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except UnicodeDecodeError as exc:
            msg = f"Cannot read {self.model.__name__} from {path}: {exc}"
            raise DeserializationError(msg) from exc
        except OSError as exc:
            msg = f"Cannot read {path}: {exc}"
            raise StorageIOError(msg) from exc
        logger.debug("Read %s", path)
        return self._decode(text, source=str(path))


__all__ = ["FileRepository"]
