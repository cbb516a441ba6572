from __future__ import annotations

import inspect
import os
from typing import Any, Generic, cast

from pydantic import BaseModel, ValidationError

from filerepo.database.errors import DeserializationError, InvalidEntityTypeError, InvalidKeyError
from filerepo.database.interfaces import T


def exposes_id(model: type[Any]) -> bool:
    """Whether a pydantic model class carries an ``id`` field or property."""
    if "id" in model.model_fields or "id" in model.model_computed_fields:
        return True
    return isinstance(inspect.getattr_static(model, "id", None), property)


def validate_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        msg = f"Entity id must be a non-empty string, got {key!r}"
        raise InvalidKeyError(msg)
    if key in {".", ".."} or "\x00" in key or "/" in key or os.sep in key or (os.altsep and os.altsep in key):
        msg = f"Entity id must name a single file, got {key!r}"
        raise InvalidKeyError(msg)
    return key


class RepoBase(Generic[T]):
    """Shared element-type checks and JSON codec for the concrete stores."""

    def __init__(self, model: type[T], *, indent: int | None = None) -> None:
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            msg = f"{model!r} is not a pydantic model and cannot be stored"
            raise InvalidEntityTypeError(msg)
        if not exposes_id(model):
            msg = f"{model.__name__} does not expose an 'id' to use as storage key"
            raise InvalidEntityTypeError(msg)
        self.model: type[T] = model
        self._indent: int | None = indent

    def _key_of(self, item: T) -> str:
        if not isinstance(item, self.model):
            msg = f"Expected {self.model.__name__}, got {type(item).__name__}"
            raise InvalidEntityTypeError(msg)
        return validate_key(item.id)

    def _encode(self, item: T) -> str:
        return cast(BaseModel, item).model_dump_json(indent=self._indent)

    def _decode(self, text: str | bytes, *, source: str) -> T:
        try:
            return cast(T, cast("type[BaseModel]", self.model).model_validate_json(text))
        except ValidationError as exc:
            msg = f"Cannot read {self.model.__name__} from {source}: {exc}"
            raise DeserializationError(msg) from exc


__all__ = ["RepoBase", "exposes_id", "validate_key"]
