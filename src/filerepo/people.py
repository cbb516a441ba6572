"""Demonstration entity hierarchy: Person > Employee > RemoteEmployee."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Person(BaseModel):
    """General base type, used to type readers and writers only.

    Not instantiable itself; build an ``Employee`` or a subclass.
    """

    model_config = ConfigDict(frozen=True)

    name: str

    def __init__(self, **data: Any) -> None:
        if type(self) is Person:
            msg = "Person is abstract; instantiate Employee or a subclass"
            raise TypeError(msg)
        super().__init__(**data)

    @property
    def id(self) -> str:
        return self.name


class Employee(Person):
    pass


class RemoteEmployee(Employee):
    location: str


__all__ = ["Employee", "Person", "RemoteEmployee"]
