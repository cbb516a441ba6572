"""Demonstration routines.

Each routine asks for the narrowest capability it needs, which is what lets
a single ``Repository[Employee]`` serve all three of them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from filerepo.database.interfaces import ReadOnlyRepo, Repository, WriteOnlyRepo
from filerepo.people import Employee, Person, RemoteEmployee

logger = logging.getLogger(__name__)


def add_employees(repository: WriteOnlyRepo[Employee]) -> None:
    for employee in (RemoteEmployee(name="Karen", location="Usa"), Employee(name="Karen")):
        repository.insert(employee)


def add_remote_employees(repository: WriteOnlyRepo[RemoteEmployee]) -> None:
    # A writer of Employee accepts any RemoteEmployee.
    repository.insert(RemoteEmployee(name="Andrew", location="Canada"))
    repository.insert(RemoteEmployee(name="Carol", location="UK"))


def read_people(repository: ReadOnlyRepo[Person]) -> list[Person]:
    # A reader of Employee yields values that are all Persons.
    return list(repository.get_all())


def run_demo(repository: Repository[Employee], emit: Callable[[str], None] = print) -> list[Person]:
    add_employees(repository)
    add_remote_employees(repository)
    people = read_people(repository)
    logger.info("Demo stored %d records", len(people))
    for person in people:
        emit(repr(person))
    return people


__all__ = ["add_employees", "add_remote_employees", "read_people", "run_demo"]
