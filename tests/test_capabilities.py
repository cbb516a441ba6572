from pathlib import Path

import pytest

from filerepo.app.demo import add_employees, add_remote_employees, read_people, run_demo
from filerepo.database import (
    FileRepository,
    InMemoryRepository,
    ReadOnlyRepo,
    ReadOnlyView,
    Repository,
    WriteOnlyRepo,
    WriteOnlyView,
    as_read_only,
    as_write_only,
)
from filerepo.people import Employee, RemoteEmployee


def test_protocols_declare_only_their_capability() -> None:
    assert hasattr(ReadOnlyRepo, "get")
    assert hasattr(ReadOnlyRepo, "get_all")
    assert not hasattr(ReadOnlyRepo, "insert")

    assert hasattr(WriteOnlyRepo, "insert")
    assert not hasattr(WriteOnlyRepo, "get")
    assert not hasattr(WriteOnlyRepo, "get_all")


def test_stores_satisfy_every_capability(tmp_path: Path) -> None:
    for repo in (FileRepository(Employee, data_dir=tmp_path), InMemoryRepository(Employee)):
        assert isinstance(repo, Repository)
        assert isinstance(repo, ReadOnlyRepo)
        assert isinstance(repo, WriteOnlyRepo)


def test_read_only_view_hides_insert() -> None:
    repo = InMemoryRepository(Employee)
    repo.insert(Employee(name="Karen"))
    view = as_read_only(repo)

    assert isinstance(view, ReadOnlyView)
    assert isinstance(view, ReadOnlyRepo)
    assert not isinstance(view, WriteOnlyRepo)
    assert view.get("Karen") == Employee(name="Karen")
    assert [e.id for e in view.get_all()] == ["Karen"]
    with pytest.raises(AttributeError):
        view.insert(Employee(name="Andrew"))  # type: ignore[attr-defined]


def test_write_only_view_hides_reads() -> None:
    repo = InMemoryRepository(Employee)
    view = as_write_only(repo)

    assert isinstance(view, WriteOnlyView)
    assert isinstance(view, WriteOnlyRepo)
    assert not isinstance(view, ReadOnlyRepo)
    view.insert(RemoteEmployee(name="Carol", location="UK"))
    assert repo.get("Carol") == Employee(name="Carol")
    with pytest.raises(AttributeError):
        view.get("Carol")  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        view.get_all()  # type: ignore[attr-defined]


def test_same_id_inserted_twice_keeps_latest(tmp_path: Path) -> None:
    repo = FileRepository(Employee, data_dir=tmp_path)
    add_employees(repo)

    records = list(repo.get_all())
    assert records == [Employee(name="Karen")]


def test_narrow_writer_and_broad_reader_share_one_store(tmp_path: Path) -> None:
    repo = FileRepository(Employee, data_dir=tmp_path)
    add_remote_employees(as_write_only(repo))

    people = read_people(as_read_only(repo))
    assert sorted(p.id for p in people) == ["Andrew", "Carol"]
    assert all(type(p) is Employee for p in people)


def test_run_demo_prints_full_listing(tmp_path: Path) -> None:
    lines: list[str] = []
    people = run_demo(FileRepository(Employee, data_dir=tmp_path), emit=lines.append)

    assert sorted(p.id for p in people) == ["Andrew", "Carol", "Karen"]
    assert sorted(lines) == [
        "Employee(name='Andrew')",
        "Employee(name='Carol')",
        "Employee(name='Karen')",
    ]
