import tempfile

from filerepo.app.demo import add_remote_employees, read_people, run_demo
from filerepo.database import FileRepository, as_read_only, as_write_only
from filerepo.people import Employee


def main() -> None:
    with tempfile.TemporaryDirectory() as data_dir:
        repository = FileRepository(Employee, data_dir=data_dir, indent=2)
        run_demo(repository)

        # Hand out only the capability each routine needs.
        add_remote_employees(as_write_only(repository))
        people = read_people(as_read_only(repository))
        print("stored in:", repository.directory)
        print("count:", len(people))


if __name__ == "__main__":
    main()
