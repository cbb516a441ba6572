from __future__ import annotations

import logging
from typing import Optional

import typer

from filerepo.app.demo import run_demo
from filerepo.app.settings import load_repository_config
from filerepo.database import EntityNotFoundError, RepositoryError, Repository, build_repository
from filerepo.people import Employee

app = typer.Typer(help="Keyed object store demo.", no_args_is_help=True)


def _repository(ctx: typer.Context) -> Repository[Employee]:
    config = load_repository_config({"data_dir": ctx.obj.get("data_dir")})
    return build_repository(Employee, config=config)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[str] = typer.Option(None, "--data-dir", help="Root directory for stores."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"data_dir": data_dir}


@app.command()
def demo(ctx: typer.Context) -> None:
    """Insert the sample employees and print the full listing."""
    try:
        run_demo(_repository(ctx), emit=typer.echo)
    except RepositoryError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("list")
def list_employees(ctx: typer.Context) -> None:
    """Print every stored employee."""
    try:
        for employee in _repository(ctx).get_all():
            typer.echo(repr(employee))
    except RepositoryError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def get(ctx: typer.Context, id: str = typer.Argument(..., help="Employee id.")) -> None:
    """Print one stored employee."""
    try:
        typer.echo(repr(_repository(ctx).get(id)))
    except EntityNotFoundError as exc:
        typer.echo(f"not found: {id}", err=True)
        raise typer.Exit(code=1) from exc
    except RepositoryError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
