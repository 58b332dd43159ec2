"""Hyphae CLI - inspect how a project's source files map to component keys."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from hyphae.component import Component
from hyphae.config import ContainerConfig
from hyphae.container import Container
from hyphae.errors import HyphaeError


def _parse_namespace(spec: str) -> tuple[str | None, str | None, bool]:
    """Split ``PATH[=KEY]`` into (path, key, key_given). ``.`` is the root path."""
    path, sep, key = spec.partition("=")
    path = path.strip().strip("/")
    if path in ("", "."):
        path = None
    return path, (key.strip() or None), bool(sep)


def _build_container(
    root: str,
    dirs: tuple[str, ...],
    namespaces: tuple[str, ...],
    separator: str,
) -> Container:
    config = ContainerConfig(root=Path(root).resolve(), namespace_separator=separator)

    for dir_path in dirs or ("lib",):
        dir_config = config.add_component_dir(dir_path)
        for spec in namespaces:
            path, key, key_given = _parse_namespace(spec)
            try:
                if path is None:
                    dir_config.namespaces.add_root(key=key)
                elif key_given:
                    dir_config.namespaces.add(path, key=key)
                else:
                    dir_config.namespaces.add(path)
            except HyphaeError as e:
                raise click.BadParameter(str(e), param_hint="--namespace")

    return Container(config)


def _component_row(component: Component, root: Path) -> dict:
    namespace = component.namespace
    try:
        file_path = component.file_path.relative_to(root).as_posix()
    except ValueError:
        file_path = str(component.file_path)
    return {
        "key": component.key,
        "file": file_path,
        "namespace_path": namespace.path,
        "namespace_key": namespace.key,
        "module": component.module_name,
        "auto_register": bool(component.auto_register),
    }


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def common_options(fn):
    fn = click.option("--quiet", is_flag=True, help="Suppress all output except errors")(fn)
    fn = click.option("--verbose", is_flag=True, help="Log per-file resolution details")(fn)
    fn = click.option("--separator", default=".", show_default=True, help="Component key separator")(fn)
    fn = click.option(
        "-n", "--namespace", "namespaces", multiple=True,
        help="Namespace as PATH[=KEY]; '.' is the root namespace",
    )(fn)
    fn = click.option(
        "-d", "--dir", "dirs", multiple=True,
        help="Component dir relative to ROOT (default: lib)",
    )(fn)
    return fn


@click.group()
def cli() -> None:
    """Hyphae - map source files to dependency-injection component keys."""
    pass


@cli.command("list")
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@common_options
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
def list_cmd(
    root: str,
    dirs: tuple[str, ...],
    namespaces: tuple[str, ...],
    separator: str,
    verbose: bool,
    quiet: bool,
    as_json: bool,
) -> None:
    """List every component found under ROOT's component dirs."""
    _configure_logging(verbose, quiet)
    container = _build_container(root, dirs, namespaces, separator)

    try:
        rows = [_component_row(c, container.root) for c in container.each_component()]
    except HyphaeError as e:
        raise click.ClickException(str(e))

    if quiet:
        return

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Components: {container.root.name}", show_edge=False)
    table.add_column("Key", style="bold")
    table.add_column("Namespace")
    table.add_column("File")
    table.add_column("Auto-register", justify="center")

    for row in rows:
        table.add_row(
            row["key"],
            row["namespace_path"] or "(root)",
            row["file"],
            "yes" if row["auto_register"] else "no",
        )

    Console().print(table)


@cli.command("find")
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.argument("key")
@common_options
def find_cmd(
    root: str,
    key: str,
    dirs: tuple[str, ...],
    namespaces: tuple[str, ...],
    separator: str,
    verbose: bool,
    quiet: bool,
) -> None:
    """Find the source file for component KEY."""
    _configure_logging(verbose, quiet)
    container = _build_container(root, dirs, namespaces, separator)

    try:
        component = container.find_component(key)
    except HyphaeError as e:
        raise click.ClickException(str(e))

    if component is None:
        raise click.ClickException(f"No component found for '{key}'")

    if quiet:
        return

    row = _component_row(component, container.root)
    click.echo(row["file"])
    click.echo(f"namespace: {row['namespace_path'] or '(root)'}")


if __name__ == "__main__":
    cli()
