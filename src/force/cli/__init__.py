"""
FORCE CLI.

Commands:

- check: parse schema files and report the first error
- show: print each category's fields as a table
- dump: print the merged Force as JSON
- tokens: print the token stream of one file
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from force.cli.utils import configure_logging, report_error, resolve_sources, version_callback
from force.core import ir
from force.core.errors import ForceError
from force.core.lexer import tokenize
from force.core.parser import load_forces, merge_forces, read_source

app = typer.Typer(
    help="FORCE schema tools: parse, inspect and dump .force files.",
    no_args_is_help=True,
)

console = Console()

FilesArg = Annotated[
    list[Path] | None,
    typer.Argument(help="Schema files (default: sources listed in force.toml)"),
]

ManifestOpt = Annotated[
    Path | None,
    typer.Option("--manifest", "-m", help="Path to force.toml (default: search upward from cwd)"),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """FORCE schema tools."""
    configure_logging(verbose)


def _load(files: list[Path] | None, manifest: Path | None) -> dict[Path, ir.Force]:
    sources = resolve_sources(files, manifest)
    try:
        return load_forces(sources)
    except ForceError as e:
        report_error(e)
        raise typer.Exit(code=1) from e


@app.command("check")
def check_command(files: FilesArg = None, manifest: ManifestOpt = None) -> None:
    """Parse schema files and report the first error."""
    forces = _load(files, manifest)
    for path, force in forces.items():
        console.print(
            f"[green]OK[/green] {escape(str(path))}: {len(force.categories)} category(ies)",
            soft_wrap=True,
        )


@app.command("show")
def show_command(files: FilesArg = None, manifest: ManifestOpt = None) -> None:
    """Print every category with its fields."""
    force = merge_forces(_load(files, manifest).values())
    if not force.categories:
        console.print("[dim]No categories declared.[/dim]")
        return

    for category in force.categories.values():
        table = Table(title=category.name)
        table.add_column("Field", style="cyan")
        table.add_column("Type")
        for f in category.fields:
            table.add_row(f.name, escape(f.datatype.describe()))
        console.print(table)

    console.print(f"\n[dim]{len(force.categories)} category(ies)[/dim]")


@app.command("dump")
def dump_command(
    files: FilesArg = None,
    manifest: ManifestOpt = None,
    indent: Annotated[int, typer.Option("--indent", help="JSON indentation")] = 2,
) -> None:
    """Print the merged Force as JSON."""
    force = merge_forces(_load(files, manifest).values())
    typer.echo(json.dumps(force.to_json_dict(), indent=indent, ensure_ascii=False))


@app.command("tokens")
def tokens_command(
    file: Annotated[Path, typer.Argument(help="Schema file to tokenize")],
) -> None:
    """Print the token stream of a schema file."""
    path = resolve_sources([file])[0]
    try:
        tokens = tokenize(read_source(path), path)
    except ForceError as e:
        report_error(e)
        raise typer.Exit(code=1) from e

    table = Table(title=str(path))
    table.add_column("Pos", justify="right")
    table.add_column("Type")
    table.add_column("Value")
    for token in tokens:
        table.add_row(f"{token.line}:{token.column}", token.type.name, escape(token.value))
    console.print(table)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
