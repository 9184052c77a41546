"""
FORCE CLI Utilities.

Shared helpers used by the CLI commands.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from force._version import get_version
from force.core.errors import ErrorContext, ForceError, extract_snippet
from force.core.manifest import find_manifest, load_manifest

err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"force {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_sources(files: list[Path] | None, manifest: Path | None = None) -> list[Path]:
    """
    Pick the schema files to work on.

    Explicit files win; otherwise the sources of ``manifest`` (or of the
    nearest force.toml) are used. Exits with code 1 when nothing can be resolved.
    """
    if files:
        missing = [f for f in files if not f.exists()]
        if missing:
            for f in missing:
                err_console.print(f"[red]File not found:[/red] {escape(str(f))}")
            raise typer.Exit(code=1)
        return list(files)

    manifest_path = manifest if manifest is not None else find_manifest(Path.cwd())
    if manifest_path is None:
        err_console.print("[red]No files given and no force.toml found[/red]")
        raise typer.Exit(code=1)

    try:
        loaded = load_manifest(manifest_path)
    except ForceError as e:
        report_error(e)
        raise typer.Exit(code=1) from e

    sources = loaded.source_files(manifest_path.parent)
    if not sources:
        err_console.print(
            f"[yellow]force.toml sources matched no files under {escape(str(manifest_path.parent))}[/yellow]"
        )
        raise typer.Exit(code=1)
    return sources


def report_error(error: ForceError) -> None:
    """Print an error, with surrounding source lines when the file is readable."""
    context = error.context
    if context is None:
        err_console.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)
        return

    snippet = context.snippet
    if snippet is None:
        try:
            text = Path(context.file).read_text(encoding="utf-8")
            snippet = extract_snippet(text, context.line)
        except OSError:
            snippet = None

    located = ErrorContext(
        file=context.file,
        line=context.line,
        column=context.column,
        snippet=snippet,
    )
    err_console.print(escape(located.format()), highlight=False, soft_wrap=True)
    err_console.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)
