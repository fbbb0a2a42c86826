"""Typer CLI entrypoint for git-smart-ps1."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .app import PromptParts, build_prompt, configure_logging, gather
from .config import Settings, load_settings
from .exceptions import PromptError
from .models import Theme

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Print a two-line shell prompt with git branch and status.",
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-smart-ps1 {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 instead of using a placeholder when the user or directory cannot be resolved.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Print the prompt without escape sequences."),
    no_discover: bool = typer.Option(
        False,
        "--no-discover",
        help="Only report git status when the current directory is the repository root.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-smart-ps1 version and exit.",
    ),
) -> None:
    """Print the prompt when no command is given.

    Typical use: PS1='$(git-smart-ps1)' in your shell rc file.
    """

    _ = version  # handled via callback
    configure_logging(verbose)
    try:
        settings = load_settings()
    except PromptError as err:
        _fail(str(err))
    settings = replace(
        settings,
        strict=settings.strict or strict,
        discover=not no_discover,
        theme=Theme.plain() if no_color else settings.theme,
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    if ctx.invoked_subcommand is not None:
        return
    try:
        prompt = build_prompt(settings)
    except PromptError as err:
        _fail(str(err))
    # Shells capture the prompt through a pipe; keep the escape codes anyway.
    typer.echo(prompt, nl=False, color=True)


@app.command(help="Show how each part of the prompt was resolved")
def explain(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Output JSON for scripting."),
) -> None:
    settings: Settings = ctx.obj["settings"]
    try:
        parts = gather(settings)
    except PromptError as err:
        _fail(str(err))
    data = _parts_to_dict(parts)
    if as_json:
        typer.echo(json.dumps(data, indent=2))
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")
    for key, value in data.items():
        if key == "entries":
            continue
        table.add_row(key, "" if value is None else str(value))
    console.print(table)
    for entry in data["entries"]:
        console.print(f"  • {entry['code']} {entry['path']}", markup=False)


def _parts_to_dict(parts: PromptParts) -> dict:
    status = parts.status
    return {
        "user": parts.identity.name,
        "current_dir": parts.location.current_dir,
        "home_dir": parts.location.home_dir,
        "display_dir": parts.location.display_dir,
        "repo_root": status.root if status else None,
        "branch": status.branch_name if status else None,
        "remote": status.is_remote if status else None,
        "dirty": status.is_dirty if status else None,
        "entries": [
            {"code": entry.code, "path": entry.path}
            for entry in (status.entries if status else ())
        ],
    }


def _fail(message: str, code: int = 1) -> NoReturn:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
