"""CLI output and error rendering helpers."""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError, FormatterInputError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        hint = exc.hint
    elif isinstance(exc, FormatterInputError):
        typer.secho(
            f"{command_name} failed in `{exc.operation}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        hint = exc.hint
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
        hint = None
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc
