"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and section listings.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from .errors import CommandError, SectionError
from .models.datatypes import Section


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, SectionError):
        typer.secho(
            f"{command_name} failed in section `{exc.section_name}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_section_list(sections: Mapping[str, Section]) -> None:
    """Print one `<name> (offset <n>)` row per section in document order."""

    for name, section in sections.items():
        typer.echo(f"{name} (offset {section.origin_offset})")
