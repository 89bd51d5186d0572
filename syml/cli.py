"""Command-line interface for syml.

Responsibilities:
- Expose user-facing commands to inspect, validate, and normalize documents.
- Run the contact/home example against a document file.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_section_list, exit_with_command_error
from .config import ConfigLoader, SymlConfig
from .demo import run_demo
from .document import SymlDocument
from .errors import CommandError
from .io.storage import read_document_text, write_document_text
from .telemetry.logger import configure_logging

app = typer.Typer(
    name="syml",
    no_args_is_help=True,
    help="Inspect and rewrite multi-section YAML documents.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to a YAML codec configuration file."),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Print debug events for document operations.")
    ] = False,
) -> None:
    """Inspect and rewrite multi-section YAML documents."""

    if verbose:
        configure_logging(level="DEBUG")


def _load_config(config_path: Path | None) -> SymlConfig | None:
    """Load a YAML config file when requested and map failures to command errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _load_document(path: Path, config: SymlConfig | None) -> SymlDocument:
    """Read and load the document at `path`."""

    try:
        text = read_document_text(path)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="read",
            detail=f"Document not found: `{path}`.",
            hint="Check the document path and rerun.",
        ) from exc

    document = SymlDocument(config)
    document.load(text)
    return document


@app.command("sections")
def sections_command(
    document_path: Annotated[Path, typer.Argument(help="Path to a .syml document.")],
    config: ConfigOption = None,
) -> None:
    """List section names and body offsets in document order."""

    try:
        document = _load_document(document_path, _load_config(config))
    except Exception as exc:
        exit_with_command_error("sections", exc)

    echo_section_list(document.sections)


@app.command("validate")
def validate_command(
    document_path: Annotated[Path, typer.Argument(help="Path to a .syml document.")],
    config: ConfigOption = None,
) -> None:
    """Check that every section body is valid YAML."""

    try:
        document = _load_document(document_path, _load_config(config))
        document.validate()
    except Exception as exc:
        exit_with_command_error("validate", exc)

    typer.echo(f"Valid: {len(document)} section(s).")


@app.command("show")
def show_command(
    document_path: Annotated[Path, typer.Argument(help="Path to a .syml document.")],
    section: Annotated[str, typer.Argument(help="Section name to print.")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the decoded section as JSON.")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Print one section body, raw or decoded as JSON."""

    try:
        document = _load_document(document_path, _load_config(config))
        if as_json:
            output = json.dumps(
                document.get_raw(section), ensure_ascii=False, indent=2, default=str
            )
        else:
            output = document.section(section).content.strip()
    except Exception as exc:
        exit_with_command_error("show", exc)

    typer.echo(output)


@app.command("format")
def format_command(
    document_path: Annotated[Path, typer.Argument(help="Path to a .syml document.")],
    write: Annotated[
        bool, typer.Option("--write", help="Rewrite the document in place.")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Recompose the document with one blank line between sections."""

    try:
        document = _load_document(document_path, _load_config(config))
        output = document.dump()
        if write:
            write_document_text(document_path, output)
    except Exception as exc:
        exit_with_command_error("format", exc)

    if write:
        typer.echo(f"Formatted: {document_path}")
    else:
        typer.echo(output)


@app.command("demo")
def demo_command(
    document_path: Annotated[Path, typer.Argument(help="Document file to create or update.")],
    config: ConfigOption = None,
) -> None:
    """Store the example Contact and Home sections into a document file."""

    try:
        contact, home = run_demo(document_path, SymlDocument(_load_config(config)))
    except Exception as exc:
        exit_with_command_error("demo", exc)

    typer.echo(str(contact))
    typer.echo(str(home))
    typer.echo(f"Written: {document_path}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
