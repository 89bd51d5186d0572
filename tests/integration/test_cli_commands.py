"""CLI command tests for inspecting, validating, and rewriting documents."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from syml.cli import app


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_sections_command_lists_names_and_offsets(
    tmp_path: Path, contact_home_text: str
) -> None:
    document_path = _write(tmp_path / "people.syml", contact_home_text)

    result = CliRunner().invoke(app, ["sections", str(document_path)])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        f"Contact (offset {contact_home_text.index('name:')})",
        f"Home (offset {contact_home_text.index('address:')})",
    ]


def test_validate_command_reports_section_count(tmp_path: Path, contact_home_text: str) -> None:
    document_path = _write(tmp_path / "people.syml", contact_home_text)

    result = CliRunner().invoke(app, ["validate", str(document_path)])

    assert result.exit_code == 0
    assert "Valid: 2 section(s)." in result.output


def test_validate_command_reports_broken_section(tmp_path: Path) -> None:
    document_path = _write(tmp_path / "broken.syml", "[Good]\nx: 1\n\n[Broken]\nx: [oops\n")

    result = CliRunner().invoke(app, ["validate", str(document_path)])

    assert result.exit_code == 1
    assert "validate failed in section `Broken`" in result.output


def test_sections_command_reports_missing_document(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["sections", str(tmp_path / "missing.syml")])

    assert result.exit_code == 1
    assert "sections failed at stage `read`" in result.output
    assert "Hint: Check the document path and rerun." in result.output


def test_show_command_prints_raw_body_and_json(tmp_path: Path, contact_home_text: str) -> None:
    document_path = _write(tmp_path / "people.syml", contact_home_text)
    runner = CliRunner()

    raw = runner.invoke(app, ["show", str(document_path), "Home"])
    decoded = runner.invoke(app, ["show", str(document_path), "Contact", "--json"])
    missing = runner.invoke(app, ["show", str(document_path), "Nope"])

    assert raw.exit_code == 0
    assert raw.output == "address: Musterstraße 12\ncity: Munich\n"
    assert decoded.exit_code == 0
    assert json.loads(decoded.output) == {"name": "Max Mustermann", "age": 18, "locale": "GERMAN"}
    assert missing.exit_code == 1
    assert "show failed: Section 'Nope' is not present in the document." in missing.output


def test_format_command_prints_and_rewrites(tmp_path: Path) -> None:
    document_path = _write(tmp_path / "loose.syml", "[A]\nx: 1\n\n\n\n[B]\ny: 2\n\n")
    runner = CliRunner()

    printed = runner.invoke(app, ["format", str(document_path)])
    written = runner.invoke(app, ["format", str(document_path), "--write"])

    assert printed.exit_code == 0
    assert printed.output == "[A]\nx: 1\n\n[B]\ny: 2\n"
    assert written.exit_code == 0
    assert f"Formatted: {document_path}" in written.output
    assert document_path.read_text(encoding="utf-8") == "[A]\nx: 1\n\n[B]\ny: 2"


def test_demo_command_creates_commented_document(tmp_path: Path) -> None:
    document_path = tmp_path / "Serialized.syml"
    runner = CliRunner()

    first = runner.invoke(app, ["demo", str(document_path)])
    first_text = document_path.read_text(encoding="utf-8")
    second = runner.invoke(app, ["demo", str(document_path)])

    assert first.exit_code == 0
    assert "[Contact] Name: Max Mustermann Age: 18 Locale: GERMAN" in first.output
    assert "[Home] Address: Musterstraße 12 City: Munich" in first.output
    assert first_text.startswith("[Contact]\n# Name of the contact\nname: Max Mustermann\n")
    assert "\n\n[Home]\naddress: Musterstraße 12\ncity: Munich" in first_text
    assert second.exit_code == 0
    assert document_path.read_text(encoding="utf-8") == first_text


def test_demo_command_applies_config_naming_convention(tmp_path: Path) -> None:
    config_path = _write(tmp_path / "syml.yml", "naming_convention: pascal\nemit_comments: no\n")
    document_path = tmp_path / "pascal.syml"

    result = CliRunner().invoke(app, ["demo", str(document_path), "--config", str(config_path)])

    assert result.exit_code == 0
    text = document_path.read_text(encoding="utf-8")
    assert "Age: 18" in text
    assert "#" not in text


def test_command_reports_missing_config_file(tmp_path: Path, contact_home_text: str) -> None:
    document_path = _write(tmp_path / "people.syml", contact_home_text)

    result = CliRunner().invoke(
        app, ["validate", str(document_path), "--config", str(tmp_path / "nope.yml")]
    )

    assert result.exit_code == 1
    assert "validate failed at stage `config`" in result.output
    assert "Config file not found" in result.output
