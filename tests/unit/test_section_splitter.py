"""Unit tests for header-based section splitting."""

from __future__ import annotations

import pytest

from syml.errors import DocumentFormatError
from syml.io.section_splitter import SectionSplitter


def test_section_splitter_returns_empty_for_blank_text() -> None:
    splitter = SectionSplitter()
    assert splitter.split("") == []
    assert splitter.split(" \n\t ") == []


def test_section_splitter_trims_all_but_last_body() -> None:
    """Earlier bodies are trimmed while the last body keeps its trailing text."""

    text = "[A]\nx: 1\n\n[B]\ny: 2\n"

    sections = SectionSplitter().split(text)

    assert [section.name for section in sections] == ["A", "B"]
    assert [section.content for section in sections] == ["x: 1", "y: 2\n"]


def test_section_splitter_records_body_offsets() -> None:
    text = "[A]\nx: 1\n\n[B]\ny: 2\n"

    sections = SectionSplitter().split(text)

    assert [section.origin_offset for section in sections] == [
        text.index("x: 1"),
        text.index("y: 2"),
    ]


def test_section_splitter_finds_header_spans() -> None:
    text = "[First]  \r\nbody\n[Second]\n"

    headers = SectionSplitter().find_headers(text)

    assert [(header.name, header.start, header.end) for header in headers] == [
        ("First", 0, len("[First]  \r\n")),
        ("Second", text.index("[Second]"), len(text)),
    ]


def test_section_splitter_keeps_duplicate_names_in_text_order() -> None:
    sections = SectionSplitter().split("[A]\nx: 1\n\n[A]\nx: 2\n")

    assert [(section.name, section.content) for section in sections] == [
        ("A", "x: 1"),
        ("A", "x: 2\n"),
    ]


def test_section_splitter_ignores_flow_sequences_inside_bodies() -> None:
    text = "[Tags]\nvalues: [a, b]\nnested: [[1, 2], [3]]\n"

    sections = SectionSplitter().split(text)

    assert len(sections) == 1
    assert sections[0].content == "values: [a, b]\nnested: [[1, 2], [3]]\n"


def test_section_splitter_ignores_text_before_first_header() -> None:
    sections = SectionSplitter().split("preamble: true\n[A]\nx: 1\n")

    assert [(section.name, section.content) for section in sections] == [("A", "x: 1\n")]


def test_section_splitter_rejects_text_without_headers() -> None:
    with pytest.raises(DocumentFormatError, match="no `\\[Section\\]` header"):
        SectionSplitter().split("x: 1\ny: 2\n")


def test_section_splitter_requires_line_break_after_header() -> None:
    with pytest.raises(DocumentFormatError):
        SectionSplitter().split("[A]")


def test_section_splitter_skips_blank_lines_after_headers() -> None:
    """Blank lines under a header are not part of the body or its offset."""

    text = "[A]\n\n  \nx: 1\n\n[B]\n\n\ny: 2\n"

    sections = SectionSplitter().split(text)

    assert [(section.name, section.content) for section in sections] == [
        ("A", "x: 1"),
        ("B", "y: 2\n"),
    ]
    assert [section.origin_offset for section in sections] == [
        text.index("x: 1"),
        text.index("y: 2"),
    ]


def test_section_splitter_keeps_indentation_of_first_body_line() -> None:
    text = "[A]\n\n  - 1\n  - 2\n"

    sections = SectionSplitter().split(text)

    assert sections[0].content == "  - 1\n  - 2\n"


def test_section_splitter_allows_empty_body_before_next_header() -> None:
    sections = SectionSplitter().split("[A]\n\n[B]\nx: 1\n")

    assert [(section.name, section.content) for section in sections] == [
        ("A", ""),
        ("B", "x: 1\n"),
    ]
