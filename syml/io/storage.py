"""Document file storage helpers.

Responsibilities:
- Read and write `.syml` document text with a fixed UTF-8 encoding.
- Create parent directories on write so fresh paths can be saved directly.
"""

from __future__ import annotations

from pathlib import Path


def read_document_text(path: Path) -> str:
    """Load document text from disk."""

    return path.read_text(encoding="utf-8")


def write_document_text(path: Path, text: str) -> Path:
    """Save document text and return final path."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
