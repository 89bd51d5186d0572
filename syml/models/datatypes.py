"""Core datatypes shared across syml modules.

Responsibilities:
- Represent the immutable section records held by a document.
- Represent transient header matches produced while splitting document text.

Key types:
- `Section`: one named region of a document and its raw YAML body.
- `SectionHeader`: one `[Name]` header line located in document text.
"""

from __future__ import annotations

from dataclasses import dataclass

UNSET_OFFSET = -1


@dataclass(frozen=True, slots=True)
class SectionHeader:
    """A header line located while scanning document text.

    Attributes:
        name: Section name captured between the brackets.
        start: Inclusive offset of the header line in the document text.
        end: Offset immediately after the header line, where the body begins.
    """

    name: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Section:
    """A named document region holding raw YAML text.

    Attributes:
        name: Section name used in the `[Name]` header.
        content: Raw YAML body without the header line.
        origin_offset: Offset where the body began in the source text, or
            `UNSET_OFFSET` for sections built in memory.
    """

    name: str
    content: str
    origin_offset: int = UNSET_OFFSET

    @property
    def serialized(self) -> str:
        """Return the header line plus body, trimmed for document recomposition."""

        return f"[{self.name}]\n{self.content}".strip()
