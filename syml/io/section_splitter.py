"""Header-based section splitting.

Responsibilities:
- Locate `[Name]` header lines in document text.
- Cut the text between headers into `Section` records in text order.
"""

from __future__ import annotations

import re

from ..errors import DocumentFormatError
from ..models.datatypes import Section, SectionHeader


class SectionSplitter:
    """Split raw document text into section records."""

    # Blank lines right after a header belong to the header, not to the body.
    _HEADER_RE = re.compile(
        r"^\[(?P<name>[^\]\r\n]+)\][ \t]*\r?\n(?:[ \t]*\r?\n)*",
        re.MULTILINE,
    )

    def find_headers(self, text: str) -> list[SectionHeader]:
        """Return every header line in text order."""

        return [
            SectionHeader(name=match.group("name"), start=match.start(), end=match.end())
            for match in self._HEADER_RE.finditer(text)
        ]

    def split(self, text: str) -> list[Section]:
        """Split text into sections.

        Bodies of all but the last section are trimmed; the last body runs to
        the end of the text untouched. Text before the first header is ignored.

        Raises:
            DocumentFormatError: If non-blank text contains no header line.
        """

        if not text or not text.strip():
            return []

        headers = self.find_headers(text)
        if not headers:
            raise DocumentFormatError(
                detail="Document text contains no `[Section]` header line."
            )

        sections: list[Section] = []
        for header, next_header in zip(headers, headers[1:]):
            sections.append(
                Section(
                    name=header.name,
                    content=text[header.end : next_header.start].strip(),
                    origin_offset=header.end,
                )
            )

        last_header = headers[-1]
        sections.append(
            Section(
                name=last_header.name,
                content=text[last_header.end :],
                origin_offset=last_header.end,
            )
        )
        return sections
