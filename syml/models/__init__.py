"""Shared typed data models for syml.

This package contains the section records exchanged between the splitter,
the codec, and the document to avoid circular imports.
"""

from .datatypes import UNSET_OFFSET, Section, SectionHeader

__all__ = [
    "Section",
    "SectionHeader",
    "UNSET_OFFSET",
]
