"""Input/output components for syml.

This package contains header-based section splitting and the file helpers
used by the command-line tool.
"""

from .section_splitter import SectionSplitter
from .storage import read_document_text, write_document_text

__all__ = ["SectionSplitter", "read_document_text", "write_document_text"]
