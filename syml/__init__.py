"""Top-level package for syml.

This package reads and writes multi-section documents: `[Name]` header lines
each followed by a YAML body that decodes into a typed dataclass. Field
descriptions are re-emitted as comments every time a section is stored. The
main entry point is `SymlDocument`.
"""

from loguru import logger

from .codec import SectionCodec
from .config import ConfigLoader, SymlConfig
from .document import SymlDocument
from .errors import (
    DocumentFormatError,
    InvalidSectionNameError,
    MissingSectionTagError,
    SectionError,
    SectionNotFoundError,
    SymlError,
)
from .metadata import described, document_section, field_description, has_section_tag, section_name_of
from .models import Section

logger.disable(__name__)

__all__ = [
    "ConfigLoader",
    "DocumentFormatError",
    "InvalidSectionNameError",
    "MissingSectionTagError",
    "Section",
    "SectionCodec",
    "SectionError",
    "SectionNotFoundError",
    "SymlConfig",
    "SymlDocument",
    "SymlError",
    "__version__",
    "described",
    "document_section",
    "field_description",
    "has_section_tag",
    "section_name_of",
]

__version__ = "0.1.0"
