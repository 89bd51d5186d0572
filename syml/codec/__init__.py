"""Section codec components.

This package holds the YAML decode path, the comment-aware encode path, and
the `SectionCodec` facade the document uses for both.
"""

from .comments import CommentVisitor
from .decoder import ConversionError, SectionDecoder
from .encoder import FieldEmission, FieldVisitor, SectionEncoder
from .section_codec import SectionCodec

__all__ = [
    "CommentVisitor",
    "ConversionError",
    "FieldEmission",
    "FieldVisitor",
    "SectionCodec",
    "SectionDecoder",
    "SectionEncoder",
]
