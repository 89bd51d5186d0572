"""Per-section decode/encode operations with uniform error wrapping.

Responsibilities:
- Validate and decode `Section` bodies into generic or typed values.
- Encode values into new `Section` records through the comment-aware encoder.
- Wrap every underlying failure exactly once into `SectionError`.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from ruamel.yaml.error import YAMLError

from ..config import SymlConfig
from ..errors import SectionError
from ..models.datatypes import UNSET_OFFSET, Section
from ..naming import NamingConvention
from .comments import CommentVisitor
from .decoder import ConversionError, SectionDecoder
from .encoder import FieldVisitor, SectionEncoder

_T = TypeVar("_T")

_DECODE_FAILURES = (YAMLError, ConversionError, TypeError, ValueError)
_ENCODE_FAILURES = (YAMLError, TypeError, ValueError, RecursionError)


class SectionCodec:
    """Decode and encode section bodies according to one `SymlConfig`."""

    def __init__(
        self,
        config: SymlConfig | None = None,
        *,
        naming_convention: NamingConvention | None = None,
        visitors: Sequence[FieldVisitor] | None = None,
    ) -> None:
        """Initialize decoder and encoder.

        Args:
            config: Codec configuration, defaulting to `SymlConfig()`.
            naming_convention: Optional policy overriding `config.naming_convention`.
            visitors: Optional field-visitor chain overriding the default
                comment visitor (or none when `config.emit_comments` is false).
        """

        self.config = config if config is not None else SymlConfig()
        self.config.validate()
        policy = naming_convention or self.config.naming_policy()
        if visitors is None:
            visitors = (CommentVisitor(),) if self.config.emit_comments else ()
        self.decoder = SectionDecoder(
            naming_convention=policy,
            ignore_unknown_fields=self.config.ignore_unknown_fields,
        )
        self.encoder = SectionEncoder(
            naming_convention=policy,
            visitors=visitors,
            indent=self.config.indent,
            line_width=self.config.line_width,
        )

    def validate(self, section: Section) -> None:
        """Ensure the section body parses as YAML."""

        self.parse(section)

    def parse(self, section: Section) -> Any:
        """Decode the section body into a generic tree."""

        try:
            return self.decoder.parse(section.content)
        except _DECODE_FAILURES as exc:
            raise self._wrap(section, "decoding", None, exc) from exc

    def decode(self, section: Section, target_type: type[_T]) -> _T:
        """Decode the section body into `target_type`."""

        try:
            return self.decoder.decode(section.content, target_type)
        except _DECODE_FAILURES as exc:
            raise self._wrap(section, "decoding", target_type, exc) from exc

    def encode(self, name: str, value: Any) -> Section:
        """Encode `value` into a new detached section called `name`."""

        try:
            content = self.encoder.encode(value)
        except _ENCODE_FAILURES as exc:
            raise SectionError(
                section_name=name,
                section_index=UNSET_OFFSET,
                detail=(
                    f"Error occurred while encoding section '{name}'[{UNSET_OFFSET}] "
                    f"from {type(value).__name__}: {exc}"
                ),
                cause=exc,
            ) from exc
        return Section(name=name, content=content, origin_offset=UNSET_OFFSET)

    @staticmethod
    def _wrap(
        section: Section, action: str, target_type: Any, exc: BaseException
    ) -> SectionError:
        target = ""
        if target_type is not None:
            target = f" as {getattr(target_type, '__name__', str(target_type))}"
        return SectionError(
            section_name=section.name,
            section_index=section.origin_offset,
            detail=(
                f"Error occurred while {action} the section "
                f"'{section.name}'[{section.origin_offset}]{target}: {exc}"
            ),
            cause=exc,
        )
