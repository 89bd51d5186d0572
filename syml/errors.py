"""Domain exceptions for document loading, section codecs, and CLI diagnostics."""

from __future__ import annotations


class SymlError(RuntimeError):
    """Base class for every error raised by the syml package."""


class SectionError(SymlError):
    """Raised when a section body cannot be decoded, validated, or encoded."""

    def __init__(
        self,
        *,
        section_name: str,
        section_index: int,
        detail: str,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize a section-scoped error wrapping the underlying cause."""

        super().__init__(detail)
        self.section_name = section_name
        self.section_index = section_index
        self.detail = detail
        self.cause = cause


class SectionNotFoundError(SymlError, KeyError):
    """Raised when a requested section is not present in the document."""

    def __init__(self, *, section_name: str) -> None:
        """Initialize a lookup error for the missing section name."""

        super().__init__(f"Section '{section_name}' is not present in the document.")
        self.section_name = section_name

    def __str__(self) -> str:
        return str(self.args[0])


class MissingSectionTagError(SymlError, TypeError):
    """Raised when a type without a document-section tag is used by name-less access."""

    def __init__(self, *, type_name: str) -> None:
        """Initialize an error for the untagged type."""

        super().__init__(
            f"Type `{type_name}` has no document-section tag; "
            "decorate it with `@document_section(...)` or pass an explicit name."
        )
        self.type_name = type_name


class InvalidSectionNameError(SymlError, ValueError):
    """Raised when a section name could not survive a header line round-trip."""

    def __init__(self, *, section_name: str, detail: str) -> None:
        """Initialize an error for an unusable section name."""

        super().__init__(f"Invalid section name {section_name!r}: {detail}")
        self.section_name = section_name
        self.detail = detail


class DocumentFormatError(SymlError, ValueError):
    """Raised when non-empty document text does not follow the header format."""

    def __init__(self, *, detail: str) -> None:
        """Initialize a structural document error."""

        super().__init__(detail)
        self.detail = detail


class CommandError(SymlError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
