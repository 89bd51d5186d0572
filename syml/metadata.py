"""Section tags and per-field description metadata.

Responsibilities:
- Bind a document-section name to a type (`@document_section("Contact")`).
- Attach human-readable descriptions to dataclass fields (`described(...)`).
- Resolve both at encode/lookup time without inspecting instances.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Mapping, TypeVar

from .errors import InvalidSectionNameError, MissingSectionTagError

SECTION_NAME_ATTRIBUTE = "__syml_section__"
FIELD_DESCRIPTIONS_ATTRIBUTE = "__field_descriptions__"
DESCRIPTION_METADATA_KEY = "description"

_T = TypeVar("_T")


def validate_section_name(name: str) -> str:
    """Return `name` when it can be written as a header line.

    Raises:
        InvalidSectionNameError: If the name is blank or contains `]` or a line break.
    """

    if not isinstance(name, str) or not name.strip():
        raise InvalidSectionNameError(section_name=str(name), detail="name must be non-empty.")
    if "]" in name:
        raise InvalidSectionNameError(section_name=name, detail="name must not contain `]`.")
    if "\n" in name or "\r" in name:
        raise InvalidSectionNameError(section_name=name, detail="name must be a single line.")
    return name


def document_section(name: str) -> Callable[[type[_T]], type[_T]]:
    """Class decorator binding a document-section name to the decorated type."""

    section_name = validate_section_name(name)

    def decorator(cls: type[_T]) -> type[_T]:
        setattr(cls, SECTION_NAME_ATTRIBUTE, section_name)
        return cls

    return decorator


def has_section_tag(section_type: type) -> bool:
    """Return whether `section_type` carries a document-section tag."""

    return isinstance(getattr(section_type, SECTION_NAME_ATTRIBUTE, None), str)


def section_name_of(section_type: type) -> str:
    """Return the document-section name bound to `section_type`.

    Raises:
        MissingSectionTagError: If the type was never tagged.
    """

    name = getattr(section_type, SECTION_NAME_ATTRIBUTE, None)
    if not isinstance(name, str):
        raise MissingSectionTagError(type_name=getattr(section_type, "__name__", repr(section_type)))
    return name


def described(
    description: str,
    *,
    metadata: Mapping[str, Any] | None = None,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field carrying a description comment.

    Example:
        `age: int = described("Age of the contact", default=0)`
    """

    merged = dict(metadata or {})
    merged[DESCRIPTION_METADATA_KEY] = description
    return dataclasses.field(metadata=merged, **field_kwargs)


def field_description(owner: type, field: dataclasses.Field) -> str | None:
    """Return the description attached to `field`, if any.

    Field metadata takes precedence over the owner's `__field_descriptions__` table.
    """

    description = field.metadata.get(DESCRIPTION_METADATA_KEY)
    if description is None:
        table = getattr(owner, FIELD_DESCRIPTIONS_ATTRIBUTE, None)
        if isinstance(table, Mapping):
            description = table.get(field.name)
    if description is None:
        return None
    return str(description)
