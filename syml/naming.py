"""Naming-convention policies mapping declared field names to YAML keys.

Each policy is a plain function from a Python field name to the key written
in section bodies. Policies are swappable: pass any callable with the same
shape to `SectionCodec` to override the configured one.
"""

from __future__ import annotations

import re
from typing import Callable

NamingConvention = Callable[[str], str]

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _words(name: str) -> list[str]:
    """Split a snake_case, kebab-case or camelCase identifier into words."""

    spaced = _CAMEL_BOUNDARY_RE.sub("_", name.replace("-", "_"))
    return [word for word in spaced.split("_") if word]


def camel_case(name: str) -> str:
    """Return `name` as camelCase (`home_address` -> `homeAddress`)."""

    words = _words(name)
    if not words:
        return name
    head = words[0].lower()
    return head + "".join(word[:1].upper() + word[1:].lower() for word in words[1:])


def pascal_case(name: str) -> str:
    """Return `name` as PascalCase (`home_address` -> `HomeAddress`)."""

    words = _words(name)
    if not words:
        return name
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def snake_case(name: str) -> str:
    """Return `name` as snake_case (`homeAddress` -> `home_address`)."""

    words = _words(name)
    if not words:
        return name
    return "_".join(word.lower() for word in words)


def kebab_case(name: str) -> str:
    """Return `name` as kebab-case (`home_address` -> `home-address`)."""

    words = _words(name)
    if not words:
        return name
    return "-".join(word.lower() for word in words)


def identity(name: str) -> str:
    """Return `name` unchanged."""

    return name


NAMING_CONVENTIONS: dict[str, NamingConvention] = {
    "camel": camel_case,
    "pascal": pascal_case,
    "snake": snake_case,
    "kebab": kebab_case,
    "none": identity,
}


def resolve_naming_convention(name: str) -> NamingConvention:
    """Return the policy registered under `name`.

    Raises:
        ValueError: If no policy is registered under the normalized name.
    """

    key = name.strip().lower()
    try:
        return NAMING_CONVENTIONS[key]
    except KeyError:
        supported = ", ".join(sorted(NAMING_CONVENTIONS))
        raise ValueError(
            f"Unsupported naming convention `{name}`. Supported values: {supported}."
        ) from None
