"""Section body decoding into generic trees and typed values.

Responsibilities:
- Parse YAML text into plain Python data via `ruamel.yaml` safe loading.
- Convert plain data into dataclasses, enums, containers, and scalars.
- Map declared field names through the naming-convention policy.

Key types:
- `SectionDecoder`: configured parse + convert entry point.
- `ConversionError`: shape mismatch between parsed data and a requested type.
"""

from __future__ import annotations

import dataclasses
import enum
import types
import typing
from collections.abc import Mapping as MappingABC
from collections.abc import Sequence as SequenceABC
from collections.abc import Set as SetABC
from typing import Any, TypeVar, Union

from ruamel.yaml import YAML

from ..naming import NamingConvention, camel_case

_T = TypeVar("_T")

_MISSING = dataclasses.MISSING


class ConversionError(ValueError):
    """Raised when parsed data does not match the requested type."""

    def __init__(self, path: str, message: str) -> None:
        """Initialize a conversion error located at a dotted data path."""

        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def _type_label(target: Any) -> str:
    """Return a readable label for a type or typing construct."""

    if isinstance(target, type):
        return target.__name__
    return str(target).replace("typing.", "")


class SectionDecoder:
    """Decode YAML section bodies into generic or typed values."""

    def __init__(
        self,
        naming_convention: NamingConvention = camel_case,
        ignore_unknown_fields: bool = True,
    ) -> None:
        """Initialize the decoder with a key policy and unknown-key tolerance."""

        self._naming_convention = naming_convention
        self._ignore_unknown_fields = ignore_unknown_fields
        self._yaml = YAML(typ="safe", pure=True)

    def parse(self, text: str) -> Any:
        """Parse YAML text into a plain tree; empty text yields `None`."""

        if not text.strip():
            return None
        return self._yaml.load(text)

    def decode(self, text: str, target_type: type[_T]) -> _T:
        """Parse YAML text and convert it into `target_type`."""

        return self.convert(self.parse(text), target_type)

    def convert(self, node: Any, target: Any, path: str = "$") -> Any:
        """Convert a parsed node into `target`, raising `ConversionError` on mismatch."""

        if target is Any or target is object:
            return node
        if target is None or target is type(None):
            if node is not None:
                raise ConversionError(path, f"expected null, got {type(node).__name__}")
            return None

        origin = typing.get_origin(target)
        if origin is Union or origin is types.UnionType:
            return self._convert_union(node, typing.get_args(target), path)
        if origin is typing.Literal:
            allowed = typing.get_args(target)
            if node not in allowed:
                raise ConversionError(path, f"expected one of {list(allowed)!r}, got {node!r}")
            return node
        if origin is not None:
            return self._convert_generic(node, origin, typing.get_args(target), path)

        if dataclasses.is_dataclass(target) and isinstance(target, type):
            return self._convert_dataclass(node, target, path)
        if isinstance(target, type) and issubclass(target, enum.Enum):
            return self._convert_enum(node, target, path)
        if target is bool:
            if not isinstance(node, bool):
                raise ConversionError(path, f"expected bool, got {type(node).__name__}")
            return node
        if target is int:
            if isinstance(node, bool) or not isinstance(node, int):
                raise ConversionError(path, f"expected int, got {type(node).__name__}")
            return node
        if target is float:
            if isinstance(node, bool) or not isinstance(node, (int, float)):
                raise ConversionError(path, f"expected float, got {type(node).__name__}")
            return float(node)
        if target is str:
            if not isinstance(node, str):
                raise ConversionError(path, f"expected str, got {type(node).__name__}")
            return node
        if target in (list, tuple, set, frozenset, dict):
            return self._convert_generic(node, target, (), path)
        if isinstance(target, type):
            if not isinstance(node, target):
                raise ConversionError(
                    path, f"expected {target.__name__}, got {type(node).__name__}"
                )
            return node
        raise ConversionError(path, f"unsupported target type {_type_label(target)}")

    def _convert_union(self, node: Any, options: tuple[Any, ...], path: str) -> Any:
        """Return the first union alternative that accepts the node."""

        if node is None and type(None) in options:
            return None
        failures: list[str] = []
        for option in options:
            if option is type(None):
                continue
            try:
                return self.convert(node, option, path)
            except ConversionError as exc:
                failures.append(exc.message)
        raise ConversionError(path, "no union alternative matched (" + "; ".join(failures) + ")")

    def _convert_generic(
        self, node: Any, origin: Any, args: tuple[Any, ...], path: str
    ) -> Any:
        """Convert parameterized containers such as `list[int]` or `dict[str, Home]`."""

        if isinstance(origin, type) and issubclass(origin, MappingABC):
            if not isinstance(node, MappingABC):
                raise ConversionError(path, f"expected mapping, got {type(node).__name__}")
            key_type, value_type = args if len(args) == 2 else (Any, Any)
            return {
                self.convert(key, key_type, f"{path}.{key}"): self.convert(
                    value, value_type, f"{path}.{key}"
                )
                for key, value in node.items()
            }

        if isinstance(node, (str, bytes)) or not isinstance(node, SequenceABC):
            raise ConversionError(path, f"expected sequence, got {type(node).__name__}")

        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return tuple(
                    self.convert(item, args[0], f"{path}[{index}]")
                    for index, item in enumerate(node)
                )
            if args:
                if len(args) != len(node):
                    raise ConversionError(
                        path, f"expected {len(args)} item(s), got {len(node)}"
                    )
                return tuple(
                    self.convert(item, item_type, f"{path}[{index}]")
                    for index, (item, item_type) in enumerate(zip(node, args))
                )
            return tuple(node)

        item_type = args[0] if args else Any
        items = [
            self.convert(item, item_type, f"{path}[{index}]") for index, item in enumerate(node)
        ]
        if origin is set or origin is SetABC:
            return set(items)
        if origin is frozenset:
            return frozenset(items)
        return items

    def _convert_dataclass(self, node: Any, target: type, path: str) -> Any:
        """Build a dataclass instance from a mapping keyed by the naming policy."""

        if node is None:
            node = {}
        if not isinstance(node, MappingABC):
            raise ConversionError(
                path, f"expected mapping for {target.__name__}, got {type(node).__name__}"
            )

        hints = typing.get_type_hints(target)
        kwargs: dict[str, Any] = {}
        known_keys: set[str] = set()
        missing: list[str] = []
        for field in dataclasses.fields(target):
            if not field.init:
                continue
            key = self._naming_convention(field.name)
            known_keys.add(key)
            if key in node:
                kwargs[field.name] = self.convert(
                    node[key], hints.get(field.name, Any), f"{path}.{key}"
                )
            elif field.default is _MISSING and field.default_factory is _MISSING:
                missing.append(key)

        if missing:
            raise ConversionError(
                path, f"missing required field(s) for {target.__name__}: {', '.join(missing)}"
            )
        if not self._ignore_unknown_fields:
            unknown = sorted(str(key) for key in node if key not in known_keys)
            if unknown:
                raise ConversionError(
                    path, f"unknown field(s) for {target.__name__}: {', '.join(unknown)}"
                )
        return target(**kwargs)

    @staticmethod
    def _convert_enum(node: Any, target: type[enum.Enum], path: str) -> enum.Enum:
        """Resolve an enum member by name first, then by value."""

        if isinstance(node, str) and node in target.__members__:
            return target[node]
        try:
            return target(node)
        except ValueError:
            names = ", ".join(target.__members__)
            raise ConversionError(
                path, f"{node!r} is not a member of {target.__name__} ({names})"
            ) from None
