"""Section body encoding with a pluggable field-visitor chain.

Responsibilities:
- Convert dataclasses, enums, containers, and scalars into a `ruamel.yaml`
  round-trip tree.
- Call every registered field visitor at each dataclass field boundary so
  visitors can decorate the emitted mapping (for example with comments).
- Dump the tree with the round-trip emitter.

Key types:
- `SectionEncoder`: configured encode entry point.
- `FieldEmission`: per-field record handed to visitors.
- `FieldVisitor`: callable protocol for visitors.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from io import StringIO
from typing import Any, Callable

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from ..naming import NamingConvention, camel_case

_SCALAR_TYPES = (str, int, float, bool, datetime.date, datetime.datetime)
_SEQUENCE_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True, slots=True)
class FieldEmission:
    """One dataclass field placed into an emitted mapping.

    Attributes:
        owner: Dataclass type declaring the field.
        field: Declared dataclass field.
        key: Key written to the mapping after the naming policy.
        value: Tree value stored under `key`.
        mapping: Mapping receiving the entry.
        column: Column at which the mapping's keys are emitted.
    """

    owner: type
    field: dataclasses.Field
    key: str
    value: Any
    mapping: CommentedMap
    column: int


FieldVisitor = Callable[[FieldEmission], None]


class SectionEncoder:
    """Encode values into YAML text, running field visitors along the way."""

    def __init__(
        self,
        naming_convention: NamingConvention = camel_case,
        visitors: Sequence[FieldVisitor] = (),
        indent: int = 2,
        line_width: int | None = None,
    ) -> None:
        """Initialize the encoder.

        Args:
            naming_convention: Policy mapping field names to YAML keys.
            visitors: Ordered field visitors called after each field is placed.
            indent: Mapping indentation width.
            line_width: Optional preferred emitter line width.
        """

        self._naming_convention = naming_convention
        self._visitors = tuple(visitors)
        self._indent = indent
        self._sequence_indent = max(indent, 2)
        self._line_width = line_width

    @property
    def indent(self) -> int:
        return self._indent

    def encode(self, value: Any) -> str:
        """Return YAML text for `value`."""

        tree = self.to_tree(value)
        stream = StringIO()
        self._make_yaml().dump(tree, stream)
        return stream.getvalue()

    def to_tree(self, value: Any) -> Any:
        """Convert `value` into a round-trip tree without dumping it."""

        return self._build(value, column=0, active=set())

    def _make_yaml(self) -> YAML:
        yml = YAML()
        yml.default_flow_style = False
        # Dashes sit at the parent key column, so a root sequence starts at column 0.
        yml.indent(mapping=self._indent, sequence=self._sequence_indent, offset=0)
        if self._line_width is not None:
            yml.width = self._line_width
        return yml

    def _child_column(self, value: Any, column: int) -> int:
        """Return where a mapping value's keys or dashes start for keys at `column`."""

        if isinstance(value, _SEQUENCE_TYPES):
            return column
        return column + self._indent

    def _build(self, value: Any, column: int, active: set[int]) -> Any:
        if isinstance(value, enum.Enum):
            return value.name
        if value is None or isinstance(value, _SCALAR_TYPES):
            return value

        marker = id(value)
        if marker in active:
            raise ValueError(
                f"Cannot encode recursive structure through {type(value).__name__}."
            )
        active.add(marker)
        try:
            if dataclasses.is_dataclass(value) and not isinstance(value, type):
                return self._build_dataclass(value, column, active)
            if isinstance(value, Mapping):
                mapping = CommentedMap()
                for key, item in value.items():
                    mapping[self._build(key, column, active)] = self._build(
                        item, self._child_column(item, column), active
                    )
                return mapping
            if isinstance(value, _SEQUENCE_TYPES):
                sequence = CommentedSeq()
                for item in value:
                    sequence.append(self._build(item, column + self._sequence_indent, active))
                return sequence
        finally:
            active.discard(marker)

        raise TypeError(f"Cannot encode value of type `{type(value).__name__}` as YAML.")

    def _build_dataclass(self, value: Any, column: int, active: set[int]) -> CommentedMap:
        owner = type(value)
        mapping = CommentedMap()
        field_by_key: dict[str, str] = {}
        for field in dataclasses.fields(value):
            key = self._naming_convention(field.name)
            if key in field_by_key:
                raise ValueError(
                    f"Fields `{field_by_key[key]}` and `{field.name}` of {owner.__name__} "
                    f"both map to key `{key}`."
                )
            field_by_key[key] = field.name
            item = getattr(value, field.name)
            tree_value = self._build(item, self._child_column(item, column), active)
            mapping[key] = tree_value
            emission = FieldEmission(
                owner=owner,
                field=field,
                key=key,
                value=tree_value,
                mapping=mapping,
                column=column,
            )
            for visitor in self._visitors:
                visitor(emission)
        return mapping
