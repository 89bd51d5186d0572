"""Unit tests for generic and typed section decoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

import pytest
from ruamel.yaml.error import YAMLError

from syml.codec.decoder import ConversionError, SectionDecoder
from syml.naming import pascal_case


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class Address:
    street: str
    city: str = "Munich"


@dataclass
class Flags:
    verbose: bool = False
    level: int = 1


@dataclass
class Person:
    full_name: str
    age: int = 0
    height: float = 0.0
    active: bool = False
    favorite: Color = Color.RED
    home: Optional[Address] = None
    tags: list[str] = field(default_factory=list)
    scores: dict[str, int] = field(default_factory=dict)
    point: tuple[int, int] = (0, 0)
    extra: Any = None


def test_parse_returns_plain_tree() -> None:
    decoder = SectionDecoder()

    tree = decoder.parse("a: 1\nb:\n  - x\n  - y\n")

    assert tree == {"a": 1, "b": ["x", "y"]}
    assert type(tree) is dict


@pytest.mark.parametrize("text", ["", "  \n", "# only a comment\n"])
def test_parse_empty_body_yields_none(text: str) -> None:
    assert SectionDecoder().parse(text) is None


def test_parse_raises_yaml_error_for_malformed_text() -> None:
    with pytest.raises(YAMLError):
        SectionDecoder().parse("x: [unterminated\n")


def test_decode_builds_nested_dataclasses_with_camel_case_keys() -> None:
    text = """
fullName: Ada
age: 36
height: 170
active: true
favorite: BLUE
home:
  street: Main 1
tags: [math, engines]
scores:
  chess: 3
point: [4, 5]
extra:
  free: form
""".strip()

    person = SectionDecoder().decode(text, Person)

    assert person == Person(
        full_name="Ada",
        age=36,
        height=170.0,
        active=True,
        favorite=Color.BLUE,
        home=Address(street="Main 1", city="Munich"),
        tags=["math", "engines"],
        scores={"chess": 3},
        point=(4, 5),
        extra={"free": "form"},
    )
    assert isinstance(person.height, float)


def test_decode_resolves_enum_by_value_as_fallback() -> None:
    person = SectionDecoder().decode("fullName: Ada\nfavorite: blue\n", Person)

    assert person.favorite is Color.BLUE


def test_decode_uses_configured_naming_policy() -> None:
    decoder = SectionDecoder(naming_convention=pascal_case)

    person = decoder.decode("FullName: Ada\nAge: 3\nfullName: ignored\n", Person)

    assert person.full_name == "Ada"
    assert person.age == 3


def test_decode_reports_missing_required_fields() -> None:
    with pytest.raises(ConversionError, match="missing required field\\(s\\) for Person: fullName"):
        SectionDecoder().decode("age: 3\n", Person)


def test_decode_empty_body_uses_dataclass_defaults() -> None:
    assert SectionDecoder().decode("", Flags) == Flags()
    with pytest.raises(ConversionError, match="street"):
        SectionDecoder().decode("", Address)


def test_decode_rejects_unknown_fields_when_strict() -> None:
    decoder = SectionDecoder(ignore_unknown_fields=False)

    with pytest.raises(ConversionError, match="unknown field\\(s\\) for Address: zip"):
        decoder.decode("street: Main 1\nzip: 12345\n", Address)


@pytest.mark.parametrize(
    ("text", "path"),
    [
        ("fullName: Ada\nage: young\n", "$.age"),
        ("fullName: Ada\nage: true\n", "$.age"),
        ("fullName: Ada\nactive: 1\n", "$.active"),
        ("fullName: 12\n", "$.fullName"),
        ("fullName: Ada\nfavorite: GREEN\n", "$.favorite"),
        ("fullName: Ada\ntags: [a, 2]\n", "$.tags[1]"),
        ("fullName: Ada\npoint: [1, 2, 3]\n", "$.point"),
        ("fullName: Ada\nhome: Main 1\n", "$.home"),
        ("- just\n- a list\n", "$"),
    ],
)
def test_decode_reports_shape_mismatch_with_path(text: str, path: str) -> None:
    with pytest.raises(ConversionError) as exc_info:
        SectionDecoder().decode(text, Person)

    assert exc_info.value.path == path


def test_convert_handles_plain_targets() -> None:
    decoder = SectionDecoder()

    assert decoder.convert([1, 2, 2], set[int]) == {1, 2}
    assert decoder.convert([1, 2], frozenset[int]) == frozenset({1, 2})
    assert decoder.convert([1, 2, 3], tuple[int, ...]) == (1, 2, 3)
    assert decoder.convert({"a": 1}, dict) == {"a": 1}
    assert decoder.convert(None, Optional[int]) is None
    assert decoder.convert(5, int | str) == 5
    assert decoder.convert("x", Any) == "x"
