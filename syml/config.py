"""Configuration model and loaders for syml.

Responsibilities:
- Define codec configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `SymlConfig`: normalized naming, tolerance, and emitter settings.
- `ConfigLoader`: static construction helpers for `SymlConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from .naming import NamingConvention, resolve_naming_convention


@dataclass(frozen=True, slots=True)
class SymlConfig:
    """Codec configuration shared by every section of a document.

    Attributes:
        naming_convention: Registered naming policy (`camel`, `pascal`, `snake`,
            `kebab`, or `none`) mapping field names to YAML keys.
        ignore_unknown_fields: Whether decoding silently drops keys without a field.
        emit_comments: Whether field descriptions are written as comments.
        indent: Mapping indentation width used when encoding.
        line_width: Optional preferred line width used when encoding.
    """

    naming_convention: str = "camel"
    ignore_unknown_fields: bool = True
    emit_comments: bool = True
    indent: int = 2
    line_width: int | None = None

    def validate(self) -> None:
        """Validate configuration values before use."""

        resolve_naming_convention(self.naming_convention)
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent <= 0:
            raise ValueError("`indent` must be a positive integer.")
        if self.line_width is not None and (
            isinstance(self.line_width, bool)
            or not isinstance(self.line_width, int)
            or self.line_width <= 0
        ):
            raise ValueError("`line_width` must be a positive integer.")

    def naming_policy(self) -> NamingConvention:
        """Return the naming policy function selected by `naming_convention`."""

        return resolve_naming_convention(self.naming_convention)


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def _clean_token(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when it is missing or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_flag(value: object, label: str) -> bool:
    if isinstance(value, bool):
        return value
    token = (_clean_token(value) or "").lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ValueError(
        f"{label} must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off`)."
    )


def _parse_positive_int(value: object, label: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{label} must be a positive integer.")
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(_clean_token(value) or "")
        except ValueError as exc:
            raise ValueError(f"{label} must be a positive integer.") from exc
    if parsed <= 0:
        raise ValueError(f"{label} must be a positive integer.")
    return parsed


def _parse_naming_convention(value: object, label: str) -> str:
    token = _clean_token(value)
    if token is None:
        raise ValueError(f"{label} must name a naming convention.")
    token = token.lower()
    resolve_naming_convention(token)
    return token


# Setting name -> parser turning a raw YAML or environment token into its typed value.
_SETTING_PARSERS: dict[str, Callable[[object, str], Any]] = {
    "naming_convention": _parse_naming_convention,
    "ignore_unknown_fields": _parse_flag,
    "emit_comments": _parse_flag,
    "indent": _parse_positive_int,
    "line_width": _parse_positive_int,
}


class ConfigLoader:
    """Factory methods for creating `SymlConfig` objects."""

    ENV_PREFIX = "SYML_"

    @staticmethod
    def from_yaml(path: Path) -> SymlConfig:
        """Create a validated config from a YAML file.

        Keys mirror `SymlConfig` field names; `null` values keep the default.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SymlConfig:
        """Create a validated config from `SYML_*` environment variables.

        Blank variables keep the default value.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env
        values: dict[str, Any] = {}
        for setting, parser in _SETTING_PARSERS.items():
            env_key = f"{ConfigLoader.ENV_PREFIX}{setting.upper()}"
            token = _clean_token(env_map.get(env_key))
            if token is not None:
                values[setting] = parser(token, f"Environment variable `{env_key}`")

        config = SymlConfig(**values)
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> SymlConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(str(key) for key in payload if key not in _SETTING_PARSERS)
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        values = {
            setting: _SETTING_PARSERS[setting](raw, f"`{setting}`")
            for setting, raw in payload.items()
            if raw is not None
        }
        config = SymlConfig(**values)
        config.validate()
        return config
