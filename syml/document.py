"""Multi-section YAML document model.

Responsibilities:
- Split document text into named sections and validate every body.
- Decode sections into typed values and encode values back into sections.
- Recompose all sections into one text blob.
- Notify registered listeners after each successful mutation.

Key types:
- `SymlDocument`: ordered section mapping with load/get/set/dump operations.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, TypeVar

from .codec.section_codec import SectionCodec
from .config import SymlConfig
from .errors import SectionNotFoundError
from .io.section_splitter import SectionSplitter
from .metadata import section_name_of, validate_section_name
from .models.datatypes import Section
from .telemetry.logger import log_event

_T = TypeVar("_T")

UpdateListener = Callable[[], None]


class SymlDocument:
    """An ordered mapping of section names to raw YAML sections.

    Sections keep insertion order: names first seen by `load` or `set` keep
    their position when later overwritten, and `dump` writes them in that order.
    The document is not synchronized; callers must serialize mutations.
    """

    def __init__(
        self,
        config: SymlConfig | None = None,
        *,
        codec: SectionCodec | None = None,
        splitter: SectionSplitter | None = None,
    ) -> None:
        """Initialize an empty document."""

        self._codec = codec if codec is not None else SectionCodec(config)
        self._splitter = splitter if splitter is not None else SectionSplitter()
        self._sections: dict[str, Section] = {}
        self._listeners: list[UpdateListener] = []

    @property
    def codec(self) -> SectionCodec:
        return self._codec

    @property
    def sections(self) -> Mapping[str, Section]:
        """Read-only ordered view of the stored sections."""

        return MappingProxyType(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def on_update(self, callback: UpdateListener) -> Callable[[], None]:
        """Register a no-argument listener called after every successful load or set.

        Returns:
            A function removing the listener again.
        """

        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def load(self, text: str) -> None:
        """Load all sections from `text` and validate them.

        Blank text is a no-op. Sections are validated before any of them is
        stored, so a failing load leaves the document unchanged.

        Raises:
            DocumentFormatError: If non-blank text has no header line.
            SectionError: If a section body is not valid YAML.
        """

        if not text.strip():
            return

        staged: dict[str, Section] = {}
        for section in self._splitter.split(text):
            staged[section.name] = section
        for section in staged.values():
            self._codec.validate(section)

        self._sections.update(staged)
        log_event("DEBUG", "load", "complete", sections=len(staged), total=len(self._sections))
        self._notify_update()

    def validate(self) -> None:
        """Validate every stored section body.

        Raises:
            SectionError: For the first section that is not valid YAML.
        """

        for section in self._sections.values():
            self._codec.validate(section)
        log_event("DEBUG", "validate", "complete", sections=len(self._sections))

    def dump(self) -> str:
        """Return all sections recomposed into one document text."""

        if not self._sections:
            return ""
        text = "\n\n".join(section.serialized for section in self._sections.values())
        log_event("DEBUG", "dump", "complete", sections=len(self._sections), chars=len(text))
        return text

    def section(self, name: str) -> Section:
        """Return the raw section stored under `name`.

        Raises:
            SectionNotFoundError: If no such section exists.
        """

        try:
            return self._sections[name]
        except KeyError:
            raise SectionNotFoundError(section_name=name) from None

    def get(self, section_type: type[_T], name: str | None = None) -> _T:
        """Decode a section into `section_type`.

        Args:
            section_type: Target type; its document-section tag names the
                section when `name` is omitted.
            name: Optional explicit section name.

        Raises:
            MissingSectionTagError: If `name` is omitted and the type is untagged.
            SectionNotFoundError: If the section is absent.
            SectionError: If the body does not match the requested shape.
        """

        section_name = name if name is not None else section_name_of(section_type)
        return self._codec.decode(self.section(section_name), section_type)

    def get_raw(self, name: str) -> Any:
        """Decode a section into a generic tree of mappings, lists, and scalars."""

        return self._codec.parse(self.section(name))

    def has(self, section_type: type) -> bool:
        """Return whether the section named by `section_type`'s tag is present."""

        return section_name_of(section_type) in self._sections

    def set(self, value: Any, name: str | None = None) -> None:
        """Encode `value` and store it as a section, replacing any previous one.

        Args:
            value: Dataclass instance or plain YAML-representable value.
            name: Optional explicit section name; defaults to the tag of `type(value)`.

        Raises:
            MissingSectionTagError: If `name` is omitted and the type is untagged.
            InvalidSectionNameError: If the name cannot be written as a header.
            SectionError: If the value cannot be encoded.
        """

        section_name = validate_section_name(
            name if name is not None else section_name_of(type(value))
        )
        self._sections[section_name] = self._codec.encode(section_name, value)
        log_event("DEBUG", "set", "complete", section=section_name)
        self._notify_update()

    def _notify_update(self) -> None:
        for listener in list(self._listeners):
            listener()
