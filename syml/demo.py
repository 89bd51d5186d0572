"""Example section types and the contact/home demo used by `syml demo`."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from .document import SymlDocument
from .io.storage import read_document_text, write_document_text
from .metadata import described, document_section


class ExampleLocale(enum.Enum):
    GERMAN = "de"
    ENGLISH = "en"


@document_section("Contact")
@dataclass(slots=True)
class ContactRegion:
    """Contact details of one person."""

    name: str = described("Name of the contact", default="")
    age: int = described("Age of the contact", default=0)
    locale: ExampleLocale = described("Locale of the contact", default=ExampleLocale.GERMAN)

    def __str__(self) -> str:
        return f"[Contact] Name: {self.name} Age: {self.age} Locale: {self.locale.name}"


@document_section("Home")
@dataclass(slots=True)
class HomeRegion:
    """Postal address of one person."""

    address: str = ""
    city: str = ""

    def __str__(self) -> str:
        return f"[Home] Address: {self.address} City: {self.city}"


def run_demo(path: Path, document: SymlDocument | None = None) -> tuple[ContactRegion, HomeRegion]:
    """Load `path` when present, store the example sections, and write it back."""

    document = document if document is not None else SymlDocument()
    if path.exists():
        document.load(read_document_text(path))

    document.set(ContactRegion(name="Max Mustermann", age=18, locale=ExampleLocale.GERMAN))
    document.set(HomeRegion(address="Musterstraße 12", city="Munich"))

    contact = document.get(ContactRegion)
    home = document.get(HomeRegion)
    write_document_text(path, document.dump())
    return contact, home
