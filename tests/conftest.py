"""Shared pytest fixtures for the full syml test suite."""

from __future__ import annotations

import sys

import pytest
from loguru import logger

from syml import SymlDocument

CONTACT_HOME_TEXT = (
    "[Contact]\n"
    "name: Max Mustermann\n"
    "age: 18\n"
    "locale: GERMAN\n"
    "\n"
    "[Home]\n"
    "address: Musterstraße 12\n"
    "city: Munich\n"
)


@pytest.fixture
def contact_home_text() -> str:
    """Provide a two-section document text matching the demo section types."""

    return CONTACT_HOME_TEXT


@pytest.fixture
def document() -> SymlDocument:
    """Provide an empty document with default configuration."""

    return SymlDocument()


@pytest.fixture
def restore_logging():
    """Reset loguru handlers and re-silence syml after a test configures logging."""

    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("syml")
