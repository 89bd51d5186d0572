"""Telemetry and observability helpers.

This package emits deterministic operation events for auditing document changes.
"""

from .logger import configure_logging, format_event, log_event

__all__ = ["configure_logging", "format_event", "log_event"]
