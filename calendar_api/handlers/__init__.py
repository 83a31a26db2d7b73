"""HTTP route handlers."""

from . import events, files, notes, simple_events

__all__ = ["events", "files", "notes", "simple_events"]
