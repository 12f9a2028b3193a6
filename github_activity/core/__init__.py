"""
Formatting core public API.

Pure functions only: nothing in this package performs I/O.
"""

from .formatter import format_event
from .models.domain import ActivityEvent, EventKind, EventRepo
from .renderer import DEFAULT_LIMIT, render_activity

__all__ = [
    "ActivityEvent",
    "DEFAULT_LIMIT",
    "EventKind",
    "EventRepo",
    "format_event",
    "render_activity",
]
