"""Destinations for encoded event lines."""

from .console import ConsoleEventSink
from .files import FileEventSink
from .interfaces import EventSink
from .memory import InMemoryEventSink

__all__ = [
    "ConsoleEventSink",
    "EventSink",
    "FileEventSink",
    "InMemoryEventSink",
]
