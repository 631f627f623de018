"""Contract for the destinations that receive encoded event lines."""

from typing import Protocol

from fn_diagnostics.routing import Destination


class EventSink(Protocol):
    """Writes already-encoded lines to a category log or the process stream."""

    def emit(self, destination: Destination, line: str) -> None:
        """Write ``line`` exactly as given, followed only by a line terminator."""
