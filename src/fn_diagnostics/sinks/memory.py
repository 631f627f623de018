"""Capturing sink for tests and dry runs."""

from __future__ import annotations

from fn_diagnostics.routing import Destination


class InMemoryEventSink:
    """Records every emitted ``(destination, line)`` pair in order."""

    def __init__(self) -> None:
        self.records: list[tuple[Destination, str]] = []

    def emit(self, destination: Destination, line: str) -> None:
        self.records.append((destination, line))

    def lines(self, destination: Destination | None = None) -> list[str]:
        return [line for dest, line in self.records if destination is None or dest == destination]
