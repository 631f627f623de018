"""Default sink writing every line to the process output stream."""

from __future__ import annotations

import sys
from typing import TextIO

from fn_diagnostics.routing import Destination


class ConsoleEventSink:
    """Writes lines to stdout regardless of destination."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, destination: Destination, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()
