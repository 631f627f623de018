"""Per-category file sink tailed by the log collector."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from fn_diagnostics.routing import Destination

from .console import ConsoleEventSink


class FileEventSink:
    """Appends categorized lines to ``<log_dir>/<category>.log``.

    Lines routed to the process output stream go to a console sink instead.
    Appends to the same file are serialized with a per-path lock; there is no
    rotation and no buffering beyond the file object's own.
    """

    def __init__(
        self,
        log_dir: str | Path,
        *,
        process_output: ConsoleEventSink | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._log_dir = Path(log_dir)
        self._process_output = process_output or ConsoleEventSink()
        self._logger = logger or logging.getLogger("fn_diagnostics.sinks.files")
        self._locks: dict[Path, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def path_for(self, destination: Destination) -> Path:
        return self._log_dir / f"{destination.value}.log"

    def emit(self, destination: Destination, line: str) -> None:
        if not destination.is_category:
            self._process_output.emit(destination, line)
            return

        path = self.path_for(destination)
        with self._lock_for(path):
            if not path.parent.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                self._logger.info("log_dir_created", extra={"log_dir": str(path.parent)})
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")

    def _lock_for(self, path: Path) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(path)
            if lock is None:
                lock = threading.Lock()
                self._locks[path] = lock
            return lock
