"""Encode diagnostic events and hand each line to its sink exactly once."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Callable, TextIO

from .encoders import (
    encode_details,
    encode_execution,
    encode_execution_aggregate,
    encode_metric,
    encode_monitor,
    encode_trace,
    format_timestamp,
)
from .models import (
    DetailsEvent,
    DiagnosticEvent,
    ExecutionAggregateEvent,
    ExecutionEvent,
    HostInfo,
    MetricEvent,
    MonitorEvent,
    TraceEvent,
)
from .routing import EventKind, UnroutableEventError, route
from .sinks import ConsoleEventSink, EventSink


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventGenerator:
    """Front door for emitting diagnostic events.

    Host name, host version and the clock are injected so a given input
    always produces the same line. The generator keeps no per-event state and
    never retries or buffers; sink errors propagate to the caller.
    """

    def __init__(
        self,
        sink: EventSink | None = None,
        *,
        host_info: HostInfo | None = None,
        clock: Callable[[], datetime] = utc_now,
        logger: logging.Logger | None = None,
    ) -> None:
        self._sink = sink or ConsoleEventSink()
        self._host_info = host_info or HostInfo()
        self._clock = clock
        self._logger = logger or logging.getLogger("fn_diagnostics.generator")

    def log_function_trace_event(self, event: TraceEvent) -> str:
        return self._emit(EventKind.TRACE, encode_trace(event, self._host_info))

    def log_function_metric_event(self, event: MetricEvent) -> str:
        return self._emit(EventKind.METRIC, encode_metric(event, self._host_info))

    def log_function_details_event(self, event: DetailsEvent) -> str:
        return self._emit(EventKind.DETAILS, encode_details(event))

    def log_function_execution_event(self, event: ExecutionEvent) -> str:
        return self._emit(EventKind.EXECUTION, encode_execution(event, self._clock()))

    def log_function_execution_aggregate_event(self, event: ExecutionAggregateEvent) -> None:
        encode_execution_aggregate(event)

    def log_azure_monitor_diagnostic_log_event(self, event: MonitorEvent) -> str:
        return self._emit(EventKind.MONITOR, encode_monitor(event, self._clock()))

    def log_event(self, event: DiagnosticEvent) -> str | None:
        """Dispatch ``event`` on its record type."""
        if isinstance(event, TraceEvent):
            return self.log_function_trace_event(event)
        if isinstance(event, MetricEvent):
            return self.log_function_metric_event(event)
        if isinstance(event, DetailsEvent):
            return self.log_function_details_event(event)
        if isinstance(event, ExecutionEvent):
            return self.log_function_execution_event(event)
        if isinstance(event, ExecutionAggregateEvent):
            return self.log_function_execution_aggregate_event(event)
        if isinstance(event, MonitorEvent):
            return self.log_azure_monitor_diagnostic_log_event(event)
        raise UnroutableEventError(f"Unsupported diagnostic event type: {type(event).__name__}")

    def _emit(self, kind: EventKind, line: str) -> str:
        destination = route(kind)
        self._sink.emit(destination, line)
        self._logger.debug("event_emitted", extra={"kind": kind.value, "destination": destination.value})
        return line


def format_unhandled_exception(exc: BaseException | None, now: datetime) -> str:
    description = "" if exc is None else f"{type(exc).__name__}: {exc}"
    return " ".join(f"Unhandled exception on {format_timestamp(now)}: {description}".splitlines())


def log_unhandled_exception(
    exc: BaseException | None,
    *,
    stream: TextIO | None = None,
    now: datetime | None = None,
) -> str:
    """Write a one-line notice for ``exc`` straight to the process output stream.

    This path bypasses routing and sinks so it still works when categorized
    logging is what failed.
    """
    line = format_unhandled_exception(exc, now or utc_now())
    target = stream or sys.stdout
    target.write(line + "\n")
    target.flush()
    return line
