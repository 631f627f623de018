"""Static routing of event kinds to their log destinations."""

from __future__ import annotations

from enum import Enum


class RoutingTableError(RuntimeError):
    """Raised at import when the routing table does not cover every kind."""


class UnroutableEventError(LookupError):
    """Raised when asked to route something that is not an :class:`EventKind`."""


class EventKind(str, Enum):
    TRACE = "trace"
    METRIC = "metric"
    DETAILS = "details"
    EXECUTION = "execution"
    MONITOR = "monitor"
    UNHANDLED_EXCEPTION = "unhandled_exception"


class Destination(str, Enum):
    """Named categories the collector tails, plus the process output stream."""

    FUNCTIONS_LOGS = "FunctionsLogs"
    FUNCTIONS_METRICS = "FunctionsMetrics"
    FUNCTIONS_DETAILS = "FunctionsDetails"
    FUNCTION_EXECUTION_EVENTS = "FunctionExecutionEvents"
    PROCESS_OUTPUT = "stdout"

    @property
    def is_category(self) -> bool:
        return self is not Destination.PROCESS_OUTPUT


ROUTES: dict[EventKind, Destination] = {
    EventKind.TRACE: Destination.FUNCTIONS_LOGS,
    EventKind.METRIC: Destination.FUNCTIONS_METRICS,
    EventKind.DETAILS: Destination.FUNCTIONS_DETAILS,
    EventKind.EXECUTION: Destination.FUNCTION_EXECUTION_EVENTS,
    EventKind.MONITOR: Destination.PROCESS_OUTPUT,
    EventKind.UNHANDLED_EXCEPTION: Destination.PROCESS_OUTPUT,
}


def _check_routes(routes: dict[EventKind, Destination]) -> None:
    missing = [kind.value for kind in EventKind if kind not in routes]
    if missing:
        raise RoutingTableError(f"Event kinds without a destination: {', '.join(missing)}")


_check_routes(ROUTES)


def route(kind: EventKind) -> Destination:
    """Return the destination for ``kind``."""
    try:
        return ROUTES[EventKind(kind)]
    except (KeyError, ValueError) as exc:
        raise UnroutableEventError(f"No destination for event kind: {kind!r}") from exc
