"""Encoders for the comma-delimited diagnostic event lines tailed by the log collector."""

from .encoders import (
    EVENT_TIMESTAMP_FORMAT,
    MONITOR_STREAM_NAME,
    encode_details,
    encode_execution,
    encode_execution_aggregate,
    encode_metric,
    encode_monitor,
    encode_trace,
    format_timestamp,
)
from .generator import EventGenerator, log_unhandled_exception
from .models import (
    DetailsEvent,
    ExecutionAggregateEvent,
    ExecutionEvent,
    HostInfo,
    MetricEvent,
    MonitorEvent,
    TraceEvent,
)
from .normalize import FieldGrammar, normalize_field
from .patterns import parse_line
from .routing import Destination, EventKind, UnroutableEventError, route
from .severity import GenericSeverity, to_wire_level

__all__ = [
    "Destination",
    "DetailsEvent",
    "EVENT_TIMESTAMP_FORMAT",
    "EventGenerator",
    "EventKind",
    "ExecutionAggregateEvent",
    "ExecutionEvent",
    "FieldGrammar",
    "GenericSeverity",
    "HostInfo",
    "MONITOR_STREAM_NAME",
    "MetricEvent",
    "MonitorEvent",
    "TraceEvent",
    "UnroutableEventError",
    "encode_details",
    "encode_execution",
    "encode_execution_aggregate",
    "encode_metric",
    "encode_monitor",
    "encode_trace",
    "format_timestamp",
    "log_unhandled_exception",
    "normalize_field",
    "parse_line",
    "route",
    "to_wire_level",
]
