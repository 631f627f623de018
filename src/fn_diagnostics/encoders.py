"""Line encoders for each diagnostic event kind.

Every encoder is a pure function of its record plus the ambient values the
caller passes in (host info, current UTC time). Field order and delimiters
are fixed per kind and must stay in step with :mod:`fn_diagnostics.patterns`,
which is what the log collector uses to read the lines back.
"""

from __future__ import annotations

from datetime import datetime, timezone

from .models import DetailsEvent, ExecutionAggregateEvent, ExecutionEvent, HostInfo, MetricEvent, MonitorEvent, TraceEvent
from .normalize import DELIMITER, plain, quoted
from .severity import to_wire_level

EVENT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
MISSING_TIMESTAMP = "0001-01-01T00:00:00"
MONITOR_STREAM_NAME = "MS_FUNCTION_AZURE_MONITOR_EVENT"


def format_timestamp(value: object) -> str:
    """Render ``value`` in UTC using the one timestamp format all kinds share.

    ISO-8601 strings are parsed first; other unparseable text is kept with
    delimiters stripped. Anything that yields no text renders as
    ``MISSING_TIMESTAMP`` so the line still matches its pattern.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            return plain(value).strip() or MISSING_TIMESTAMP
    if not isinstance(value, datetime):
        return MISSING_TIMESTAMP
    if value.tzinfo is not None:
        try:
            value = value.astimezone(timezone.utc)
        except (OverflowError, ValueError):
            value = value.replace(tzinfo=None)
    return value.strftime(EVENT_TIMESTAMP_FORMAT)


def _non_negative(value: object) -> int:
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, number)


def _integer(value: object) -> int:
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return 0


def _join(fields: list[str]) -> str:
    return DELIMITER.join(fields)


def encode_trace(event: TraceEvent, host: HostInfo) -> str:
    return _join(
        [
            str(to_wire_level(event.level)),
            plain(event.subscription_id),
            plain(host.host_name),
            plain(event.app_name),
            plain(event.function_name),
            plain(event.event_name),
            plain(event.source),
            quoted(event.details),
            quoted(event.summary),
            plain(host.host_version),
            format_timestamp(event.event_timestamp),
            plain(event.exception_type),
            quoted(event.exception_message),
            plain(event.function_invocation_id),
            plain(event.host_instance_id),
            plain(event.activity_id),
        ]
    )


def encode_metric(event: MetricEvent, host: HostInfo) -> str:
    return _join(
        [
            plain(event.subscription_id),
            plain(event.app_name),
            plain(event.function_name),
            plain(event.event_name),
            str(_non_negative(event.average)),
            str(_non_negative(event.minimum)),
            str(_non_negative(event.maximum)),
            str(_non_negative(event.count)),
            plain(host.host_version),
            format_timestamp(event.event_timestamp),
            plain(event.data),
        ]
    )


def encode_details(event: DetailsEvent) -> str:
    return _join(
        [
            plain(event.site_name),
            plain(event.function_name),
            quoted(event.input_bindings),
            quoted(event.output_bindings),
            plain(event.script_type),
            "1" if event.is_disabled else "0",
        ]
    )


def encode_execution(event: ExecutionEvent, now: datetime) -> str:
    """Encode an execution record, stamping it with ``now`` as the emission time."""
    return _join(
        [
            plain(event.execution_id),
            plain(event.site_name),
            str(_integer(event.concurrency)),
            plain(event.function_name),
            plain(event.invocation_id),
            plain(event.execution_stage),
            str(_integer(event.execution_time_ms)),
            str(bool(event.success)),
            format_timestamp(now),
        ]
    )


def encode_execution_aggregate(event: ExecutionAggregateEvent) -> None:
    """Aggregates are accepted but never produce a line."""
    return None


def encode_monitor(event: MonitorEvent, now: datetime) -> str:
    properties = "" if event.properties is None else str(event.properties).replace("'", "")
    body = _join(
        [
            str(to_wire_level(event.level)),
            plain(event.resource_id),
            plain(event.operation_name),
            plain(event.category),
            plain(event.region_name),
            quoted(properties),
            format_timestamp(now),
        ]
    )
    return f"{MONITOR_STREAM_NAME} {body}"
