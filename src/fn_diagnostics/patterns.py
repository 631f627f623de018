"""Parsing patterns the log collector applies to each event line.

These are the published counterpart of :mod:`fn_diagnostics.encoders`. Any
change to an encoder's field order has to be mirrored here, and the tests
round-trip encoded lines through these patterns to keep the two in step.
"""

from __future__ import annotations

import re

from .encoders import MONITOR_STREAM_NAME
from .routing import EventKind

TRACE_EVENT_PATTERN = re.compile(
    r"(?P<Level>[0-6]),(?P<SubscriptionId>[^,]*),(?P<HostName>[^,]*),(?P<AppName>[^,]*),"
    r"(?P<FunctionName>[^,]*),(?P<EventName>[^,]*),(?P<Source>[^,]*),"
    r'"(?P<Details>.*)","(?P<Summary>.*)",(?P<HostVersion>[^,]*),(?P<EventTimestamp>[^,]+),'
    r'(?P<ExceptionType>[^,]*),"(?P<ExceptionMessage>.*)",(?P<FunctionInvocationId>[^,]*),'
    r'(?P<HostInstanceId>[^,]*),(?P<ActivityId>[^,"]*)'
)

METRIC_EVENT_PATTERN = re.compile(
    r"(?P<SubscriptionId>[^,]*),(?P<AppName>[^,]*),(?P<FunctionName>[^,]*),(?P<EventName>[^,]*),"
    r"(?P<Average>\d*),(?P<Min>\d*),(?P<Max>\d*),(?P<Count>\d*),(?P<HostVersion>[^,]*),"
    r'(?P<EventTimestamp>[^,]+),(?P<Details>[^,"]*)'
)

DETAILS_EVENT_PATTERN = re.compile(
    r'(?P<AppName>[^,]*),(?P<FunctionName>[^,]*),"(?P<InputBindings>.*)","(?P<OutputBindings>.*)",'
    r"(?P<ScriptType>[^,]*),(?P<IsDisabled>[01])"
)

# Properties is matched with `.*` so quoted JSON may carry commas. The deployed
# collector pattern uses `[^,]*` there and will not match such lines.
MONITOR_EVENT_PATTERN = re.compile(
    re.escape(MONITOR_STREAM_NAME)
    + r" (?P<Level>[0-6]),(?P<ResourceId>[^,]*),(?P<OperationName>[^,]*),(?P<Category>[^,]*),"
    r'(?P<RegionName>[^,]*),"(?P<Properties>.*)",(?P<EventTimestamp>[^,]+)'
)

EXECUTION_EVENT_PATTERN = re.compile(
    r"(?P<executionId>[^,]*),(?P<siteName>[^,]*),(?P<concurrency>[^,]*),(?P<functionName>[^,]*),"
    r"(?P<invocationId>[^,]*),(?P<executionStage>[^,]*),(?P<executionTimeSpan>[^,]*),"
    r"(?P<success>[^,]*),(?P<dateTime>[^,]*)"
)

PATTERNS: dict[EventKind, re.Pattern[str]] = {
    EventKind.TRACE: TRACE_EVENT_PATTERN,
    EventKind.METRIC: METRIC_EVENT_PATTERN,
    EventKind.DETAILS: DETAILS_EVENT_PATTERN,
    EventKind.MONITOR: MONITOR_EVENT_PATTERN,
    EventKind.EXECUTION: EXECUTION_EVENT_PATTERN,
}


def parse_line(kind: EventKind, line: str) -> dict[str, str] | None:
    """Return the named fields of ``line`` or ``None`` when it does not match."""
    pattern = PATTERNS.get(kind)
    if pattern is None:
        return None
    match = pattern.fullmatch(line)
    return match.groupdict() if match else None
