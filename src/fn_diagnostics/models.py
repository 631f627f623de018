from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .severity import GenericSeverity


@dataclass(frozen=True, slots=True)
class HostInfo:
    """Ambient host values stamped onto trace and metric lines."""

    host_name: str = ""
    host_version: str = ""


@dataclass(frozen=True, slots=True)
class TraceEvent:
    level: GenericSeverity | int | str
    subscription_id: str
    app_name: str
    function_name: str
    event_name: str
    source: str
    details: str
    summary: str
    exception_type: str
    exception_message: str
    function_invocation_id: str
    host_instance_id: str
    activity_id: str
    event_timestamp: datetime | str | None


@dataclass(frozen=True, slots=True)
class MetricEvent:
    subscription_id: str
    app_name: str
    function_name: str
    event_name: str
    average: int
    minimum: int
    maximum: int
    count: int
    event_timestamp: datetime | str | None
    data: str = ""


@dataclass(frozen=True, slots=True)
class DetailsEvent:
    site_name: str
    function_name: str
    input_bindings: str
    output_bindings: str
    script_type: str
    is_disabled: bool = False


@dataclass(frozen=True, slots=True)
class ExecutionEvent:
    execution_id: str
    site_name: str
    concurrency: int
    function_name: str
    invocation_id: str
    execution_stage: str
    execution_time_ms: int
    success: bool


@dataclass(frozen=True, slots=True)
class ExecutionAggregateEvent:
    """Accepted by the generator but never written anywhere."""

    site_name: str
    function_name: str
    execution_time_ms: int
    started_count: int
    completed_count: int
    failed_count: int


@dataclass(frozen=True, slots=True)
class MonitorEvent:
    level: GenericSeverity | int | str
    resource_id: str
    operation_name: str
    category: str
    region_name: str
    properties: str


DiagnosticEvent = (
    TraceEvent | MetricEvent | DetailsEvent | ExecutionEvent | ExecutionAggregateEvent | MonitorEvent
)
