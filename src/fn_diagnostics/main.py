"""CLI entrypoint for emitting and inspecting diagnostic event lines."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

import typer
from rich import print

from fn_diagnostics.config import settings
from fn_diagnostics.generator import EventGenerator, log_unhandled_exception, utc_now
from fn_diagnostics.models import DetailsEvent, ExecutionEvent, MetricEvent, MonitorEvent, TraceEvent
from fn_diagnostics.patterns import PATTERNS, parse_line
from fn_diagnostics.routing import EventKind
from fn_diagnostics.sinks import ConsoleEventSink, EventSink, FileEventSink

app = typer.Typer(help="Diagnostic event encoder for the log collection sidecar")


@app.callback()
def _configure_logging() -> None:
    logging.basicConfig(level=settings.log_level.upper(), stream=sys.stderr)


def _build_sink() -> EventSink:
    backend = settings.sink_backend.lower()
    if backend == "file":
        return FileEventSink(settings.log_dir)
    return ConsoleEventSink()


def _build_generator() -> EventGenerator:
    return EventGenerator(sink=_build_sink(), host_info=settings.host_info())


def _parse_timestamp(value: str | None) -> datetime:
    if not value:
        return utc_now()
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Not an ISO-8601 timestamp: {value}") from exc


def _report(line: str) -> None:
    if settings.sink_backend.lower() == "file":
        print({"written": line, "log_dir": settings.log_dir})


@app.command("config")
def show_config() -> None:
    """Show runtime sink and host configuration."""
    print(
        {
            "app_name": settings.app_name,
            "sink_backend": settings.sink_backend,
            "log_dir": settings.log_dir,
            "host_name": settings.host_name,
            "host_version": settings.host_version,
        }
    )


@app.command("patterns")
def show_patterns() -> None:
    """Print the parsing pattern the collector uses for each event kind."""
    print({kind.value: pattern.pattern for kind, pattern in PATTERNS.items()})


@app.command("parse")
def parse(kind: str, line: str) -> None:
    """Parse LINE with the published pattern for KIND."""
    try:
        event_kind = EventKind(kind.lower())
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown event kind: {kind}") from exc
    if event_kind not in PATTERNS:
        raise typer.BadParameter(f"No published pattern for event kind: {kind}")

    fields = parse_line(event_kind, line)
    if fields is None:
        print({"kind": event_kind.value, "match": False})
        raise typer.Exit(code=1)
    print({"kind": event_kind.value, "match": True, "fields": fields})


@app.command("trace")
def trace(
    event_name: str = typer.Option(..., help="Trace event name"),
    level: str = typer.Option("information", help="Severity name or 0-6"),
    subscription_id: str = typer.Option("", help="Owning subscription id"),
    app_name: str = typer.Option("", help="Function app name"),
    function_name: str = typer.Option("", help="Function name"),
    source: str = typer.Option("", help="Emitting component"),
    details: str = typer.Option("", help="Free-text details"),
    summary: str = typer.Option("", help="Free-text summary"),
    exception_type: str = typer.Option("", help="Exception type name"),
    exception_message: str = typer.Option("", help="Exception message"),
    invocation_id: str = typer.Option("", help="Function invocation id"),
    host_instance_id: str = typer.Option("", help="Host instance id"),
    activity_id: str = typer.Option("", help="Activity id"),
    timestamp: str = typer.Option(None, help="ISO-8601 event time, defaults to now (UTC)"),
) -> None:
    """Emit one trace event."""
    line = _build_generator().log_function_trace_event(
        TraceEvent(
            level=level,
            subscription_id=subscription_id,
            app_name=app_name,
            function_name=function_name,
            event_name=event_name,
            source=source,
            details=details,
            summary=summary,
            exception_type=exception_type,
            exception_message=exception_message,
            function_invocation_id=invocation_id,
            host_instance_id=host_instance_id,
            activity_id=activity_id,
            event_timestamp=_parse_timestamp(timestamp),
        )
    )
    _report(line)


@app.command("metric")
def metric(
    event_name: str = typer.Option(..., help="Metric event name"),
    average: int = typer.Option(0, min=0),
    minimum: int = typer.Option(0, min=0),
    maximum: int = typer.Option(0, min=0),
    count: int = typer.Option(0, min=0),
    subscription_id: str = typer.Option("", help="Owning subscription id"),
    app_name: str = typer.Option("", help="Function app name"),
    function_name: str = typer.Option("", help="Function name"),
    data: str = typer.Option("", help="Free-form metric data"),
    timestamp: str = typer.Option(None, help="ISO-8601 event time, defaults to now (UTC)"),
) -> None:
    """Emit one metric event."""
    line = _build_generator().log_function_metric_event(
        MetricEvent(
            subscription_id=subscription_id,
            app_name=app_name,
            function_name=function_name,
            event_name=event_name,
            average=average,
            minimum=minimum,
            maximum=maximum,
            count=count,
            event_timestamp=_parse_timestamp(timestamp),
            data=data,
        )
    )
    _report(line)


@app.command("details")
def details(
    site_name: str = typer.Option(..., help="Function app site name"),
    function_name: str = typer.Option(..., help="Function name"),
    input_bindings: str = typer.Option("", help="Serialized input bindings"),
    output_bindings: str = typer.Option("", help="Serialized output bindings"),
    script_type: str = typer.Option("", help="Script type, e.g. python"),
    disabled: bool = typer.Option(False, help="Whether the function is disabled"),
) -> None:
    """Emit one function details event."""
    line = _build_generator().log_function_details_event(
        DetailsEvent(
            site_name=site_name,
            function_name=function_name,
            input_bindings=input_bindings,
            output_bindings=output_bindings,
            script_type=script_type,
            is_disabled=disabled,
        )
    )
    _report(line)


@app.command("execution")
def execution(
    execution_id: str = typer.Option(..., help="Execution id"),
    function_name: str = typer.Option(..., help="Function name"),
    execution_stage: str = typer.Option(..., help="Execution stage, e.g. Started/Finished"),
    site_name: str = typer.Option("", help="Function app site name"),
    concurrency: int = typer.Option(0, help="Concurrent executions"),
    invocation_id: str = typer.Option("", help="Function invocation id"),
    duration_ms: int = typer.Option(0, help="Execution time in milliseconds"),
    success: bool = typer.Option(True, help="Whether the execution succeeded"),
) -> None:
    """Emit one function execution event."""
    line = _build_generator().log_function_execution_event(
        ExecutionEvent(
            execution_id=execution_id,
            site_name=site_name,
            concurrency=concurrency,
            function_name=function_name,
            invocation_id=invocation_id,
            execution_stage=execution_stage,
            execution_time_ms=duration_ms,
            success=success,
        )
    )
    _report(line)


@app.command("monitor")
def monitor(
    operation_name: str = typer.Option(..., help="Monitor operation name"),
    level: str = typer.Option("information", help="Severity name or 0-6"),
    resource_id: str = typer.Option("", help="Resource id"),
    category: str = typer.Option("", help="Monitor category"),
    region_name: str = typer.Option("", help="Region name"),
    properties: str = typer.Option("", help="Serialized properties"),
) -> None:
    """Emit one platform monitor event to the process output stream."""
    _build_generator().log_azure_monitor_diagnostic_log_event(
        MonitorEvent(
            level=level,
            resource_id=resource_id,
            operation_name=operation_name,
            category=category,
            region_name=region_name,
            properties=properties,
        )
    )


def main() -> None:
    try:
        app()
    except Exception as exc:  # noqa: BLE001 - last-chance notice on the process stream.
        try:
            log_unhandled_exception(exc)
        except (OSError, ValueError):
            pass
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
