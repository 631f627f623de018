from __future__ import annotations

import io
import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

from fn_diagnostics.encoders import MONITOR_STREAM_NAME
from fn_diagnostics.generator import EventGenerator, log_unhandled_exception
from fn_diagnostics.models import (
    DetailsEvent,
    ExecutionAggregateEvent,
    ExecutionEvent,
    HostInfo,
    MetricEvent,
    MonitorEvent,
    TraceEvent,
)
from fn_diagnostics.routing import Destination, UnroutableEventError
from fn_diagnostics.sinks import ConsoleEventSink, FileEventSink, InMemoryEventSink

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class FailingSink:
    def emit(self, destination, line):
        raise OSError("disk full")


def _generator(sink) -> EventGenerator:
    return EventGenerator(sink, host_info=HostInfo("host1", "4.0"), clock=lambda: NOW)


def _trace() -> TraceEvent:
    return TraceEvent(
        level="information",
        subscription_id="sub1",
        app_name="app1",
        function_name="fn1",
        event_name="ev1",
        source="src",
        details="hello, world",
        summary="ok",
        exception_type="",
        exception_message="",
        function_invocation_id="i1",
        host_instance_id="h1",
        activity_id="a1",
        event_timestamp=datetime(2024, 1, 1),
    )


def test_each_event_is_written_once_to_its_category() -> None:
    sink = InMemoryEventSink()
    generator = _generator(sink)

    generator.log_function_trace_event(_trace())
    generator.log_function_metric_event(MetricEvent("sub", "app", "fn", "ev", 1, 1, 1, 1, datetime(2024, 1, 1)))
    generator.log_function_details_event(DetailsEvent("app", "fn", "[]", "[]", "python"))
    generator.log_function_execution_event(ExecutionEvent("e1", "site", 1, "fn", "inv", "Finished", 10, True))

    assert [dest for dest, _ in sink.records] == [
        Destination.FUNCTIONS_LOGS,
        Destination.FUNCTIONS_METRICS,
        Destination.FUNCTIONS_DETAILS,
        Destination.FUNCTION_EXECUTION_EVENTS,
    ]
    assert sink.lines(Destination.FUNCTIONS_LOGS) == [
        '2,sub1,host1,app1,fn1,ev1,src,"hello, world","ok",4.0,2024-01-01T00:00:00,,"",i1,h1,a1'
    ]
    assert sink.lines(Destination.FUNCTION_EXECUTION_EVENTS) == ["e1,site,1,fn,inv,Finished,10,True,2024-01-02T03:04:05"]


def test_monitor_events_go_to_process_output() -> None:
    sink = InMemoryEventSink()

    line = _generator(sink).log_azure_monitor_diagnostic_log_event(
        MonitorEvent(2, "/subs/1", "op", "cat", "westus", "{'k': 'v'}")
    )

    assert sink.records == [(Destination.PROCESS_OUTPUT, line)]
    assert line == f'{MONITOR_STREAM_NAME} 2,/subs/1,op,cat,westus,"{{k: v}}",2024-01-02T03:04:05'


def test_execution_aggregate_is_suppressed() -> None:
    sink = InMemoryEventSink()
    generator = _generator(sink)

    assert generator.log_function_execution_aggregate_event(ExecutionAggregateEvent("site", "fn", 5, 1, 1, 0)) is None
    assert generator.log_event(ExecutionAggregateEvent("site", "fn", 0, 0, 0, 0)) is None
    assert sink.records == []


def test_log_event_dispatches_on_record_type() -> None:
    sink = InMemoryEventSink()

    line = _generator(sink).log_event(_trace())

    assert sink.records == [(Destination.FUNCTIONS_LOGS, line)]


def test_log_event_rejects_unknown_records() -> None:
    with pytest.raises(UnroutableEventError):
        _generator(InMemoryEventSink()).log_event(object())


def test_sink_failures_propagate() -> None:
    with pytest.raises(OSError, match="disk full"):
        _generator(FailingSink()).log_function_trace_event(_trace())


def test_default_sink_writes_to_stdout(capsys) -> None:
    EventGenerator(host_info=HostInfo("host1", "4.0")).log_function_details_event(
        DetailsEvent("app", "fn", "[]", "[]", "python", True)
    )

    assert capsys.readouterr().out == 'app,fn,"[]","[]",python,1\n'


def test_unhandled_exception_notice_is_one_line() -> None:
    stream = io.StringIO()

    line = log_unhandled_exception(ValueError("bad\nthing"), stream=stream, now=datetime(2024, 1, 1))

    assert line == "Unhandled exception on 2024-01-01T00:00:00: ValueError: bad thing"
    assert stream.getvalue() == line + "\n"


def test_file_sink_appends_per_category(tmp_path: Path) -> None:
    stdout = io.StringIO()
    sink = FileEventSink(tmp_path / "logs", process_output=ConsoleEventSink(stdout))
    generator = _generator(sink)

    generator.log_function_trace_event(_trace())
    generator.log_function_trace_event(_trace())
    generator.log_azure_monitor_diagnostic_log_event(MonitorEvent(1, "r", "op", "cat", "region", ""))

    trace_lines = (tmp_path / "logs" / "FunctionsLogs.log").read_text(encoding="utf-8").splitlines()
    assert len(trace_lines) == 2
    assert trace_lines[0] == trace_lines[1]
    assert stdout.getvalue().startswith(MONITOR_STREAM_NAME + " 1,")
    assert not (tmp_path / "logs" / "stdout.log").exists()


def test_file_sink_serializes_concurrent_writers(tmp_path: Path) -> None:
    sink = FileEventSink(tmp_path)

    def _write(worker: int) -> None:
        for index in range(50):
            sink.emit(Destination.FUNCTIONS_METRICS, f"w{worker},{index}")

    threads = [threading.Thread(target=_write, args=(worker,)) for worker in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = sink.path_for(Destination.FUNCTIONS_METRICS).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 200
    assert all(line.startswith("w") for line in lines)
