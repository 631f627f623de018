"""Severity scale shared by the trace and monitor wire formats."""

from __future__ import annotations

import logging
from enum import IntEnum

WIRE_LEVEL_MIN = 0
WIRE_LEVEL_MAX = 6


class GenericSeverity(IntEnum):
    """Ordered severity classification, lowest is most verbose."""

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6


UNKNOWN_SEVERITY = GenericSeverity.NONE

_NAME_ALIASES = {
    "info": GenericSeverity.INFORMATION,
    "warn": GenericSeverity.WARNING,
    "fatal": GenericSeverity.CRITICAL,
}


def to_wire_level(level: GenericSeverity | int | str | None) -> int:
    """Return the wire level for ``level``, clamped into ``0..6``.

    Integers outside the scale clamp to the nearest bound. Names are matched
    case-insensitively; anything unrecognized maps to ``UNKNOWN_SEVERITY``.
    """
    if isinstance(level, bool):
        return int(UNKNOWN_SEVERITY)
    if isinstance(level, int):
        return max(WIRE_LEVEL_MIN, min(WIRE_LEVEL_MAX, int(level)))
    if isinstance(level, str):
        return int(parse_severity(level))
    return int(UNKNOWN_SEVERITY)


def parse_severity(name: str) -> GenericSeverity:
    key = name.strip().lower()
    if key in _NAME_ALIASES:
        return _NAME_ALIASES[key]
    for member in GenericSeverity:
        if member.name.lower() == key:
            return member
    if key.lstrip("-").isdigit():
        return GenericSeverity(to_wire_level(int(key)))
    return UNKNOWN_SEVERITY


def severity_from_logging_level(levelno: int) -> GenericSeverity:
    """Map a stdlib ``logging`` level number onto the generic scale."""
    if levelno >= logging.CRITICAL:
        return GenericSeverity.CRITICAL
    if levelno >= logging.ERROR:
        return GenericSeverity.ERROR
    if levelno >= logging.WARNING:
        return GenericSeverity.WARNING
    if levelno >= logging.INFO:
        return GenericSeverity.INFORMATION
    if levelno >= logging.DEBUG:
        return GenericSeverity.DEBUG
    return GenericSeverity.TRACE
