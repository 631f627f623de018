"""Field normalization for the comma-delimited event grammars."""

from __future__ import annotations

import re
from enum import Enum

DELIMITER = ","
QUOTE = '"'
SINGLE_QUOTE = "'"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class FieldGrammar(str, Enum):
    """How a field is matched by the collector's pattern."""

    QUOTED = "quoted"
    PLAIN = "plain"


def normalize_field(raw: object, grammar: FieldGrammar = FieldGrammar.QUOTED) -> str:
    """Return ``raw`` rendered so it cannot break ``grammar``.

    Quoted fields keep commas but have double quotes swapped for single
    quotes, then get wrapped in double quotes. Plain fields lose commas and
    double quotes entirely. Line breaks always collapse to a space.
    """
    text = "" if raw is None else str(raw)
    text = _LINE_BREAK_RE.sub(" ", text)

    if grammar == FieldGrammar.QUOTED:
        return f"{QUOTE}{text.replace(QUOTE, SINGLE_QUOTE)}{QUOTE}"
    return text.replace(DELIMITER, "").replace(QUOTE, "")


def quoted(raw: object) -> str:
    return normalize_field(raw, FieldGrammar.QUOTED)


def plain(raw: object) -> str:
    return normalize_field(raw, FieldGrammar.PLAIN)
