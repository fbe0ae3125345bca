"""Header block parsing with folded-line support."""

from __future__ import annotations

import re

from .trace import TraceHook, noop_trace

_LINE_BREAK = re.compile(r"\r?\n")


def parse_headers(header_text: str, *, trace: TraceHook | None = None) -> dict[str, str]:
    """Parse a raw header block into ``{lower-cased name: value}``.

    Continuation lines (leading whitespace) are joined onto the previous
    header with a single space.  A repeated header keeps its last value.
    A line that is neither a continuation nor ``Name: value`` drops the
    header in progress.
    """
    trace = trace or noop_trace
    headers: dict[str, str] = {}

    current_name = ""
    current_value = ""

    for line in _LINE_BREAK.split(header_text):
        if current_name and line[:1].isspace():
            current_value += " " + line.strip()
            continue

        if current_name:
            headers[current_name.lower()] = current_value.strip()

        colon = line.find(":")
        if colon > 0:
            current_name = line[:colon].strip()
            current_value = line[colon + 1 :].strip()
        else:
            if line.strip():
                trace("header_line_skipped", line=line[:200])
            current_name = ""
            current_value = ""

    if current_name:
        headers[current_name.lower()] = current_value.strip()

    return headers
