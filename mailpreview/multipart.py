"""Multipart body splitting.

Nested ``multipart/*`` sections are descended into and their leaves are
spliced into the result where the container stood, so the output is
always a flat list of leaf parts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .headers import parse_headers
from .models import MailPart
from .trace import TraceHook, noop_trace

DEFAULT_MAX_DEPTH = 20

_BLANK_LINE = re.compile(r"\r?\n\r?\n")
_BOUNDARY = re.compile(r"""boundary\s*=\s*(?:"([^"]+)"|([^\s";]+))""", re.IGNORECASE)


@dataclass(frozen=True)
class SkippedSection:
    """A multipart section that produced no part."""

    index: int
    reason: str


def extract_boundary(content_type: str) -> str | None:
    """Return the ``boundary`` parameter of a Content-Type value, if any.

    Accepts quoted and bare tokens; trailing ``;``, quotes and whitespace
    are not part of the boundary.
    """
    match = _BOUNDARY.search(content_type)
    if match is None:
        return None
    return match.group(1) or match.group(2)


def parse_multipart(
    body: str,
    boundary: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    trace: TraceHook | None = None,
) -> list[MailPart]:
    """Split *body* on ``--{boundary}`` into leaf parts, in source order.

    The preamble before the first delimiter, the closing delimiter and
    sections without a blank line between headers and content are dropped.
    """
    return _split(body, boundary, depth=1, max_depth=max_depth, trace=trace or noop_trace)


def _split(
    body: str,
    boundary: str,
    *,
    depth: int,
    max_depth: int,
    trace: TraceHook,
) -> list[MailPart]:
    parts: list[MailPart] = []

    for index, section in enumerate(body.split(f"--{boundary}")[1:], start=1):
        result = _parse_section(
            section, index, depth=depth, max_depth=max_depth, trace=trace
        )
        if isinstance(result, SkippedSection):
            trace(
                "multipart_section_skipped",
                boundary=boundary,
                index=result.index,
                reason=result.reason,
            )
            continue
        parts.extend(result)

    return parts


def _parse_section(
    section: str,
    index: int,
    *,
    depth: int,
    max_depth: int,
    trace: TraceHook,
) -> list[MailPart] | SkippedSection:
    if not section:
        return SkippedSection(index, "empty")
    if section.strip().startswith("--"):
        return SkippedSection(index, "closing_delimiter")

    separator = _BLANK_LINE.search(section)
    if separator is None:
        return SkippedSection(index, "no_header_separator")

    headers = parse_headers(section[: separator.start()], trace=trace)
    content = section[separator.end() :]
    content_type = headers.get("content-type", "")

    trace("multipart_section", index=index, depth=depth, content_type=content_type)

    if "multipart/" in content_type.lower():
        nested = extract_boundary(content_type)
        if nested:
            if depth < max_depth:
                return _split(
                    content, nested, depth=depth + 1, max_depth=max_depth, trace=trace
                )
            trace("multipart_max_depth_reached", boundary=nested, depth=depth)

    return [MailPart(headers=headers, content=content.strip(), content_type=content_type)]
