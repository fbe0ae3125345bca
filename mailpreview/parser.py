"""Top-level raw message parser: raw text → ParsedMail."""

from __future__ import annotations

import re

import structlog

from .config import ParserConfig
from .headers import parse_headers
from .models import MailPart, ParsedMail
from .multipart import DEFAULT_MAX_DEPTH, extract_boundary, parse_multipart
from .trace import TraceHook, noop_trace

# End of the header block: a line break followed by a blank line, or by
# the first multipart delimiter.  The delimiter's "--" stays in the body.
_HEADER_END = re.compile(r"\r?\n(?:\r?\n|(?=--))")


def extract_mail(
    raw_mail: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    trace: TraceHook | None = None,
) -> ParsedMail:
    """Parse a raw message into headers and leaf parts.

    Never raises: a message without a header/body separator yields an
    empty :class:`ParsedMail`, and a Content-Type whose boundary cannot be
    extracted is treated as a single-part message.
    """
    trace = trace or noop_trace

    separator = _HEADER_END.search(raw_mail)
    if separator is None:
        trace("header_separator_missing", length=len(raw_mail))
        return ParsedMail()

    header_text = raw_mail[: separator.start()]
    body = raw_mail[separator.end() :]

    headers = parse_headers(header_text, trace=trace)
    content_type = headers.get("content-type", "")

    trace(
        "headers_parsed",
        header_count=len(headers),
        header_length=len(header_text),
        content_type=content_type,
    )

    boundary = extract_boundary(content_type)
    if boundary:
        trace("boundary_found", boundary=boundary)
        parts = parse_multipart(body, boundary, max_depth=max_depth, trace=trace)
    else:
        parts = [MailPart(headers=headers, content=body, content_type=content_type)]

    return ParsedMail(headers=headers, parts=parts)


class MailParser:
    """Stateless parser configured from :class:`ParserConfig`."""

    def __init__(
        self,
        config: ParserConfig | None = None,
        *,
        trace: TraceHook | None = None,
    ) -> None:
        self._config = config or ParserConfig()
        if trace is None and self._config.trace:
            trace = structlog.get_logger("mailpreview.trace").debug
        self._trace = trace

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self, raw_mail: str) -> ParsedMail:
        return extract_mail(raw_mail, max_depth=self._config.max_depth, trace=self._trace)
