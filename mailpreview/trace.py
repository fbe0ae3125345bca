"""Optional instrumentation hook for the parsers.

The parsing functions accept a ``trace`` callable and report intermediate
state through it instead of logging directly.  A structlog logger's
``debug`` method fits the signature::

    extract_mail(raw, trace=structlog.get_logger().debug)
"""

from __future__ import annotations

from typing import Any, Protocol


class TraceHook(Protocol):
    def __call__(self, event: str, **fields: Any) -> Any: ...


def noop_trace(event: str, **fields: Any) -> None:
    return None
