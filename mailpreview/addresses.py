"""Display helpers for ``Name <address>`` header values."""

from __future__ import annotations

import re

_ANGLE_ADDR = re.compile(r"<(.+)>")


def display_name(value: str | None) -> str:
    """Return the display part of *value*, or the value itself.

    ``"Alice <alice@example.com>"`` → ``"Alice"``; a bare address is
    returned unchanged and a missing one reads ``"Unknown"``.
    """
    if not value:
        return "Unknown"

    name, sep, _ = value.partition("<")
    if sep and name.strip():
        return name.strip()
    return value


def email_address(value: str | None) -> str | None:
    """Return the address between angle brackets, if any."""
    if not value:
        return None
    match = _ANGLE_ADDR.search(value)
    return match.group(1) if match else None
