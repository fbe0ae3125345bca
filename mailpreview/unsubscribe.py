"""List-Unsubscribe (RFC 2369) header resolution."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, unquote, urlsplit

import structlog

from .encoded_words import decode_rfc2047
from .models import MailtoTarget, ParsedMail, UnsubscribeTarget, UrlTarget

logger = structlog.get_logger()

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_WHITESPACE_OR_CONTROL = re.compile(r"[\s\x00-\x1f\x7f]")
_HOST_REQUIRED = frozenset({"http", "https", "ftp", "ws", "wss"})


class InvalidTargetError(ValueError):
    """Raised internally when an unsubscribe token is not an absolute URL."""


def parse_list_unsubscribe(raw_header: str) -> list[UnsubscribeTarget]:
    """Split a ``List-Unsubscribe`` value into mailto and URL targets.

    Tokens that do not parse as absolute URLs are logged and dropped;
    the remaining targets keep their header order.

    A token containing whitespace or control characters is rejected
    outright, which is stricter than a browser URL parser (it would accept
    e.g. ``mailto:a@b.com?subject=stop now``).  Senders are expected to
    percent-encode such characters.
    """
    targets: list[UnsubscribeTarget] = []

    for token in _split_tokens(decode_rfc2047(raw_header)):
        try:
            targets.append(_parse_target(token))
        except InvalidTargetError as exc:
            logger.warning("unsubscribe_target_invalid", token=token, error=str(exc))

    return targets


def unsubscribe_targets(mail: ParsedMail) -> list[UnsubscribeTarget]:
    """Resolve the ``List-Unsubscribe`` header of *mail*, empty when absent."""
    raw = mail.list_unsubscribe
    if raw is None:
        return []
    return parse_list_unsubscribe(raw)


def _split_tokens(value: str) -> list[str]:
    tokens = []
    for piece in value.split(","):
        token = piece.strip()
        if token.startswith("<"):
            token = token[1:]
        if token.endswith(">"):
            token = token[:-1]
        if token:
            tokens.append(token)
    return tokens


def _parse_target(token: str) -> UnsubscribeTarget:
    if _WHITESPACE_OR_CONTROL.search(token):
        raise InvalidTargetError("contains whitespace")

    try:
        url = urlsplit(token)
    except ValueError as exc:
        raise InvalidTargetError(str(exc)) from exc

    if not _SCHEME.match(url.scheme):
        raise InvalidTargetError("missing scheme")
    if url.scheme in _HOST_REQUIRED and not url.hostname:
        raise InvalidTargetError("missing host")

    if url.scheme == "mailto":
        subject: str | None = None
        params: list[tuple[str, str]] = []
        for key, value in parse_qsl(url.query, keep_blank_values=True):
            if key == "subject":
                if subject is None:
                    subject = value
            else:
                params.append((key, value))
        return MailtoTarget(
            address=unquote(url.path),
            subject=subject,
            params=params,
            raw=token,
        )

    return UrlTarget(url=token, raw=token)
