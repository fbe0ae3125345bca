"""RFC 2047 encoded-word decoding for header values."""

from __future__ import annotations

import base64
import binascii
import re

_FOLDING = re.compile(r"\r?\n[\t ]+")
_BETWEEN_WORDS = re.compile(r"(\?=)\s+(=\?)")
_ENCODED_WORD = re.compile(r"=\?([^?]+)\?([BbQq])\?([^?]*)\?=")
_Q_HEX_RUN = re.compile(r"(?:=[0-9A-Fa-f]{2})+")


def decode_rfc2047(value: str) -> str:
    """Decode every ``=?charset?enc?text?=`` word in *value*.

    Folded lines are unfolded first and whitespace between adjacent
    encoded words is dropped.  Decoding is best-effort: invalid base64
    leaves the encoded word as it was, and undecodable bytes become
    replacement characters.
    """
    unfolded = _FOLDING.sub(" ", value)
    unfolded = _BETWEEN_WORDS.sub(r"\1\2", unfolded)
    return _ENCODED_WORD.sub(_decode_word, unfolded)


def _decode_word(match: re.Match[str]) -> str:
    charset, encoding, text = match.groups()
    charset = _normalize_charset(charset)

    if encoding.upper() == "Q":
        return _decode_q(text, charset)

    try:
        payload = base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except (binascii.Error, ValueError):
        return match.group(0)
    return _decode_bytes(payload, charset, fallback="utf-8")


def _decode_q(text: str, charset: str) -> str:
    # only =XX runs are bytes; literal characters pass through as they are
    return _Q_HEX_RUN.sub(
        lambda m: _decode_bytes(
            bytes.fromhex(m.group(0).replace("=", "")), charset, fallback="latin-1"
        ),
        text.replace("_", " "),
    )


def _normalize_charset(charset: str) -> str:
    # RFC 2231 allows a language suffix: utf-8*en
    return charset.split("*", 1)[0].strip()


def _decode_bytes(payload: bytes, charset: str, *, fallback: str) -> str:
    try:
        return payload.decode(charset, errors="replace")
    except (LookupError, UnicodeError):
        return payload.decode(fallback, errors="replace")
