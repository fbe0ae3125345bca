"""Shared test fixtures for the mailpreview test suite."""

from __future__ import annotations

from email.mime.base import MIMEBase
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email import encoders

import pytest

from mailpreview.config import ParserConfig


@pytest.fixture
def parser_config() -> ParserConfig:
    return ParserConfig(max_depth=20, trace=False, log_json=True, log_level="INFO")


class TraceRecorder:
    """Collects trace events as ``(event, fields)`` tuples."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def __call__(self, event: str, **fields) -> None:
        self.events.append((event, fields))

    def names(self) -> list[str]:
        return [event for event, _ in self.events]


@pytest.fixture
def trace() -> TraceRecorder:
    return TraceRecorder()


# ------------------------------------------------------------------
# Sample raw message builders
# ------------------------------------------------------------------


def build_multipart_message(
    *,
    body_text: str = "Plain body",
    body_html: str = "<p>HTML body</p>",
    attachments: list[tuple[str, str, bytes]] | None = None,
) -> str:
    """Build a multipart/mixed message wrapping a text/HTML alternative."""
    msg = MIMEMultipart("mixed")
    msg["Subject"] = "Multipart Email"
    msg["From"] = "Sender <sender@example.com>"
    msg["To"] = "recipient@example.com"
    msg["Message-ID"] = "<multi-001@example.com>"

    alt = MIMEMultipart("alternative")
    alt.attach(MIMEText(body_text, "plain"))
    alt.attach(MIMEText(body_html, "html"))
    msg.attach(alt)

    for filename, content_type, payload in attachments or []:
        maintype, subtype = content_type.split("/", 1)
        part = MIMEBase(maintype, subtype)
        part.set_payload(payload)
        encoders.encode_base64(part)
        part.add_header("Content-Disposition", "attachment", filename=filename)
        msg.attach(part)

    return msg.as_string()


PLAIN_MESSAGE = (
    "From: Alice <alice@example.com>\r\n"
    "To: bob@example.com\r\n"
    "Subject: Lunch\r\n"
    "Content-Type: text/plain; charset=utf-8\r\n"
    "\r\n"
    "Are we still on for noon?\r\n"
    "-- \r\n"
    "Alice\r\n"
)

MULTIPART_MESSAGE = (
    "From: news@example.com\n"
    "Subject: Weekly digest\n"
    "List-Unsubscribe: <mailto:unsub@example.com?subject=unsub>,\n"
    " <https://example.com/unsub>\n"
    'Content-Type: multipart/alternative; boundary="b1"\n'
    "\n"
    "This is a multi-part message in MIME format.\n"
    "--b1\n"
    "Content-Type: text/plain; charset=utf-8\n"
    "\n"
    "Hello in plain text.\n"
    "--b1\n"
    "Content-Type: text/html; charset=utf-8\n"
    "\n"
    "<p>Hello in HTML.</p>\n"
    "--b1--\n"
    "epilogue\n"
)

NESTED_MESSAGE = (
    "Subject: Nested\r\n"
    'Content-Type: multipart/mixed; boundary="outer"\r\n'
    "\r\n"
    "--outer\r\n"
    'Content-Type: multipart/alternative; boundary="inner"\r\n'
    "\r\n"
    "--inner\r\n"
    "Content-Type: text/plain\r\n"
    "\r\n"
    "plain\r\n"
    "--inner\r\n"
    "Content-Type: text/html\r\n"
    "\r\n"
    "<b>html</b>\r\n"
    "--inner--\r\n"
    "--outer--\r\n"
)


@pytest.fixture
def plain_message() -> str:
    return PLAIN_MESSAGE


@pytest.fixture
def multipart_message() -> str:
    return MULTIPART_MESSAGE


@pytest.fixture
def nested_message() -> str:
    return NESTED_MESSAGE


@pytest.fixture
def built_multipart_message() -> str:
    return build_multipart_message(
        attachments=[
            ("report.pdf", "application/pdf", b"%PDF-1.4 fake pdf content"),
            ("data.csv", "text/csv", b"col1,col2\na,b\n"),
        ],
    )
