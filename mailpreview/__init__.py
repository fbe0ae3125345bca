"""mailpreview: raw email parsing for the inbox preview pane.

Public API re-exported here for convenience::

    from mailpreview import extract_mail, parse_list_unsubscribe
"""

from .addresses import display_name, email_address
from .config import ParserConfig
from .encoded_words import decode_rfc2047
from .headers import parse_headers
from .logging import setup_logging
from .models import MailPart, MailtoTarget, ParsedMail, UnsubscribeTarget, UrlTarget
from .multipart import SkippedSection, extract_boundary, parse_multipart
from .parser import MailParser, extract_mail
from .trace import TraceHook, noop_trace
from .unsubscribe import parse_list_unsubscribe, unsubscribe_targets

__all__ = [
    "MailParser",
    "MailPart",
    "MailtoTarget",
    "ParsedMail",
    "ParserConfig",
    "SkippedSection",
    "TraceHook",
    "UnsubscribeTarget",
    "UrlTarget",
    "decode_rfc2047",
    "display_name",
    "email_address",
    "extract_boundary",
    "extract_mail",
    "noop_trace",
    "parse_headers",
    "parse_list_unsubscribe",
    "parse_multipart",
    "setup_logging",
    "unsubscribe_targets",
]
