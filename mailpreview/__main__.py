"""Entry point for the mailpreview debug CLI.

Usage::

    python -m mailpreview message.eml   # parse a raw message file
    python -m mailpreview -             # parse a raw message from stdin

Prints ``{"mail": ..., "unsubscribe": [...]}`` as JSON on stdout.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import structlog

from .config import ParserConfig
from .logging import setup_logging
from .parser import MailParser
from .unsubscribe import unsubscribe_targets

logger = structlog.get_logger()


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python -m mailpreview <raw-message-file|->", file=sys.stderr)
        sys.exit(1)

    config = ParserConfig()
    setup_logging(json=config.log_json, level=config.log_level)

    source = args[0]
    try:
        if source == "-":
            raw = sys.stdin.buffer.read()
        else:
            raw = Path(source).read_bytes()
    except OSError as exc:
        logger.error("raw_message_unreadable", source=source, error=str(exc))
        sys.exit(1)

    parsed = MailParser(config).parse(raw.decode("utf-8", errors="replace"))

    output = {
        "mail": parsed.model_dump(mode="json"),
        "unsubscribe": [t.model_dump(mode="json") for t in unsubscribe_targets(parsed)],
    }
    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
