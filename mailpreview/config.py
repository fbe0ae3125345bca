"""Parser configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ParserConfig(BaseSettings):
    """Settings for :class:`mailpreview.parser.MailParser` and the CLI."""

    model_config = {"env_prefix": "MAILPREVIEW_"}

    max_depth: int = Field(
        default=20,
        ge=1,
        description="Maximum nesting depth of multipart sections to descend into",
    )
    trace: bool = Field(
        default=False,
        description="Emit parser trace events as debug log lines",
    )
    log_json: bool = Field(
        default=True,
        description="Render log lines as JSON (False for the console renderer)",
    )
    log_level: str = Field(default="INFO", description="Root log level name")
