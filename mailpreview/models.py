"""Parse results produced from a raw email message."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class MailPart(BaseModel):
    """A single leaf content unit of a message.

    Nested multipart containers never appear here; their leaves are
    flattened into the parent's part list.
    """

    model_config = {"frozen": True}

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers local to this part, keyed by lower-cased name",
    )
    content: str = Field(default="", description="Raw, undecoded body text of the part")
    content_type: str = Field(
        default="",
        description="Raw Content-Type header value, empty when absent",
    )


class ParsedMail(BaseModel):
    """Structured representation of a raw email message."""

    model_config = {"frozen": True}

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Top-level headers, keyed by lower-cased name",
    )
    parts: list[MailPart] = Field(
        default_factory=list,
        description="Leaf parts in order of appearance",
    )

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive lookup of a top-level header."""
        return self.headers.get(name.lower(), default)

    @property
    def list_unsubscribe(self) -> str | None:
        return self.headers.get("list-unsubscribe") or None


class MailtoTarget(BaseModel):
    """Unsubscribe by sending a mail."""

    model_config = {"frozen": True}

    kind: Literal["mailto"] = "mailto"
    address: str = Field(description="Percent-decoded recipient address")
    subject: str | None = Field(default=None, description="Requested subject line")
    params: list[tuple[str, str]] = Field(
        default_factory=list,
        description="Other query parameters in original order, subject excluded",
    )
    raw: str = Field(description="Original token, trimmed and bracket-stripped")


class UrlTarget(BaseModel):
    """Unsubscribe by visiting a URL."""

    model_config = {"frozen": True}

    kind: Literal["url"] = "url"
    url: str
    raw: str


UnsubscribeTarget = Annotated[Union[MailtoTarget, UrlTarget], Field(discriminator="kind")]
