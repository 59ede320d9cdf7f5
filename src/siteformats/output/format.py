"""Output format definitions.

An output format describes one representation of a page written to disk: the
media type (and thus the file suffix), the base file name, the value used in
``rel`` links and a few flags consumed by template selection and URL building.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_serializer

from siteformats.media.types import (
    CALENDAR_TYPE,
    CSS_TYPE,
    CSV_TYPE,
    HTML_TYPE,
    JSON_TYPE,
    RSS_TYPE,
    MediaType,
)

DEFAULT_BASE_NAME = "index"
DEFAULT_REL = "alternate"


class OutputFormat(BaseModel):
    """An output representation, usually to a file on disk."""

    model_config = ConfigDict(frozen=True)

    # Identifier. Built-in formats can be redefined by using the same name.
    name: str
    media_type: MediaType
    # Must be set when two or more formats share a media type for the same page.
    path: str = ""
    # Output file name used when not writing "ugly URLs".
    base_name: str = DEFAULT_BASE_NAME
    # Value for rel links, e.g. "canonical" or "amphtml".
    rel: str = DEFAULT_REL
    # URI scheme prefix such as "webcal://"; empty means the site's base URL scheme.
    protocol: str = ""
    # Parse templates as plain text rather than HTML.
    is_plain_text: bool = False
    # Member of the HTML family (HTML, AMP); used for alias redirects.
    is_html: bool = False
    # Ignore the global uglyURLs setting.
    no_ugly: bool = False

    @property
    def suffix(self) -> str:
        return self.media_type.suffix

    def base_filename(self) -> str:
        """Return the file name written for this format, e.g. ``index.html``."""
        return f"{self.base_name}.{self.media_type.suffix}"

    def use_ugly_urls(self, ugly_urls: bool) -> bool:
        """Return whether ugly URLs apply given the site-wide setting."""
        return ugly_urls and not self.no_ugly

    @field_serializer("media_type")
    def _serialize_media_type(self, media_type: MediaType) -> str:
        return str(media_type)


# See https://www.ampproject.org/learn/overview/
AMP_FORMAT = OutputFormat(
    name="AMP",
    media_type=HTML_TYPE,
    base_name="index",
    path="amp",
    rel="amphtml",
    is_html=True,
)

CALENDAR_FORMAT = OutputFormat(
    name="Calendar",
    media_type=CALENDAR_TYPE,
    is_plain_text=True,
    protocol="webcal://",
    base_name="index",
    rel="alternate",
)

CSS_FORMAT = OutputFormat(
    name="CSS",
    media_type=CSS_TYPE,
    base_name="styles",
    is_plain_text=True,
    rel="stylesheet",
)

CSV_FORMAT = OutputFormat(
    name="CSV",
    media_type=CSV_TYPE,
    base_name="index",
    is_plain_text=True,
    rel="alternate",
)

HTML_FORMAT = OutputFormat(
    name="HTML",
    media_type=HTML_TYPE,
    base_name="index",
    rel="canonical",
    is_html=True,
)

JSON_FORMAT = OutputFormat(
    name="JSON",
    media_type=JSON_TYPE,
    base_name="index",
    is_plain_text=True,
    rel="alternate",
)

RSS_FORMAT = OutputFormat(
    name="RSS",
    media_type=RSS_TYPE,
    base_name="index",
    no_ugly=True,
    rel="alternate",
)

BUILTIN_FORMATS: tuple[OutputFormat, ...] = (
    AMP_FORMAT,
    CALENDAR_FORMAT,
    CSS_FORMAT,
    CSV_FORMAT,
    HTML_FORMAT,
    JSON_FORMAT,
    RSS_FORMAT,
)
