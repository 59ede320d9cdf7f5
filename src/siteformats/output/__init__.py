"""Output formats: what files to write for a page and how to name them."""

from siteformats.output.decode import FormatOverride, decode_formats
from siteformats.output.exceptions import FormatDecodeError, FormatNotFoundError, OutputFormatError
from siteformats.output.format import (
    AMP_FORMAT,
    BUILTIN_FORMATS,
    CALENDAR_FORMAT,
    CSS_FORMAT,
    CSV_FORMAT,
    HTML_FORMAT,
    JSON_FORMAT,
    RSS_FORMAT,
    OutputFormat,
)
from siteformats.output.formats import DEFAULT_FORMATS, OutputFormats

__all__ = [
    "AMP_FORMAT",
    "BUILTIN_FORMATS",
    "CALENDAR_FORMAT",
    "CSS_FORMAT",
    "CSV_FORMAT",
    "DEFAULT_FORMATS",
    "HTML_FORMAT",
    "JSON_FORMAT",
    "RSS_FORMAT",
    "FormatDecodeError",
    "FormatNotFoundError",
    "FormatOverride",
    "OutputFormat",
    "OutputFormatError",
    "OutputFormats",
    "decode_formats",
]
