"""Media type registry used by output formats."""

from siteformats.media.exceptions import InvalidMediaTypeError, MediaTypeError, MediaTypeNotFoundError
from siteformats.media.types import (
    CALENDAR_TYPE,
    CSS_TYPE,
    CSV_TYPE,
    DEFAULT_MEDIA_TYPES,
    HTML_TYPE,
    JAVASCRIPT_TYPE,
    JSON_TYPE,
    RSS_TYPE,
    TEXT_TYPE,
    XML_TYPE,
    MediaType,
    MediaTypes,
    decode_media_types,
)

__all__ = [
    "CALENDAR_TYPE",
    "CSS_TYPE",
    "CSV_TYPE",
    "DEFAULT_MEDIA_TYPES",
    "HTML_TYPE",
    "JAVASCRIPT_TYPE",
    "JSON_TYPE",
    "RSS_TYPE",
    "TEXT_TYPE",
    "XML_TYPE",
    "InvalidMediaTypeError",
    "MediaType",
    "MediaTypeError",
    "MediaTypeNotFoundError",
    "MediaTypes",
    "decode_media_types",
]
