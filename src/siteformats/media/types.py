"""Media types referenced by output formats.

A media type is identified by its canonical ``main/sub`` string (``text/html``)
and carries the file suffix used when writing files of that type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from pydantic import BaseModel, ConfigDict

from siteformats.media.exceptions import InvalidMediaTypeError

logger = logging.getLogger(__name__)

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
    "MediaType",
    "MediaTypes",
    "decode_media_types",
]


class MediaType(BaseModel):
    """A media type such as ``text/html`` with its file suffix."""

    model_config = ConfigDict(frozen=True)

    main_type: str
    sub_type: str
    suffix: str

    @property
    def type(self) -> str:
        """Return the canonical ``main/sub`` identifier."""
        return f"{self.main_type}/{self.sub_type}"

    def __str__(self) -> str:
        return self.type


CALENDAR_TYPE = MediaType(main_type="text", sub_type="calendar", suffix="ics")
CSS_TYPE = MediaType(main_type="text", sub_type="css", suffix="css")
CSV_TYPE = MediaType(main_type="text", sub_type="csv", suffix="csv")
HTML_TYPE = MediaType(main_type="text", sub_type="html", suffix="html")
JAVASCRIPT_TYPE = MediaType(main_type="application", sub_type="javascript", suffix="js")
JSON_TYPE = MediaType(main_type="application", sub_type="json", suffix="json")
RSS_TYPE = MediaType(main_type="application", sub_type="rss", suffix="xml")
XML_TYPE = MediaType(main_type="application", sub_type="xml", suffix="xml")
TEXT_TYPE = MediaType(main_type="text", sub_type="plain", suffix="txt")


class MediaTypes(Sequence[MediaType]):
    """Immutable collection of media types, ordered by canonical type."""

    __slots__ = ("_types",)

    def __init__(self, types: Iterable[MediaType] = ()) -> None:
        self._types: tuple[MediaType, ...] = tuple(sorted(types, key=lambda t: t.type))

    @overload
    def __getitem__(self, index: int) -> MediaType: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[MediaType, ...]: ...

    def __getitem__(self, index: int | slice) -> MediaType | tuple[MediaType, ...]:
        return self._types[index]

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[MediaType]:
        return iter(self._types)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MediaTypes):
            return self._types == other._types
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._types)

    def __repr__(self) -> str:
        return f"MediaTypes([{', '.join(t.type for t in self._types)}])"

    def get_by_type(self, media_type: str) -> MediaType | None:
        """Get a media type by its canonical identifier, e.g. ``text/html``.

        The lookup is case insensitive.
        """
        wanted = media_type.casefold()
        for candidate in self._types:
            if candidate.type.casefold() == wanted:
                return candidate
        return None


DEFAULT_MEDIA_TYPES = MediaTypes(
    [
        CALENDAR_TYPE,
        CSS_TYPE,
        CSV_TYPE,
        HTML_TYPE,
        JAVASCRIPT_TYPE,
        JSON_TYPE,
        RSS_TYPE,
        XML_TYPE,
        TEXT_TYPE,
    ]
)


def _parse_type(media_type: str) -> tuple[str, str]:
    main_type, sep, sub_type = media_type.partition("/")
    if not sep or not main_type or not sub_type or "/" in sub_type:
        raise InvalidMediaTypeError(media_type, "expected the form 'main/sub'")
    return main_type, sub_type


def _decode_suffix(media_type: str, value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise InvalidMediaTypeError(media_type, f"expected a mapping, got {type(value).__name__}")
    for key, suffix in value.items():
        if isinstance(key, str) and key.casefold() == "suffix":
            if not isinstance(suffix, str):
                raise InvalidMediaTypeError(media_type, "suffix must be a string")
            return suffix.lstrip(".")
    return None


def decode_media_types(*maps: Mapping[str, Any]) -> MediaTypes:
    """Merge media type definitions, in the order given, onto the defaults.

    Each key is a canonical media type (``text/enriched``) and each value a
    mapping holding its ``suffix``. Known types get their suffix replaced;
    unknown types are added.

    Raises:
        InvalidMediaTypeError: If a key is not of the form ``main/sub`` or a
            new type has no suffix.
    """
    types = list(DEFAULT_MEDIA_TYPES)

    for overrides in maps:
        for key, value in overrides.items():
            suffix = _decode_suffix(key, value)
            wanted = key.casefold()
            found = False
            for i, existing in enumerate(types):
                if existing.type.casefold() == wanted:
                    found = True
                    if suffix is not None:
                        logger.debug("Amending media type %s with suffix %r", existing.type, suffix)
                        types[i] = existing.model_copy(update={"suffix": suffix})

            if not found:
                main_type, sub_type = _parse_type(key)
                if not suffix:
                    raise InvalidMediaTypeError(key, "a suffix is required")
                logger.debug("Adding media type %s with suffix %r", key, suffix)
                types.append(MediaType(main_type=main_type, sub_type=sub_type, suffix=suffix))

    return MediaTypes(types)
