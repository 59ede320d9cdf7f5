"""Merge output format configuration onto the built-in formats.

Override maps come straight from a site configuration file: keys are format
names and values are loosely typed attribute bags such as
``{"baseName": "home", "isPlainText": "true"}``. Attribute keys are matched
case insensitively and unknown keys are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator, model_validator

from siteformats.media.exceptions import MediaTypeNotFoundError
from siteformats.media.types import DEFAULT_MEDIA_TYPES, HTML_TYPE, MediaType, MediaTypes
from siteformats.output.exceptions import FormatDecodeError
from siteformats.output.format import DEFAULT_BASE_NAME, DEFAULT_REL, OutputFormat
from siteformats.output.formats import DEFAULT_FORMATS, OutputFormats

logger = logging.getLogger(__name__)

__all__ = ["FormatOverride", "decode_formats", "normalize_key"]


def normalize_key(key: str) -> str:
    """Fold a configuration key so ``baseName``, ``base_name`` and ``BASENAME`` compare equal."""
    return key.replace("_", "").replace("-", "").casefold()


# Normalized configuration key -> OutputFormat field
_OVERRIDE_FIELDS: Final[dict[str, str]] = {
    "mediatype": "media_type",
    "path": "path",
    "basename": "base_name",
    "rel": "rel",
    "protocol": "protocol",
    "isplaintext": "is_plain_text",
    "ishtml": "is_html",
    "nougly": "no_ugly",
}


class FormatOverride(BaseModel):
    """The attributes of an output format that configuration may set.

    Only the attributes present in the input end up in ``model_fields_set``,
    which is exactly what gets overwritten on an existing format.
    Validate with ``context={"media_types": ...}`` to resolve media type
    identifiers against a custom registry.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    media_type: MediaType = HTML_TYPE
    path: str = ""
    base_name: str = DEFAULT_BASE_NAME
    rel: str = DEFAULT_REL
    protocol: str = ""
    is_plain_text: bool = False
    is_html: bool = False
    no_ugly: bool = False

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            return data

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            field = _OVERRIDE_FIELDS.get(normalize_key(key)) if isinstance(key, str) else None
            if field is None:
                logger.debug("Ignoring unknown output format attribute %r", key)
                continue
            normalized[field] = value
        return normalized

    @field_validator("media_type", mode="before")
    @classmethod
    def _resolve_media_type(cls, value: Any, info: ValidationInfo) -> Any:
        if not isinstance(value, str):
            return value
        context = info.context or {}
        media_types: MediaTypes = context.get("media_types", DEFAULT_MEDIA_TYPES)
        media_type = media_types.get_by_type(value)
        if media_type is None:
            raise MediaTypeNotFoundError(value)
        return media_type


def _decode_override(name: str, value: Any, media_types: MediaTypes) -> dict[str, Any]:
    try:
        override = FormatOverride.model_validate(value, context={"media_types": media_types})
    except ValidationError as e:
        raise FormatDecodeError(name, e.errors()) from e
    # Keep field values as validated (model_dump would turn the media type into a dict).
    return {field: getattr(override, field) for field in override.model_fields_set}


def _new_format(name: str, updates: dict[str, Any]) -> OutputFormat:
    if "media_type" not in updates:
        raise FormatDecodeError(
            name,
            [{"loc": ("media_type",), "msg": "Field required", "type": "missing"}],
        )

    fields = {**updates, "name": name}
    # New formats need values for these even when configured empty.
    fields["base_name"] = fields.get("base_name") or DEFAULT_BASE_NAME
    fields["rel"] = fields.get("rel") or DEFAULT_REL

    try:
        return OutputFormat.model_validate(fields)
    except ValidationError as e:
        raise FormatDecodeError(name, e.errors()) from e


def decode_formats(media_types: MediaTypes, *maps: Mapping[str, Any]) -> OutputFormats:
    """Merge output format configurations, in the order given, onto the defaults.

    Formats are matched by name, case insensitively. A match gets only the
    configured attributes overwritten; an unknown name adds a new format
    whose base name defaults to "index" and rel to "alternate".

    Args:
        media_types: Registry used to resolve ``mediaType`` identifiers.
        *maps: Mappings of format name to format attributes.

    Returns:
        A new collection sorted by name. The built-in formats are left untouched.

    Raises:
        MediaTypeNotFoundError: If a ``mediaType`` is not in ``media_types``.
        FormatDecodeError: If an override cannot be decoded.
    """
    formats = list(DEFAULT_FORMATS)

    for overrides in maps:
        for name, value in overrides.items():
            if not isinstance(name, str):
                raise FormatDecodeError(
                    str(name),
                    [{"loc": (), "msg": "Output format name must be a string", "type": "string_type"}],
                )
            updates = _decode_override(name, value, media_types)
            wanted = name.casefold()
            found = False
            for i, existing in enumerate(formats):
                if existing.name.casefold() == wanted:
                    logger.debug("Amending output format %s with %s", existing.name, sorted(updates))
                    formats[i] = existing.model_copy(update=updates)
                    found = True

            if not found:
                logger.debug("Adding output format %s", name)
                formats.append(_new_format(name, updates))

    return OutputFormats(formats)

