"""Site configuration for output formats and media types.

The settings mirror the output related keys of a static site configuration
file::

    uglyURLs = false

    [mediaTypes."text/enriched"]
    suffix = "enr"

    [outputFormats.Enriched]
    mediaType = "text/enriched"
    baseName = "index"
    isPlainText = true

    [outputs]
    home = ["HTML", "RSS", "Enriched"]

Top-level keys are matched case insensitively (``outputFormats``,
``output_formats``). Environment variables prefixed ``SITEFORMATS_`` take
precedence over file values, e.g. ``SITEFORMATS_UGLY_URLS=true``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from siteformats.media.types import MediaTypes, decode_media_types
from siteformats.output.decode import decode_formats, normalize_key
from siteformats.output.format import OutputFormat
from siteformats.output.formats import OutputFormats

logger = logging.getLogger(__name__)

# Output formats written per page kind when the site does not configure them.
DEFAULT_OUTPUTS: Final[dict[str, tuple[str, ...]]] = {
    "page": ("HTML",),
    "home": ("HTML", "RSS"),
    "section": ("HTML", "RSS"),
    "taxonomy": ("HTML", "RSS"),
    "taxonomyterm": ("HTML", "RSS"),
}
FALLBACK_OUTPUTS: Final[tuple[str, ...]] = ("HTML",)

_CONFIG_KEYS: Final[dict[str, str]] = {
    "outputformats": "output_formats",
    "mediatypes": "media_types",
    "outputs": "outputs",
    "uglyurls": "ugly_urls",
}


def normalize_config_keys(data: Mapping[Any, Any]) -> dict[Any, Any]:
    """Rename known top-level keys to their field names, leaving other keys as they are."""
    normalized: dict[Any, Any] = {}
    for key, value in data.items():
        field = _CONFIG_KEYS.get(normalize_key(key)) if isinstance(key, str) else None
        normalized[field or key] = value
    return normalized


class SiteConfig(BaseSettings):
    """Output related settings of a site."""

    output_formats: dict[str, Any] = Field(
        default_factory=dict,
        description="Output format definitions keyed by format name, merged onto the built-in formats",
    )
    media_types: dict[str, Any] = Field(
        default_factory=dict,
        description="Media type definitions keyed by 'main/sub' type, merged onto the built-in media types",
    )
    outputs: dict[str, list[str]] = Field(
        default_factory=dict,
        validate_default=True,
        description="Output format names per page kind",
    )
    ugly_urls: bool = Field(
        default=False,
        description="Write 'section/page.html' instead of 'section/page/index.html'",
    )

    model_config = SettingsConfigDict(
        extra="ignore",  # A whole site config may be passed in
        frozen=True,
        env_prefix="SITEFORMATS_",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment > config file values passed as keyword arguments > defaults
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return normalize_config_keys(data)
        return data

    @field_validator("output_formats", "media_types", "outputs", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        # A bare ``outputFormats:`` in YAML means no overrides.
        return {} if value is None else value

    @field_validator("outputs", mode="after")
    @classmethod
    def _merge_default_outputs(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        merged = {kind: list(names) for kind, names in DEFAULT_OUTPUTS.items()}
        merged.update({kind.casefold(): list(names) for kind, names in value.items()})
        return merged

    def outputs_for(self, kind: str) -> list[str]:
        """Return the output format names configured for a page kind."""
        names = self.outputs.get(kind.casefold())
        if names is None:
            logger.debug("No outputs configured for page kind %r, using %s", kind, FALLBACK_OUTPUTS)
            return list(FALLBACK_OUTPUTS)
        return list(names)

    def build_media_types(self) -> MediaTypes:
        """Merge the configured media types onto the built-in ones."""
        return decode_media_types(self.media_types)

    def build_output_formats(self, media_types: MediaTypes | None = None) -> OutputFormats:
        """Merge the configured output formats onto the built-in ones.

        Args:
            media_types: Registry used to resolve media types. Defaults to
                :meth:`build_media_types`.

        Raises:
            MediaTypeNotFoundError: If a format references an unknown media type.
            FormatDecodeError: If a format definition is malformed.
        """
        if media_types is None:
            media_types = self.build_media_types()
        formats = decode_formats(media_types, self.output_formats)
        logger.debug("Built %d output formats: %s", len(formats), ", ".join(formats.names()))
        return formats

    def resolve_outputs(self, formats: OutputFormats, kind: str) -> list[OutputFormat]:
        """Return the output formats written for a page kind.

        Raises:
            FormatNotFoundError: If a configured name is not in ``formats``.
        """
        return formats.get_by_names(*self.outputs_for(kind))
