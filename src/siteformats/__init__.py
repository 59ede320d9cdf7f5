"""siteformats: output format and media type registries for static sites."""

from siteformats.config import SiteConfig, load_site_config
from siteformats.media import DEFAULT_MEDIA_TYPES, MediaType, MediaTypes, decode_media_types
from siteformats.output import DEFAULT_FORMATS, OutputFormat, OutputFormats, decode_formats

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_FORMATS",
    "DEFAULT_MEDIA_TYPES",
    "MediaType",
    "MediaTypes",
    "OutputFormat",
    "OutputFormats",
    "SiteConfig",
    "decode_formats",
    "decode_media_types",
    "load_site_config",
]
