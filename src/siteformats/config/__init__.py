"""Site configuration: loading and validating output related settings."""

from siteformats.config.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from siteformats.config.loader import find_site_config, load_site_config, parse_site_config
from siteformats.config.settings import DEFAULT_OUTPUTS, FALLBACK_OUTPUTS, SiteConfig

__all__ = [
    "DEFAULT_OUTPUTS",
    "FALLBACK_OUTPUTS",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "SiteConfig",
    "find_site_config",
    "load_site_config",
    "parse_site_config",
]
