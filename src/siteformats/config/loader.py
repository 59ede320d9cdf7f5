"""Load the output related settings from a site configuration file."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import ValidationError

from siteformats.config.exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError
from siteformats.config.settings import SiteConfig, normalize_config_keys

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("config.toml", "config.yaml", "config.yml", "config.json")


def find_site_config(start_dir: Path) -> Path | None:
    """Search upward for a site configuration file.

    Args:
        start_dir: Starting directory for upward search

    Returns:
        Path to the first ``config.{toml,yaml,yml,json}`` found, else None
    """
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        for filename in CONFIG_FILENAMES:
            config_path = candidate / filename
            if config_path.is_file():
                return config_path
    return None


def parse_site_config(text: str, suffix: str) -> dict[str, Any]:
    """Parse configuration text according to the file suffix.

    Raises:
        ValueError: If the suffix is unsupported, the text cannot be parsed or
            the document is not a mapping.
    """
    suffix = suffix.lower()
    if suffix == ".toml":
        data: Any = tomllib.loads(text)
    elif suffix in {".yml", ".yaml"}:
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text)
    else:
        msg = f"Unsupported configuration file type '{suffix}'"
        raise ValueError(msg)

    if not isinstance(data, dict):
        msg = f"Expected a mapping at the top level, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def load_site_config(config_path: Path | None = None) -> SiteConfig:
    """Load site settings from ``config_path``.

    Configuration priority (highest to lowest):
    1. Environment variables (SITEFORMATS_KEY)
    2. Config file
    3. Defaults

    Args:
        config_path: Path to a TOML, YAML or JSON file. None loads the defaults.

    Returns:
        Validated SiteConfig instance

    Raises:
        ConfigNotFoundError: If ``config_path`` does not exist.
        ConfigParseError: If the file cannot be read or parsed.
        ConfigValidationError: If the file contains invalid data.
    """
    file_data: dict[str, Any] = {}

    if config_path is not None:
        if not config_path.is_file():
            raise ConfigNotFoundError(config_path)

        logger.debug("Loading config from %s", config_path)
        try:
            raw_config = config_path.read_text(encoding="utf-8")
            file_data = parse_site_config(raw_config, config_path.suffix)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigParseError(config_path, str(e)) from e

    settings = {key: value for key, value in normalize_config_keys(file_data).items() if isinstance(key, str)}
    try:
        return SiteConfig(**settings)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(location_part) for location_part in error["loc"])
            logger.error("  %s: %s", loc, error["msg"])
        raise ConfigValidationError(e.errors()) from e
