"""Custom exceptions for output formats."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from siteformats.exceptions import SiteFormatsError


class OutputFormatError(SiteFormatsError):
    """Base class for output format errors."""


class FormatNotFoundError(OutputFormatError):
    """Raised when an output format name is not present in a collection."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Output format with key '{name}' not found.")


class FormatDecodeError(OutputFormatError):
    """Raised when an output format override cannot be decoded."""

    def __init__(self, name: str, errors: Sequence[Any] | None = None) -> None:
        self.name = name
        self.errors = list(errors or [])
        super().__init__(f"Failed to decode output format '{name}' with {len(self.errors)} error(s).")
