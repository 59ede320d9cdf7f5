"""Custom exceptions for the media type registry."""

from siteformats.exceptions import SiteFormatsError


class MediaTypeError(SiteFormatsError):
    """Base class for media type errors."""


class MediaTypeNotFoundError(MediaTypeError):
    """Raised when a media type identifier is not present in the registry."""

    def __init__(self, media_type: str) -> None:
        self.media_type = media_type
        super().__init__(f"Media type '{media_type}' not found.")


class InvalidMediaTypeError(MediaTypeError):
    """Raised when a media type definition cannot be decoded."""

    def __init__(self, media_type: str, reason: str) -> None:
        self.media_type = media_type
        self.reason = reason
        super().__init__(f"Invalid media type '{media_type}': {reason}")
