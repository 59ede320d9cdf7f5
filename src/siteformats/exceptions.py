"""Centralized exceptions for the siteformats package."""


class SiteFormatsError(Exception):
    """Base exception for all siteformats errors."""
