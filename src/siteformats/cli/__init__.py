"""Command line interface for siteformats."""
