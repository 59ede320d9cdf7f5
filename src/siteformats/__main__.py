"""Allow ``python -m siteformats``."""

from siteformats.cli.main import app

if __name__ == "__main__":
    app()
