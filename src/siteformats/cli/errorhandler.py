"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from siteformats.config.exceptions import ConfigError, ConfigValidationError
from siteformats.media.exceptions import MediaTypeError
from siteformats.output.exceptions import FormatDecodeError, FormatNotFoundError

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise the error. If False, print user-friendly error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except FormatNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]Unknown Output Format:[/bold red] {e}")
        raise typer.Exit(1) from e
    except FormatDecodeError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Output Format:[/bold red] {e}")
        for err in e.errors:
            loc = " -> ".join(str(part) for part in err.get("loc", ()))
            console.print(f"  - {loc}: {err.get('msg', '')}")
        raise typer.Exit(1) from e
    except MediaTypeError as e:
        if debug:
            raise
        console.print(f"[bold red]Media Type Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ConfigValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Configuration:[/bold red] {e}")
        for err in e.errors:
            loc = " -> ".join(str(part) for part in err.get("loc", ()))
            console.print(f"  - {loc}: {err.get('msg', '')}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
