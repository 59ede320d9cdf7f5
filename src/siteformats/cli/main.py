"""Main Typer application for siteformats."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from siteformats.cli.errorhandler import handle_cli_errors
from siteformats.config import SiteConfig, find_site_config, load_site_config
from siteformats.logging_setup import configure_logging
from siteformats.output.formats import OutputFormats

console = Console()

app = typer.Typer(
    name="siteformats",
    help="Inspect the output formats of a static site configuration",
    add_completion=False,
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help=(
            "Site configuration file (TOML, YAML or JSON). Searched for upward from the current "
            "directory when omitted."
        ),
        dir_okay=False,
    ),
]


def _debug(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("debug", False))


def _load(config_path: Path | None) -> tuple[SiteConfig, OutputFormats]:
    if config_path is None:
        config_path = find_site_config(Path.cwd())
    config = load_site_config(config_path)
    return config, config.build_output_formats()


def _flags(is_plain_text: bool, is_html: bool, no_ugly: bool) -> str:
    flags = []
    if is_html:
        flags.append("html")
    if is_plain_text:
        flags.append("plain")
    if no_ugly:
        flags.append("noUgly")
    return ", ".join(flags)


@app.callback()
def main(
    ctx: typer.Context,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks on errors")] = False,
) -> None:
    configure_logging()
    ctx.obj = {"debug": debug}


@app.command("list")
def list_formats(
    ctx: typer.Context,
    config: ConfigOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the formats as JSON")] = False,
) -> None:
    """List all output formats, sorted by name."""
    with handle_cli_errors(debug=_debug(ctx)):
        _, formats = _load(config)

    if as_json:
        typer.echo(json.dumps(formats.to_list(), indent=2))
        return

    table = Table(title="Output Formats", show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Media Type", style="green")
    table.add_column("File", style="yellow")
    table.add_column("Rel")
    table.add_column("Path", style="dim")
    table.add_column("Protocol", style="dim")
    table.add_column("Flags", style="blue")

    for output_format in formats:
        table.add_row(
            output_format.name,
            str(output_format.media_type),
            output_format.base_filename(),
            output_format.rel,
            output_format.path,
            output_format.protocol,
            _flags(output_format.is_plain_text, output_format.is_html, output_format.no_ugly),
        )

    console.print(table)


@app.command("show")
def show_format(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Output format name (case insensitive)")],
    config: ConfigOption = None,
) -> None:
    """Print one output format as JSON."""
    with handle_cli_errors(debug=_debug(ctx)):
        _, formats = _load(config)
        [output_format] = formats.get_by_names(name)

    typer.echo(output_format.model_dump_json(indent=2))


@app.command("resolve")
def resolve_filename(
    ctx: typer.Context,
    filename: Annotated[str, typer.Argument(help="Template file name, e.g. 'single.amp.html'")],
    config: ConfigOption = None,
) -> None:
    """Print the output format a template file name resolves to."""
    with handle_cli_errors(debug=_debug(ctx)):
        _, formats = _load(config)

    output_format = formats.from_filename(filename)
    if output_format is None:
        console.print(f"[yellow]No output format for '{filename}'[/yellow]", highlight=False)
        raise typer.Exit(1)

    typer.echo(output_format.name)


@app.command("outputs")
def page_outputs(
    ctx: typer.Context,
    kind: Annotated[str, typer.Argument(help="Page kind: page, home, section, taxonomy, taxonomyterm")],
    config: ConfigOption = None,
) -> None:
    """Print the output formats written for a page kind."""
    with handle_cli_errors(debug=_debug(ctx)):
        site_config, formats = _load(config)
        resolved = site_config.resolve_outputs(formats, kind)

    for output_format in resolved:
        filename = output_format.base_filename()
        if output_format.path:
            filename = f"{output_format.path}/{filename}"
        typer.echo(f"{output_format.name}\t{filename}")


def run() -> None:
    """Entry point used by the console script."""
    app()
