#!/usr/bin/env python3
"""
tridinspect CLI - Command Line Interface
"""

import sys

import click
from rich.console import Console

from .__version__ import __author__, __license__, __version__
from .application import scan_files
from .config import Config
from .core import TridScanner
from .utils.logger import configure_logging_levels, get_logger, setup_logger
from .utils.output import OutputFormatter

console = Console()
logger = get_logger(__name__)


def print_version() -> None:
    console.print(f"[bold cyan]tridinspect[/bold cyan] version [bold green]{__version__}[/bold green]")
    console.print(f"Author: {__author__}")
    console.print(f"License: {__license__}")


def display_results(results, quiet: bool) -> None:
    """Print one table per scanned file, errors in red"""
    for result in results:
        error = result["error"]
        if error:
            console.print(f"[bold red]{result['file']}:[/bold red] {error['message']}")
            continue
        if not result["matches"]:
            if not quiet:
                console.print(f"[yellow]{result['file']}: no matches reported[/yellow]")
            continue
        console.print(OutputFormatter.match_table(result))


@click.command()
@click.argument("files", nargs=-1, type=click.Path())
@click.option(
    "-n", "--matches", type=int, default=None, help="Maximum number of matches per file"
)
@click.option("-d", "--definitions", help="Path to an alternate TrID definitions package")
@click.option("--cmd", help="TrID executable name or path")
@click.option("--timeout", type=float, help="TrID execution timeout in seconds")
@click.option(
    "--threads",
    type=click.IntRange(1, 50),
    default=None,
    help="Number of files scanned in parallel (1-50)",
)
@click.option("-j", "--json", "output_json", is_flag=True, help="Output results as JSON")
@click.option("-c", "--csv", "output_csv", is_flag=True, help="Output results as CSV")
@click.option("--config", "config_path", help="Custom config file path")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Suppress non-critical output")
@click.option("--version", is_flag=True, help="Show version information and exit")
def main(
    files,
    matches,
    definitions,
    cmd,
    timeout,
    threads,
    output_json,
    output_csv,
    config_path,
    verbose,
    quiet,
    version,
):
    """Identify FILES with TrID."""
    if version:
        print_version()
        sys.exit(0)

    if not files:
        raise click.UsageError("at least one file is required")
    if output_json and output_csv:
        raise click.UsageError("--json and --csv are mutually exclusive")

    setup_logger()
    configure_logging_levels(verbose, quiet, console=not (output_json or output_csv))

    try:
        config = Config(config_path)
        options = config.scan_options(cmd=cmd, definitions=definitions, timeout=timeout)
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(str(exc)) from exc

    max_matches = matches if matches is not None else config.get("scan", "max_matches")
    workers = threads or config.get("scan", "threads")

    scanner = TridScanner(options)
    items = scan_files(scanner, list(files), max_matches, max_workers=workers)
    results = [item.to_dict() for item in items]

    formatter = OutputFormatter(results)
    if output_json:
        click.echo(formatter.to_json(indent=config.get("output", "json_indent")))
    elif output_csv:
        click.echo(formatter.to_csv(delimiter=config.get("output", "csv_delimiter")), nl=False)
    else:
        display_results(results, quiet)

    failed = [item for item in items if not item.ok]
    if failed:
        logger.debug(f"{len(failed)} of {len(items)} scan(s) failed")
        sys.exit(1)
