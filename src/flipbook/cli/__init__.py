# ABOUTME: CLI package for Flipbook, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from flipbook.cli.commands import compile_cmd, export_cmd, inspect_cmd, page_cmd, toc_cmd


def _configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="flipbook")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Flipbook - compile a long document into a paginated book."""
    _configure_logging(verbose)


cli.add_command(inspect_cmd.inspect)
cli.add_command(toc_cmd.toc)
cli.add_command(page_cmd.page)
cli.add_command(compile_cmd.compile_document)
cli.add_command(export_cmd.export)
