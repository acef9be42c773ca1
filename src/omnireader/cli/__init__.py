# ABOUTME: CLI package for OmniReader, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from omnireader.cli.commands import (
    annotate_cmd,
    book_cmd,
    import_cmd,
    info_cmd,
    ls_cmd,
    position_cmd,
)


@click.group()
@click.version_option(package_name="omnireader")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """OmniReader - a local ebook library with highlights, notes, and reading progress."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(import_cmd.import_command)
cli.add_command(ls_cmd.ls)
cli.add_command(info_cmd.info)
cli.add_command(book_cmd.rm)
cli.add_command(book_cmd.open_book)
cli.add_command(annotate_cmd.highlight)
cli.add_command(annotate_cmd.note)
cli.add_command(annotate_cmd.annotations)
cli.add_command(annotate_cmd.unannotate)
cli.add_command(position_cmd.position)
