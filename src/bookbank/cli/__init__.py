# ABOUTME: CLI package for BookBank, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from bookbank.cli.commands import add_cmd, isbn_cmd, ls_cmd, search_cmd


@click.group()
@click.version_option(package_name="bookbank")
def cli() -> None:
    """BookBank - find books in the catalog and keep track of the ones you own."""


cli.add_command(search_cmd.search)
cli.add_command(isbn_cmd.isbn)
cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
