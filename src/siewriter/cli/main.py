"""Main CLI entry point."""

import click

from siewriter import __version__
from siewriter.cli.commands import convert, validate
from siewriter.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="siewriter")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SIE_LOG_LEVEL",
    help="Log level (overrides SIE_LOG_LEVEL environment variable)",
)
@click.option(
    "--log-format",
    type=click.Choice(["standard", "json"]),
    default="standard",
    show_default=True,
    help="Log output format",
)
@click.pass_context
def cli(ctx, log_level: str, log_format: str):
    """siewriter - SIE 4 export of bookkeeping data.

    Converts verification lists exported as TSV into SIE 4 files for
    exchange with other accounting systems.
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is not None:
        setup_logging(level=log_level, format_type=log_format)


convert.register_commands(cli)
validate.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
