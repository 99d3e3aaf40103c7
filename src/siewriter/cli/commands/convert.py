"""TSV to SIE conversion command."""

from dataclasses import replace

import click

from siewriter.cli.error_handling import handle_domain_error
from siewriter.config import DumpOptions
from siewriter.domain.tsv_import import DEFAULT_COMPANY_NAME, TSVImporter
from siewriter.export.sie_dumper import SIEDumper
from siewriter.utils.date_parser import parse_date


@click.command("convert")
@click.argument("tsv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="SIE file to write (defaults to stdout)",
)
@click.option("--company-name", default=DEFAULT_COMPANY_NAME, show_default=True, help="Company name (#FNAMN)")
@click.option("--company-number", help="Organisation number (#ORGNR), e.g. 555555-5555")
@click.option("--chart-type", help="Type of chart of accounts (#KPTYP), e.g. BAS2014")
@click.option("--skip-header-lines", default=1, show_default=True, type=click.IntRange(min=0), help="Header lines to skip")
@click.option("--generator", envvar="SIE_GENERATOR", help="Program name written to #PROGRAM")
@click.option("--sign", envvar="SIE_GENERATED_SIGN", help="Signature written to #GEN")
@click.option(
    "--generated-date",
    envvar="SIE_GENERATED_DATE",
    help="Generation date written to #GEN (YYYYMMDD or YYYY-MM-DD, default today)",
)
@click.pass_context
def convert(
    ctx,
    tsv_file: str,
    output: str | None,
    company_name: str,
    company_number: str | None,
    chart_type: str | None,
    skip_header_lines: int,
    generator: str | None,
    sign: str | None,
    generated_date: str | None,
):
    """Convert a TSV verification list to a SIE 4 file.

    Examples:
        siewriter convert export.tsv -o company.se
        siewriter convert export.tsv --company-name "My company" --sign JW
    """
    try:
        options = DumpOptions.from_env()
        overrides = {}
        if generator is not None:
            overrides["generator"] = generator
        if sign is not None:
            overrides["generated_sign"] = sign
        if generated_date is not None:
            overrides["generated_date"] = parse_date(generated_date)
        options = replace(options, **overrides)

        importer = TSVImporter(company_name=company_name, skip_header_lines=skip_header_lines)
        company = importer.parse_file(tsv_file)
        company.number = company_number
        company.chart_of_accounts_type = chart_type

        dumper = SIEDumper(options)
        if output is None:
            click.get_binary_stream("stdout").write(dumper.dump_bytes(company))
            return

        dumper.write(company, output)
        click.echo(f"Wrote {output}", err=True)
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register convert command with main CLI."""
    cli.add_command(convert)
