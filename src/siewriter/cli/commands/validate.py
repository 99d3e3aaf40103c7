"""TSV validation command."""

import click

from siewriter.cli.error_handling import handle_domain_error
from siewriter.domain.tsv_import import DEFAULT_COMPANY_NAME, TSVImporter


@click.command("validate")
@click.argument("tsv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--company-name", default=DEFAULT_COMPANY_NAME, show_default=True, help="Company name (#FNAMN)")
@click.option("--skip-header-lines", default=1, show_default=True, type=click.IntRange(min=0), help="Header lines to skip")
@click.pass_context
def validate(ctx, tsv_file: str, company_name: str, skip_header_lines: int):
    """Import a TSV verification list and check that it is exportable."""
    importer = TSVImporter(company_name=company_name, skip_header_lines=skip_header_lines)

    try:
        company = importer.parse_file(tsv_file)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    verifications = [
        verification
        for series in company.list_verification_series()
        for verification in series.list_verifications()
    ]
    transaction_count = sum(len(v.transactions) for v in verifications)

    click.echo("\nValidation passed:")
    click.echo(f"  Accounts: {len(company.list_accounts())}")
    click.echo(f"  Verifications: {len(verifications)}")
    click.echo(f"  Transactions: {transaction_count}")


def register_commands(cli):
    """Register validate command with main CLI."""
    cli.add_command(validate)
