"""CLI entry point for centsible."""

from pathlib import Path

import typer

from centsible.commands.admin import config_command, init_command
from centsible.commands.budgets import budgets_command
from centsible.commands.export import export_command
from centsible.commands.money import format_command, parse_command, progress_command
from centsible.commands.transactions import transactions_command
from centsible.config import Settings, load_settings
from centsible.domain.filters import TransactionFilters

app = typer.Typer(
    name="centsible",
    help="centsible - budget arithmetic in integer cents",
    add_completion=False,
)


def resolve_settings(currency: str | None, locale: str | None) -> Settings:
    """Load settings from config and apply command-line overrides."""
    settings = load_settings()
    return Settings(
        currency=currency or settings.currency,
        locale=locale or settings.locale,
        max_amount=settings.max_amount,
    )


@app.callback()
def main() -> None:
    """centsible - budget arithmetic in integer cents."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the default configuration file."""
    init_command(force)


@app.command(name="config")
def config() -> None:
    """Show the currency, locale and limits in effect."""
    config_command()


@app.command(name="format")
def format_amount(
    cents: int,
    currency: str = typer.Option(None, "--currency", "-c", help="ISO 4217 currency code"),
    locale: str = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. en-US)"),
    compact: bool = typer.Option(False, "--compact", help="Use K/M suffixes for large amounts"),
) -> None:
    """Format an amount in cents as currency."""
    format_command(cents, resolve_settings(currency, locale), compact)


@app.command(name="parse")
def parse(
    text: str,
) -> None:
    """Convert currency text (e.g. "$1,234.56") to cents."""
    parse_command(text, resolve_settings(None, None))


@app.command()
def progress(
    spent: str,
    budget: str,
    currency: str = typer.Option(None, "--currency", "-c", help="ISO 4217 currency code"),
    locale: str = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. en-US)"),
) -> None:
    """Show how much of a budget has been spent."""
    progress_command(spent, budget, resolve_settings(currency, locale))


@app.command()
def budgets(
    file: Path,
    month: str = typer.Option(None, "--month", help="Only budgets for this month (YYYY-MM)"),
    currency: str = typer.Option(None, "--currency", "-c", help="ISO 4217 currency code"),
    locale: str = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. en-US)"),
) -> None:
    """Summarize budgets from a CSV file."""
    budgets_command(file, resolve_settings(currency, locale), month)


@app.command()
def transactions(
    file: Path,
    month: str = typer.Option(None, "--month", help="Only transactions in this month (YYYY-MM)"),
    search: str = typer.Option("", "--search", "-s", help="Match description or category"),
    type_: str = typer.Option(None, "--type", "-t", help="'income' or 'expense'"),
    date_from: str = typer.Option(None, "--from", help="Earliest date (YYYY-MM-DD)"),
    date_to: str = typer.Option(None, "--to", help="Latest date (YYYY-MM-DD)"),
    amount_min: str = typer.Option(None, "--min", help="Minimum amount"),
    amount_max: str = typer.Option(None, "--max", help="Maximum amount"),
    sort_by: str = typer.Option("date", "--sort-by", help="date, amount, description, category or id"),
    order: str = typer.Option("desc", "--order", help="asc or desc"),
    currency: str = typer.Option(None, "--currency", "-c", help="ISO 4217 currency code"),
    locale: str = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. en-US)"),
) -> None:
    """List and summarize transactions from a CSV file."""
    filters = TransactionFilters(
        search_term=search,
        types=(type_,) if type_ else (),
        date_from=date_from,
        date_to=date_to,
        amount_min=amount_min,
        amount_max=amount_max,
        sort_by=sort_by,
        sort_order=order,
    )
    transactions_command(file, resolve_settings(currency, locale), filters, month)


@app.command()
def export(
    file: Path,
    output: Path,
    kind: str = typer.Option("transactions", "--kind", "-k", help="'budgets' or 'transactions'"),
    group_by_category: bool = typer.Option(False, "--group-by-category", help="Append category totals"),
    currency: str = typer.Option(None, "--currency", "-c", help="ISO 4217 currency code"),
    locale: str = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. en-US)"),
) -> None:
    """Write a budget or transaction report to CSV."""
    export_command(file, output, resolve_settings(currency, locale), kind, group_by_category)


if __name__ == "__main__":
    app()
