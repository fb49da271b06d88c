"""Transaction listing command."""

from pathlib import Path

import pandas as pd
from rich.table import Table

from centsible.commands.display import console, fail, money, signed_money
from centsible.config import Settings
from centsible.dates import month_range, parse_month
from centsible.domain.calculations import calculate_transaction_summary, is_transaction_in_month
from centsible.domain.filters import (
    SORT_KEYS,
    SORT_ORDERS,
    TransactionFilters,
    apply_filters,
    describe_filters,
)
from centsible.domain.models import TRANSACTION_TYPES
from centsible.errors import CentsibleError
from centsible.loaders import load_transactions


def transactions_command(
    path: Path,
    settings: Settings,
    filters: TransactionFilters,
    month: str | None = None,
) -> None:
    """List filtered transactions with income and expense totals."""
    invalid = [t for t in filters.types if t not in TRANSACTION_TYPES]
    if invalid:
        fail(f"Unknown transaction type '{invalid[0]}'. Use 'income' or 'expense'.")
    if filters.sort_by not in SORT_KEYS:
        fail(f"Unknown sort key '{filters.sort_by}'. Use one of: {', '.join(SORT_KEYS)}.")
    if filters.sort_order not in SORT_ORDERS:
        fail(f"Unknown sort order '{filters.sort_order}'. Use 'asc' or 'desc'.")

    try:
        transactions = load_transactions(path, settings.max_amount)
        if month:
            month_typed = parse_month(month)
            transactions = [t for t in transactions if is_transaction_in_month(t["date"], month_typed)]
            _, _, period = month_range(month_typed)
        else:
            period = "All time"
        selected = apply_filters(transactions, filters)
        description = describe_filters(filters, settings.currency, settings.locale)
        summary = calculate_transaction_summary(selected)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        fail(f"Could not read {path}: {e}")
    except CentsibleError as e:
        fail(str(e))

    console.print(f"[bold cyan]{period}[/bold cyan] [dim]{description}[/dim]\n")

    if not selected:
        console.print("[yellow]No transactions found[/yellow]")
        return

    table = Table(title=f"{len(selected)} transactions")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Category", style="dim")
    table.add_column("Amount", justify="right")

    for txn in selected:
        if txn["type"] == "income":
            amount_display = f"[green]+{money(txn['amount'], settings)}[/green]"
        else:
            amount_display = f"[red]-{money(txn['amount'], settings)}[/red]"

        table.add_row(
            str(txn["id"]),
            txn["date"],
            txn["description"],
            txn["category_name"] or "[dim]-[/dim]",
            amount_display,
        )

    console.print(table)

    console.print(f"\n[bold green]Income:[/bold green]   {money(summary.total_income, settings)}")
    console.print(f"[bold red]Expenses:[/bold red] {money(summary.total_expenses, settings)}")
    console.print(f"[bold cyan]Net:[/bold cyan]      {signed_money(summary.net_income, settings)}")
    console.print(f"[dim]Average transaction: {money(summary.average_transaction, settings)}[/dim]")
