"""Budget summary command."""

from pathlib import Path

import pandas as pd
from rich.table import Table

from centsible.commands.display import console, fail, format_status, money, progress_bar, signed_money
from centsible.config import Settings
from centsible.dates import month_range, parse_month
from centsible.domain.calculations import (
    calculate_budget_progress,
    calculate_monthly_budget_summary,
)
from centsible.errors import CentsibleError
from centsible.loaders import load_budgets


def budgets_command(path: Path, settings: Settings, month: str | None = None) -> None:
    """Show per-budget progress and the month's totals."""
    try:
        budgets = load_budgets(path, settings.max_amount)
        if month:
            month_typed = parse_month(month)
            budgets = [b for b in budgets if b["month"] == month_typed]
            _, _, period = month_range(month_typed)
        else:
            period = "All budgets"
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        fail(f"Could not read {path}: {e}")
    except CentsibleError as e:
        fail(str(e))

    if not budgets:
        console.print("[yellow]No budgets found[/yellow]")
        return

    table = Table(title=f"Budgets - {period}")
    table.add_column("Name", style="white")
    table.add_column("Category", style="dim")
    table.add_column("Budget", justify="right")
    table.add_column("Spent", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Progress")
    table.add_column("Status", justify="right")

    for budget in budgets:
        remaining = budget["amount"] - budget["spent"]
        if budget["amount"] > 0:
            progress = calculate_budget_progress(budget["spent"], budget["amount"])
            bar = progress_bar(budget["spent"], budget["amount"], progress.status, width=20)
            status = format_status(progress)
        else:
            bar = "[dim]-[/dim]"
            status = "[dim]no budget[/dim]"

        table.add_row(
            budget["name"],
            budget["category_name"] or "All Categories",
            money(budget["amount"], settings),
            money(budget["spent"], settings),
            signed_money(remaining, settings),
            bar,
            status,
        )

    console.print(table)

    summary = calculate_monthly_budget_summary(budgets)

    console.print(f"\n[bold]Total budget:[/bold] {money(summary.total_budget, settings)}")
    console.print(f"[bold]Total spent:[/bold]  {money(summary.total_spent, settings)} ({summary.percentage_used}%)")
    console.print(f"[bold]Remaining:[/bold]    {signed_money(summary.remaining, settings)}")

    if summary.is_over_budget:
        console.print("\n[red]Over budget for this period[/red]", style="bold")
