"""Export command for writing CSV reports."""

import sys
from pathlib import Path
from typing import Literal

import pandas as pd

from centsible.commands.display import console, fail
from centsible.config import Settings
from centsible.domain.export import (
    BUDGET_COLUMNS,
    TRANSACTION_COLUMNS,
    budget_report_rows,
    transaction_report_rows,
)
from centsible.errors import CentsibleError
from centsible.loaders import load_budgets, load_transactions

ExportKind = Literal["budgets", "transactions"]


def export_command(
    path: Path,
    output: Path,
    settings: Settings,
    kind: ExportKind = "transactions",
    group_by_category: bool = False,
) -> None:
    """Write a budget or transaction report as CSV."""
    if kind not in ("budgets", "transactions"):
        fail(f"Unknown export kind '{kind}'. Use 'budgets' or 'transactions'.")

    try:
        if kind == "budgets":
            rows = budget_report_rows(load_budgets(path, settings.max_amount), settings.currency, settings.locale)
            columns = BUDGET_COLUMNS
        else:
            rows = transaction_report_rows(
                load_transactions(path, settings.max_amount),
                settings.currency,
                settings.locale,
                group_by_category=group_by_category,
            )
            columns = TRANSACTION_COLUMNS
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        fail(f"Could not read {path}: {e}")
    except CentsibleError as e:
        fail(str(e))

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame(rows, columns=columns).to_csv(output, index=False)
    except OSError as e:
        console.print(f"[red]Export failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Wrote {len(rows)} rows to: {output}")
