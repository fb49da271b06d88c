"""Shared rendering helpers for command output."""

import sys
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from centsible.config import Settings
from centsible.domain.calculations import BudgetProgress
from centsible.domain.currency import calculate_percentage, format_currency
from centsible.domain.numbers import Number

console = Console()

STATUS_COLORS = {
    "under": "green",
    "near": "yellow",
    "over": "red",
}


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{escape(message)}[/red]", style="bold")
    sys.exit(1)


def money(cents: Number, settings: Settings) -> str:
    """Format cents with the configured currency and locale."""
    return format_currency(cents, settings.currency, settings.locale)


def signed_money(cents: Number, settings: Settings) -> str:
    """Format cents in green when non-negative, red when negative."""
    color = "red" if cents < 0 else "green"
    return f"[{color}]{money(cents, settings)}[/{color}]"


def format_status(progress: BudgetProgress) -> str:
    """Colored percentage and status label, e.g. "[yellow]80% near[/yellow]"."""
    color = STATUS_COLORS[progress.status]
    return f"[{color}]{progress.percentage}% {progress.status}[/{color}]"


def calculate_bar_length(spent: Number, budget: Number, width: int) -> int:
    """Filled length of a progress bar; never wider than width."""
    return max(calculate_percentage(spent, budget), 0) * width // 100


def progress_bar(spent: Number, budget: Number, status: str, width: int = 30) -> str:
    """Render a capped progress bar colored by status."""
    filled = calculate_bar_length(spent, budget, width)
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{'█' * filled}[/{color}][dim]{'░' * (width - filled)}[/dim]"
