"""Commands for formatting, parsing and single-budget progress."""

from centsible.commands.display import console, fail, format_status, money, progress_bar
from centsible.config import Settings
from centsible.domain.calculations import calculate_budget_progress
from centsible.domain.currency import format_currency, format_currency_compact, parse_currency_input
from centsible.errors import CentsibleError


def format_command(cents: int, settings: Settings, compact: bool = False) -> None:
    """Print an amount in cents as currency."""
    try:
        if compact:
            text = format_currency_compact(cents, settings.currency, settings.locale)
        else:
            text = format_currency(cents, settings.currency, settings.locale)
    except CentsibleError as e:
        fail(str(e))

    console.print(text, highlight=False)


def parse_command(text: str, settings: Settings) -> None:
    """Print currency input converted to cents."""
    try:
        cents = parse_currency_input(text, settings.max_amount)
    except CentsibleError as e:
        fail(f"Could not parse {text!r}: {e}")

    console.print(str(cents), highlight=False)


def progress_command(spent_text: str, budget_text: str, settings: Settings) -> None:
    """Show progress of spending against a budget."""
    try:
        spent = parse_currency_input(spent_text, settings.max_amount)
        budget = parse_currency_input(budget_text, settings.max_amount)
        progress = calculate_budget_progress(spent, budget)
    except CentsibleError as e:
        fail(str(e))

    console.print(f"{progress_bar(spent, budget, progress.status)} {format_status(progress)}")
    console.print(f"  Spent:     {money(spent, settings)}")
    console.print(f"  Budget:    {money(budget, settings)}")

    if progress.remaining < 0:
        console.print(f"  [red]Over by:   {money(-progress.remaining, settings)}[/red]")
    else:
        console.print(f"  Remaining: {money(progress.remaining, settings)}")
