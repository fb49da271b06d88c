"""Admin commands for creating and showing configuration."""

import sys

from rich.console import Console

from centsible.config import create_default_config, get_config_path, load_settings

console = Console()


def init_command(force: bool = False) -> None:
    """Write the default config file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite[/dim]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Could not write config: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Config written to: {config_path}")


def config_command() -> None:
    """Show the settings in effect."""
    config_path = get_config_path()
    settings = load_settings(config_path)

    source = str(config_path) if config_path.exists() else "defaults (no config file)"
    console.print(f"[bold cyan]Settings[/bold cyan] [dim]from {source}[/dim]\n")
    console.print(f"  currency:   {settings.currency}")
    console.print(f"  locale:     {settings.locale}")
    console.print(f"  max_amount: {settings.max_amount:,}")
