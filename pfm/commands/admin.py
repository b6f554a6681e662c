"""Admin commands for setting up the config file."""

import sys

from rich.console import Console

from pfm.config import create_default_config, get_config_path

console = Console()


def init_command(force: bool = False) -> None:
    """Write the default config file."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'pfm init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")
