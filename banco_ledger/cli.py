"""
CLI interface for Banco Ledger.

Starts the interactive menu and exposes configuration helpers.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .amounts import format_rate
from .config import get_config
from .console import BankConsole
from .interest import InterestService
from .accounts import AccountKind
from .logging_config import setup_logging

app = typer.Typer(help="In-memory banking ledger")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override BANCO_LOG_LEVEL"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="json or text"),
):
    """Banco Ledger - run without a command to open the menu."""
    config = get_config()
    try:
        setup_logging(
            level=log_level or config.log_level,
            fmt=log_format or config.log_format,
            log_file=config.log_file,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    if ctx.invoked_subcommand is None:
        BankConsole(console=console).run()


@app.command()
def menu():
    """Open the interactive banking menu."""
    BankConsole(console=console).run()


@app.command()
def rates():
    """Show the interest rate applied to each account kind."""
    service = InterestService()

    table = Table(title="Interest Rates")
    table.add_column("Kind", style="cyan")
    table.add_column("Rate", justify="right")
    for kind in AccountKind:
        table.add_row(kind.name, f"{format_rate(service.rate_for(kind))}%")

    console.print(table)


if __name__ == "__main__":
    app()
