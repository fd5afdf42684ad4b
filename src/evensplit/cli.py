"""CLI for evensplit."""

import typer

from . import __version__
from .debts.cli import app as debts_app

app = typer.Typer(
    name="evensplit",
    help="Split shared expenses and settle debts with the fewest transfers",
)

app.add_typer(debts_app, name="debts", help="Debt views and repayments")


@app.command()
def version():
    """Show the installed version."""
    typer.echo(f"evensplit {__version__}")


if __name__ == "__main__":
    app()
