"""Rich table rendering for debt views."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from ..models import Participant, RawDebt
from ..money import from_minor_units


def format_money(amount_minor: int, currency: str, use_color: bool = True) -> str:
    """
    Format minor units in accounting style with alignment.

    Negative amounts use parentheses: (USD 85.02)
    Positive amounts have spaces:      USD 85.02
    """
    abs_amount = from_minor_units(abs(amount_minor))
    if amount_minor < 0:
        if use_color:
            return f"({currency} [red]{abs_amount:,.2f}[/red])"
        return f"({currency} {abs_amount:,.2f})"
    if use_color:
        return f" {currency} [green]{abs_amount:,.2f}[/green] "
    return f" {currency} {abs_amount:,.2f} "


def debts_table(debts: Sequence[RawDebt], title: str, currency: str) -> Table:
    """Build a From/To/Amount table for a debt list."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("From", style="cyan")
    table.add_column("", width=2)
    table.add_column("To", style="cyan")
    table.add_column("Amount", justify="right")

    for debt in debts:
        table.add_row(
            debt.debtor.name,
            "→",
            debt.creditor.name,
            format_money(debt.amount_minor, currency),
        )

    return table


def balances_table(
    participants: Sequence[Participant],
    balances_minor: dict[str, int],
    currency: str,
) -> Table:
    """Build a per-participant net balance table."""
    names = {participant.id: participant.name for participant in participants}

    table = Table(title="Balances", show_header=True, header_style="bold magenta")
    table.add_column("Participant", style="cyan")
    table.add_column("Balance", justify="right")

    for participant_id, amount_minor in balances_minor.items():
        table.add_row(
            names.get(participant_id, participant_id),
            format_money(amount_minor, currency),
        )

    return table


def print_summary(
    console: Console,
    total_minor: int,
    outstanding_minor: int,
    people: int,
    transfers: int,
    currency: str,
    detailed_paid: tuple[int, int] = (0, 0),
    simplified_paid: tuple[int, int] = (0, 0),
) -> None:
    """
    Print the outstanding-debt summary block.

    ``detailed_paid`` and ``simplified_paid`` are (paid off, total before
    payments) debt counts for each view.
    """
    console.print()
    console.print("[bold]Summary:[/bold]")
    console.print(f"  Total spent: {format_money(total_minor, currency)}")
    console.print(f"  Outstanding: {format_money(outstanding_minor, currency)}")
    console.print(f"  People with open debts: {people}")
    console.print(f"  Pairwise transfers: {transfers}")
    console.print(
        f"  Detailed debts paid off: {detailed_paid[0]} of {detailed_paid[1]}"
    )
    console.print(
        f"  Simplified debts paid off: {simplified_paid[0]} of {simplified_paid[1]}"
    )
    if outstanding_minor == 0:
        console.print("  [green]✓ Everyone is settled up[/green]")
