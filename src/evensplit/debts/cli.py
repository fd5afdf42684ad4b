"""CLI commands for viewing and settling an event's debts."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Settings, load_settings
from ..exceptions import EvenSplitError, PaymentExceedsDebtError
from ..models import EventSnapshot
from ..money import to_minor_units
from ..snapshot import load_snapshot, save_snapshot
from .export import debts_to_csv
from .service import DebtService
from .ui import balances_table, debts_table, format_money, print_summary

app = typer.Typer(
    name="debts",
    help="Show who owes whom and record repayments",
)

console = Console()


class DebtView(str, Enum):
    """Debt views available from the command line."""

    SIMPLIFIED = "simplified"
    DETAILED = "detailed"
    RAW = "raw"


class PaymentView(str, Enum):
    """Debt view a payment is recorded from."""

    SIMPLIFIED = "simplified"
    DETAILED = "detailed"


def setup_logging(verbose: bool = False, default_level: str = "WARNING"):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else getattr(logging, default_level.upper())
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _load(
    snapshot_path: Optional[Path], verbose: bool
) -> tuple[Settings, Path, EventSnapshot]:
    """Load settings and the event snapshot, then configure logging."""
    settings = load_settings()
    setup_logging(verbose, settings.log_level)
    path = snapshot_path or settings.snapshot_path
    return settings, path, load_snapshot(path)


def _currency(settings: Settings, snapshot: EventSnapshot) -> str:
    return snapshot.currency or settings.currency


SNAPSHOT_OPTION = typer.Option(
    None, "--snapshot", "-s", help="Event snapshot JSON file"
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose output")


@app.command()
def show(
    snapshot_path: Optional[Path] = SNAPSHOT_OPTION,
    view: DebtView = typer.Option(
        DebtView.SIMPLIFIED, "--view", help="Which debt view to display"
    ),
    ignore_payments: bool = typer.Option(
        False, "--ignore-payments", help="Show debts as if nothing was repaid"
    ),
    as_csv: bool = typer.Option(False, "--csv", help="Print CSV instead of a table"),
    verbose: bool = VERBOSE_OPTION,
):
    """
    Show an event's outstanding debts.

    The simplified view lists the fewest transfers that settle everyone.
    The detailed view nets each pair separately. The raw view lists every
    per-expense share, before payments.
    """
    try:
        settings, _, snapshot = _load(snapshot_path, verbose)
        if ignore_payments:
            snapshot = snapshot.model_copy(update={"payments": ()})

        report = DebtService(settings).build_report(snapshot)
        currency = _currency(settings, snapshot)

        if view is DebtView.RAW:
            debts, title = report.raw_debts, "Raw Debts"
        elif view is DebtView.DETAILED:
            debts, title = report.effective_detailed_debts, "Detailed Debts"
        else:
            debts, title = report.effective_simplified_debts, "Simplified Debts"

        if as_csv:
            typer.echo(debts_to_csv(debts), nl=False)
            return

        console.print(f"\n[bold]{snapshot.title or snapshot.id}[/bold]")
        if debts:
            console.print(debts_table(debts, title, currency))
        else:
            console.print("[green]No debts.[/green]")

        print_summary(
            console,
            total_minor=report.total_amount_minor,
            outstanding_minor=report.outstanding_total_minor,
            people=report.outstanding_people_count,
            transfers=report.outstanding_transfers_count,
            currency=currency,
            detailed_paid=(report.paid_detailed_count, report.base_detailed_count),
            simplified_paid=(
                report.paid_simplified_count,
                report.base_simplified_count,
            ),
        )

    except EvenSplitError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if verbose:
            raise
        sys.exit(1)


@app.command()
def balances(
    snapshot_path: Optional[Path] = SNAPSHOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Show each participant's net balance after payments."""
    try:
        settings, _, snapshot = _load(snapshot_path, verbose)
        report = DebtService(settings).build_report(snapshot)
        console.print(
            balances_table(
                snapshot.participants,
                report.balances_minor,
                _currency(settings, snapshot),
            )
        )

    except EvenSplitError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if verbose:
            raise
        sys.exit(1)


@app.command()
def pay(
    from_id: str = typer.Argument(..., help="Participant id of the payer"),
    to_id: str = typer.Argument(..., help="Participant id of the receiver"),
    amount: str = typer.Argument(..., help="Amount paid, e.g. 33.33"),
    source: PaymentView = typer.Option(
        PaymentView.SIMPLIFIED, "--source", help="View the payment was made from"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Record even if it exceeds the debt"
    ),
    snapshot_path: Optional[Path] = SNAPSHOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Record a repayment and save it to the snapshot.

    By default a payment larger than what FROM_ID owes TO_ID is rejected.
    Use --force, or set EVENSPLIT_ALLOW_OVERPAYMENT=true, to record it anyway.
    """
    try:
        settings, path, snapshot = _load(snapshot_path, verbose)
        currency = _currency(settings, snapshot)

        amount_minor = to_minor_units(amount)
        if amount_minor <= 0:
            console.print(f"[bold red]Error:[/bold red] Invalid amount: {amount}")
            sys.exit(1)

        service = DebtService(settings)
        payment, updated = service.record_payment(
            snapshot,
            from_id=from_id,
            to_id=to_id,
            amount_minor=amount_minor,
            source=source.value,
            force=force,
        )
        save_snapshot(updated, path)

        names = {p.id: p.name for p in snapshot.participants}
        console.print(
            f"\n[bold green]✓ Recorded payment:[/bold green] "
            f"{names.get(from_id, from_id)} → {names.get(to_id, to_id)} "
            f"{format_money(amount_minor, currency)}"
        )
        console.print(f"[dim]Payment ID: {payment.id}[/dim]\n")

    except PaymentExceedsDebtError as e:
        console.print(
            f"\n[bold yellow]⚠️  Payment exceeds outstanding debt "
            f"({format_money(e.outstanding_minor, currency, use_color=False).strip()})."
            f"[/bold yellow]\n"
            f"[dim]Use --force to record it anyway.[/dim]\n"
        )
        sys.exit(1)
    except EvenSplitError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if verbose:
            raise
        sys.exit(1)
