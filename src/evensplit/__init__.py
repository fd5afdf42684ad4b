"""evensplit - Split shared expenses and settle debts with the fewest transfers."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .debts import (
    DebtReport,
    DebtService,
    aggregate_pairwise,
    apply_payments,
    derive_raw_debts,
    net_balances,
    payment_adjusted_debts,
    record_payment,
)
from .models import (
    DetailedDebt,
    EventSnapshot,
    Expense,
    Participant,
    Payment,
    RawDebt,
    SimplifiedDebt,
)
from .money import from_minor_units, round_money, to_minor_units

__all__ = [
    "Settings",
    "load_settings",
    "DebtReport",
    "DebtService",
    "aggregate_pairwise",
    "apply_payments",
    "derive_raw_debts",
    "net_balances",
    "payment_adjusted_debts",
    "record_payment",
    "DetailedDebt",
    "EventSnapshot",
    "Expense",
    "Participant",
    "Payment",
    "RawDebt",
    "SimplifiedDebt",
    "from_minor_units",
    "round_money",
    "to_minor_units",
]
