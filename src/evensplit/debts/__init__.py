"""Debt settlement engine: derivation, netting, payments and views."""

from .derivation import derive_raw_debts, split_shares
from .netting import compute_balances, net_balances
from .pairwise import aggregate_pairwise
from .payments import (
    apply_payments,
    outstanding_between,
    payment_adjusted_debts,
    record_payment,
    validate_payment,
)
from .service import DebtReport, DebtService

__all__ = [
    "derive_raw_debts",
    "split_shares",
    "compute_balances",
    "net_balances",
    "aggregate_pairwise",
    "apply_payments",
    "outstanding_between",
    "payment_adjusted_debts",
    "record_payment",
    "validate_payment",
    "DebtReport",
    "DebtService",
]
