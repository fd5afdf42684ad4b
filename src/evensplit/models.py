"""Pydantic domain models for evensplit."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .money import from_minor_units

PaymentSource = Literal["detailed", "simplified"]

# ============================================================================
# Event Models
# ============================================================================


class Participant(BaseModel):
    """A person taking part in an event."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Expense(BaseModel):
    """An expense paid by one participant and split equally across the event."""

    model_config = ConfigDict(frozen=True)

    id: str
    amount: Decimal = Field(allow_inf_nan=True)
    payer_id: str
    title: str = ""


# ============================================================================
# Debt Models
# ============================================================================


class RawDebt(BaseModel):
    """
    A directed debt: ``debtor`` owes ``creditor`` ``amount_minor`` cents.

    Debts are produced fresh on every computation and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    debtor: Participant
    creditor: Participant
    amount_minor: int = Field(gt=0)

    @property
    def amount(self) -> Decimal:
        """Debt amount in major units."""
        return from_minor_units(self.amount_minor)


class SimplifiedDebt(RawDebt):
    """A transfer from a minimum-cardinality settlement."""


class DetailedDebt(RawDebt):
    """The net amount owed within one pair of participants."""


# ============================================================================
# Payment Models
# ============================================================================


class Payment(BaseModel):
    """
    A recorded real-world transfer from ``from_id`` to ``to_id``.

    Payments are append-only. ``source`` records which debt view the payment
    was made from.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    event_id: str
    from_id: str
    to_id: str
    amount_minor: int = Field(gt=0)
    created_at: datetime
    source: PaymentSource

    @property
    def amount(self) -> Decimal:
        """Payment amount in major units."""
        return from_minor_units(self.amount_minor)


# ============================================================================
# Snapshot Models
# ============================================================================


class EventSnapshot(BaseModel):
    """
    A consistent, caller-owned view of one event.

    Participant order matters: it decides which participants absorb the
    rounding remainder of each expense.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    currency: str | None = None
    participants: tuple[Participant, ...] = ()
    expenses: tuple[Expense, ...] = ()
    payments: tuple[Payment, ...] = ()

    def with_payment(self, payment: Payment) -> "EventSnapshot":
        """Return a copy of this snapshot with ``payment`` appended."""
        return self.model_copy(update={"payments": (*self.payments, payment)})
