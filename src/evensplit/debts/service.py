"""Service layer that composes the debt engine for one event.

The engine functions are pure; this module wires them into the full
pipeline (derive, net, apply payments, aggregate) and applies the caller-side
payment policy from settings.
"""

import logging
from datetime import datetime

from pydantic import BaseModel

from ..config import Settings
from ..models import (
    DetailedDebt,
    EventSnapshot,
    Payment,
    PaymentSource,
    RawDebt,
    SimplifiedDebt,
)
from .derivation import derive_raw_debts
from .netting import net_balances
from .pairwise import aggregate_pairwise
from .payments import (
    apply_payments,
    payment_adjusted_debts,
    record_payment,
    validate_payment,
)
from .summary import (
    outstanding_people_count,
    outstanding_total_minor,
    outstanding_transfers_count,
    participant_balances,
    total_amount_minor,
)

logger = logging.getLogger(__name__)


class DebtReport(BaseModel):
    """Every debt view of one event, computed from a single snapshot."""

    event_id: str
    raw_debts: list[RawDebt]
    simplified_debts: list[SimplifiedDebt]
    effective_debts: list[RawDebt]
    effective_simplified_debts: list[SimplifiedDebt]
    effective_detailed_debts: list[DetailedDebt]
    balances_minor: dict[str, int]
    total_amount_minor: int
    outstanding_total_minor: int
    outstanding_people_count: int
    outstanding_transfers_count: int
    base_detailed_count: int
    base_simplified_count: int
    paid_detailed_count: int
    paid_simplified_count: int


class DebtService:
    """Service for computing and settling an event's debts."""

    def __init__(self, settings: Settings):
        """Initialize the debt service."""
        self.settings = settings

    def build_report(self, snapshot: EventSnapshot) -> DebtReport:
        """
        Run the whole debt pipeline for a snapshot.

        Args:
            snapshot: Consistent view of the event

        Returns:
            All debt views and outstanding summaries
        """
        raw = derive_raw_debts(snapshot.participants, snapshot.expenses)
        effective = apply_payments(raw, snapshot.payments)
        # Detailed view keeps pairs separate, so it must not see netted debts
        adjusted = payment_adjusted_debts(raw, snapshot.payments)

        simplified = net_balances(raw)
        base_detailed = aggregate_pairwise(raw)
        effective_simplified = net_balances(effective)
        effective_detailed = aggregate_pairwise(adjusted)

        report = DebtReport(
            event_id=snapshot.id,
            raw_debts=raw,
            simplified_debts=simplified,
            effective_debts=effective,
            effective_simplified_debts=effective_simplified,
            effective_detailed_debts=effective_detailed,
            balances_minor=participant_balances(snapshot.participants, effective),
            total_amount_minor=total_amount_minor(snapshot.expenses),
            outstanding_total_minor=outstanding_total_minor(effective),
            outstanding_people_count=outstanding_people_count(effective),
            outstanding_transfers_count=outstanding_transfers_count(adjusted),
            base_detailed_count=len(base_detailed),
            base_simplified_count=len(simplified),
            paid_detailed_count=max(0, len(base_detailed) - len(effective_detailed)),
            paid_simplified_count=max(
                0, len(simplified) - len(effective_simplified)
            ),
        )

        logger.info(
            f"Event {snapshot.id}: {len(raw)} raw debts, "
            f"{len(report.effective_simplified_debts)} outstanding transfers "
            f"after {len(snapshot.payments)} payments"
        )

        return report

    def record_payment(
        self,
        snapshot: EventSnapshot,
        from_id: str,
        to_id: str,
        amount_minor: int,
        source: PaymentSource = "simplified",
        created_at: datetime | None = None,
        force: bool = False,
    ) -> tuple[Payment, EventSnapshot]:
        """
        Record a payment against the snapshot's outstanding debts.

        Unless ``force`` is set or overpayment is allowed in settings, the
        payment must not exceed what ``from_id`` currently owes ``to_id`` in
        the view named by ``source``.

        Returns:
            The new payment and a snapshot that includes it

        Raises:
            PaymentError: If the payment fails validation
        """
        if not (force or self.settings.allow_overpayment):
            raw = derive_raw_debts(snapshot.participants, snapshot.expenses)
            if source == "detailed":
                outstanding = payment_adjusted_debts(raw, snapshot.payments)
            else:
                outstanding = apply_payments(raw, snapshot.payments)
            validate_payment(outstanding, from_id, to_id, amount_minor)

        payment = record_payment(
            event_id=snapshot.id,
            from_id=from_id,
            to_id=to_id,
            amount_minor=amount_minor,
            source=source,
            created_at=created_at,
        )

        logger.info(
            f"Recorded payment {payment.id[:8]}: {from_id} -> {to_id} "
            f"({amount_minor} minor units)"
        )

        return payment, snapshot.with_payment(payment)
