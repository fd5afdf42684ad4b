"""Record repayments and compute the debts still outstanding after them."""

import hashlib
import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from ..exceptions import InvalidPaymentError, PaymentExceedsDebtError
from ..models import Participant, Payment, PaymentSource, RawDebt
from .netting import compute_balances, greedy_transfers

logger = logging.getLogger(__name__)


def compute_payment_id(
    event_id: str,
    from_id: str,
    to_id: str,
    amount_minor: int,
    source: PaymentSource,
    created_at: datetime,
) -> str:
    """
    Compute a deterministic payment id.

    Same inputs always produce the same id, so re-recording an identical
    payment (same timestamp included) is detectable by the caller.
    """
    combined = "|".join(
        [event_id, from_id, to_id, str(amount_minor), source, created_at.isoformat()]
    )
    return hashlib.sha256(combined.encode()).hexdigest()


def record_payment(
    event_id: str,
    from_id: str,
    to_id: str,
    amount_minor: int,
    source: PaymentSource,
    created_at: datetime | None = None,
    payment_id: str | None = None,
) -> Payment:
    """
    Build a Payment record. Pure: nothing is stored.

    Args:
        event_id: Event the payment belongs to
        from_id: Participant who paid
        to_id: Participant who received the money
        amount_minor: Amount in minor units (must be positive)
        source: Debt view the payment was made from
        created_at: Payment timestamp, defaults to now (UTC)
        payment_id: Explicit id, defaults to a digest of the fields above

    Returns:
        The new payment
    """
    created_at = created_at or datetime.now(UTC)
    return Payment(
        id=payment_id
        or compute_payment_id(
            event_id, from_id, to_id, amount_minor, source, created_at
        ),
        event_id=event_id,
        from_id=from_id,
        to_id=to_id,
        amount_minor=amount_minor,
        created_at=created_at,
        source=source,
    )


def payment_adjusted_debts(
    raw_debts: Sequence[RawDebt],
    payments: Sequence[Payment],
) -> list[RawDebt]:
    """
    Append one reverse debt (receiver owes payer) per resolvable payment.

    Nothing is netted, so the result still keeps each pair separate and is
    the input for the pairwise (detailed) view after payments.

    A payment whose payer never appears as a debtor, or whose receiver never
    appears as a creditor, is dropped.
    """

    debtors_by_id: dict[str, Participant] = {}
    creditors_by_id: dict[str, Participant] = {}
    for debt in raw_debts:
        debtors_by_id.setdefault(debt.debtor.id, debt.debtor)
        creditors_by_id.setdefault(debt.creditor.id, debt.creditor)

    compensation: list[RawDebt] = []
    for payment in payments:
        payer = debtors_by_id.get(payment.from_id)
        receiver = creditors_by_id.get(payment.to_id)
        if payer is None or receiver is None:
            logger.debug(
                f"Dropping payment {payment.id}: {payment.from_id} -> "
                f"{payment.to_id} does not match any debt"
            )
            continue

        compensation.append(
            RawDebt(
                id=f"payment-{payment.id}",
                debtor=receiver,
                creditor=payer,
                amount_minor=payment.amount_minor,
            )
        )

    return [*raw_debts, *compensation]


def apply_payments(
    raw_debts: Sequence[RawDebt],
    payments: Sequence[Payment],
) -> list[RawDebt]:
    """
    Compute the debts still outstanding after recorded payments.

    Each payment is modeled as a reverse debt and the combined list is
    netted. The result depends only on final net balances, so it is
    independent of payment order. Overpayment is not rejected: it flips the
    direction of the remaining debt.

    Args:
        raw_debts: Debts derived from expenses
        payments: Recorded payments for the same event

    Returns:
        Outstanding debts, already minimum-cardinality
    """
    if not raw_debts:
        return []

    balances = compute_balances(payment_adjusted_debts(raw_debts, payments))

    return [
        RawDebt(
            id=f"effective-{debtor.id}-{creditor.id}-{debtor_index}-{creditor_index}",
            debtor=debtor,
            creditor=creditor,
            amount_minor=amount_minor,
        )
        for debtor, creditor, amount_minor, debtor_index, creditor_index in (
            greedy_transfers(balances)
        )
    ]


def outstanding_between(debts: Sequence[RawDebt], from_id: str, to_id: str) -> int:
    """
    Net amount ``from_id`` currently owes ``to_id`` across ``debts``.

    Negative when the debt runs the other way.
    """
    total = 0
    for debt in debts:
        if debt.debtor.id == from_id and debt.creditor.id == to_id:
            total += debt.amount_minor
        elif debt.debtor.id == to_id and debt.creditor.id == from_id:
            total -= debt.amount_minor
    return total


def validate_payment(
    debts: Sequence[RawDebt],
    from_id: str,
    to_id: str,
    amount_minor: int,
) -> None:
    """
    Check a payment against outstanding debts before recording it.

    This is caller-side policy: ``apply_payments`` accepts any payment.

    Raises:
        InvalidPaymentError: If the payment is non-positive or self-directed
        PaymentExceedsDebtError: If it exceeds what ``from_id`` owes ``to_id``
    """
    if from_id == to_id:
        raise InvalidPaymentError(f"Participant {from_id} cannot pay themselves")
    if amount_minor <= 0:
        raise InvalidPaymentError(
            f"Payment amount must be positive, got {amount_minor}"
        )

    outstanding = max(outstanding_between(debts, from_id, to_id), 0)
    if amount_minor > outstanding:
        raise PaymentExceedsDebtError(from_id, to_id, amount_minor, outstanding)
