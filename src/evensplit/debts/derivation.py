"""Derive raw debts from an event's expenses."""

import logging
from collections.abc import Sequence

from ..models import Expense, Participant, RawDebt
from ..money import to_minor_units

logger = logging.getLogger(__name__)


def split_shares(total_minor: int, count: int) -> list[int]:
    """
    Split ``total_minor`` into ``count`` integer shares.

    The remainder goes one cent at a time to the lowest indices, so the
    shares always sum to ``total_minor`` exactly.

    Example:
        split_shares(101, 3) == [34, 34, 33]
    """
    if count <= 0:
        return []

    base_share, remainder = divmod(total_minor, count)
    return [base_share + (1 if index < remainder else 0) for index in range(count)]


def derive_raw_debts(
    participants: Sequence[Participant],
    expenses: Sequence[Expense],
) -> list[RawDebt]:
    """
    Compute who owes each expense's payer, and how much.

    Every expense is split equally across all participants, payer included.
    The rounding remainder is assigned by position in ``participants``, with
    the payer's own slot counted, so reordering participants can move a cent.

    Args:
        participants: Event participants, in remainder-assignment order
        expenses: Event expenses

    Returns:
        One debt per (expense, non-payer participant) with a positive share,
        in expense order then participant order
    """
    if not participants:
        return []

    debts: list[RawDebt] = []

    for expense in expenses:
        payer = next((p for p in participants if p.id == expense.payer_id), None)
        if payer is None:
            logger.debug(
                f"Skipping expense {expense.id}: payer {expense.payer_id} "
                f"is not a participant"
            )
            continue

        shares = split_shares(to_minor_units(expense.amount), len(participants))

        for participant, share_minor in zip(participants, shares):
            if participant.id == payer.id or share_minor <= 0:
                continue

            debts.append(
                RawDebt(
                    id=f"{expense.id}-{participant.id}-{payer.id}",
                    debtor=participant,
                    creditor=payer,
                    amount_minor=share_minor,
                )
            )

    return debts
