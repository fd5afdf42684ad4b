"""Outstanding-debt summaries for an event."""

from collections.abc import Sequence

from ..models import Expense, Participant, RawDebt
from ..money import to_minor_units
from .pairwise import aggregate_pairwise


def total_amount_minor(expenses: Sequence[Expense]) -> int:
    """Sum of all expense amounts, each rounded to cents first."""
    return sum(to_minor_units(expense.amount) for expense in expenses)


def outstanding_total_minor(debts: Sequence[RawDebt]) -> int:
    """Total money still to be transferred across ``debts``."""
    return sum(debt.amount_minor for debt in debts)


def outstanding_people_count(debts: Sequence[RawDebt]) -> int:
    """Number of distinct participants involved in ``debts``."""
    people = set()
    for debt in debts:
        people.add(debt.debtor.id)
        people.add(debt.creditor.id)
    return len(people)


def outstanding_transfers_count(debts: Sequence[RawDebt]) -> int:
    """Number of pairwise transfers needed without routing through others."""
    return len(aggregate_pairwise(debts))


def participant_balances(
    participants: Sequence[Participant],
    debts: Sequence[RawDebt],
) -> dict[str, int]:
    """
    Signed net balance per participant id (positive = is owed money).

    Every participant is listed, in participant order, even with a zero
    balance. Participants only found in ``debts`` are appended after them.
    """
    balances = {participant.id: 0 for participant in participants}
    for debt in debts:
        debtor_id, creditor_id = debt.debtor.id, debt.creditor.id
        balances[debtor_id] = balances.get(debtor_id, 0) - debt.amount_minor
        balances[creditor_id] = balances.get(creditor_id, 0) + debt.amount_minor
    return balances


def simplified_totals(debts: Sequence[RawDebt]) -> tuple[int, int]:
    """
    Return (total owed, total to be received) across ``debts``.

    The two always match; both are returned for display symmetry.
    """
    total = outstanding_total_minor(debts)
    return total, total
