"""Net a debt graph into the fewest transfers that settle it.

Balances are kept in insertion-ordered dicts keyed by participant id. The
first-occurrence order of participants in the input decides the greedy
matching order, which keeps the output reproducible.
"""

from collections.abc import Iterator, Sequence

from pydantic import BaseModel

from ..models import Participant, RawDebt, SimplifiedDebt


class Balance(BaseModel):
    """A participant's signed net balance (positive = owed money)."""

    participant: Participant
    amount_minor: int = 0


def compute_balances(debts: Sequence[RawDebt]) -> dict[str, Balance]:
    """
    Compute signed net balances per participant.

    Each debt subtracts from its debtor and adds to its creditor. Participants
    appear in the order they are first seen (debtor before creditor).

    Every call builds fresh Balance objects owned by the caller. Mutating
    them never affects another call or the input debts, and
    ``greedy_transfers`` works on its own copies.
    """
    balances: dict[str, Balance] = {}

    for debt in debts:
        debtor = balances.setdefault(
            debt.debtor.id, Balance(participant=debt.debtor)
        )
        creditor = balances.setdefault(
            debt.creditor.id, Balance(participant=debt.creditor)
        )
        debtor.amount_minor -= debt.amount_minor
        creditor.amount_minor += debt.amount_minor

    return balances


def greedy_transfers(
    balances: dict[str, Balance],
) -> Iterator[tuple[Participant, Participant, int, int, int]]:
    """
    Match debtors to creditors with a two-pointer greedy walk.

    Yields:
        (debtor, creditor, amount_minor, debtor_index, creditor_index)
    """
    creditors = [
        Balance(participant=b.participant, amount_minor=b.amount_minor)
        for b in balances.values()
        if b.amount_minor > 0
    ]
    debtors = [
        Balance(participant=b.participant, amount_minor=-b.amount_minor)
        for b in balances.values()
        if b.amount_minor < 0
    ]

    debtor_index = 0
    creditor_index = 0

    while debtor_index < len(debtors) and creditor_index < len(creditors):
        debtor = debtors[debtor_index]
        creditor = creditors[creditor_index]
        amount_minor = min(debtor.amount_minor, creditor.amount_minor)

        yield (
            debtor.participant,
            creditor.participant,
            amount_minor,
            debtor_index,
            creditor_index,
        )

        debtor.amount_minor -= amount_minor
        creditor.amount_minor -= amount_minor

        if debtor.amount_minor == 0:
            debtor_index += 1
        if creditor.amount_minor == 0:
            creditor_index += 1


def net_balances(debts: Sequence[RawDebt]) -> list[SimplifiedDebt]:
    """
    Reduce a debt list to a minimum-cardinality set of transfers.

    The result preserves every participant's net balance and has at most
    ``creditors + debtors - 1`` entries.
    """
    return [
        SimplifiedDebt(
            id=f"{debtor.id}-{creditor.id}-{debtor_index}-{creditor_index}",
            debtor=debtor,
            creditor=creditor,
            amount_minor=amount_minor,
        )
        for debtor, creditor, amount_minor, debtor_index, creditor_index in (
            greedy_transfers(compute_balances(debts))
        )
    ]
