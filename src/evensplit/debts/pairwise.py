"""Pairwise (detailed) debt view."""

from collections.abc import Callable, Sequence
from typing import Any

from ..models import DetailedDebt, Participant, RawDebt


def aggregate_pairwise(
    debts: Sequence[RawDebt],
    name_key: Callable[[str], Any] | None = None,
) -> list[DetailedDebt]:
    """
    Collapse all debts between each pair of participants into one net debt.

    Unlike ``net_balances``, balances are never routed through a third
    participant: A owing B and B owing C stay two separate entries.

    Args:
        debts: Any debt list, typically the effective debts
        name_key: Sort key applied to participant names. Defaults to
            ``str.casefold``; pass ``locale.strxfrm`` for locale collation.

    Returns:
        One debt per pair with a nonzero net, sorted by debtor name then
        creditor name
    """
    key = name_key or str.casefold

    # (first, second) -> signed amount first owes second
    pairs: dict[tuple[str, str], tuple[Participant, Participant, int]] = {}

    for debt in debts:
        from_is_first = debt.debtor.id <= debt.creditor.id
        first, second = (
            (debt.debtor, debt.creditor)
            if from_is_first
            else (debt.creditor, debt.debtor)
        )
        pair_key = (first.id, second.id)
        _, _, current = pairs.get(pair_key, (first, second, 0))
        delta = debt.amount_minor if from_is_first else -debt.amount_minor
        pairs[pair_key] = (first, second, current + delta)

    detailed = []
    for first, second, first_owes_second in pairs.values():
        if first_owes_second == 0:
            continue
        debtor, creditor = (
            (first, second) if first_owes_second > 0 else (second, first)
        )
        detailed.append(
            DetailedDebt(
                id=f"{debtor.id}-{creditor.id}-detailed",
                debtor=debtor,
                creditor=creditor,
                amount_minor=abs(first_owes_second),
            )
        )

    return sorted(
        detailed, key=lambda d: (key(d.debtor.name), key(d.creditor.name))
    )
