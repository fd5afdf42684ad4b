"""Tests for balance netting (debt simplification)."""

import random

import pytest

from evensplit.debts.netting import compute_balances, greedy_transfers, net_balances
from evensplit.models import Participant, RawDebt

PEOPLE = {
    pid: Participant(id=pid, name=name)
    for pid, name in [("a", "Alice"), ("b", "Bob"), ("c", "Carol"), ("d", "Dan")]
}


def make_debt(debtor: str, creditor: str, amount_minor: int) -> RawDebt:
    """Create a RawDebt between two of the test participants."""
    return RawDebt(
        id=f"{debtor}-{creditor}-{amount_minor}",
        debtor=PEOPLE[debtor],
        creditor=PEOPLE[creditor],
        amount_minor=amount_minor,
    )


def signed_balances(debts) -> dict[str, int]:
    """Net balance per participant id, ignoring zeros."""
    return {
        pid: balance.amount_minor
        for pid, balance in compute_balances(debts).items()
        if balance.amount_minor != 0
    }


def random_debts(seed: int, count: int = 12) -> list[RawDebt]:
    """Generate a reproducible random debt list."""
    rng = random.Random(seed)
    ids = list(PEOPLE)
    debts = []
    for _ in range(count):
        debtor, creditor = rng.sample(ids, 2)
        debts.append(make_debt(debtor, creditor, rng.randint(1, 5000)))
    return debts


class TestComputeBalances:
    """Signed balance accumulation."""

    def test_signs(self):
        balances = compute_balances([make_debt("a", "b", 500)])

        assert balances["a"].amount_minor == -500
        assert balances["b"].amount_minor == 500

    def test_first_occurrence_order(self):
        debts = [make_debt("c", "a", 100), make_debt("b", "d", 100)]

        assert list(compute_balances(debts)) == ["c", "a", "b", "d"]

    def test_balances_sum_to_zero(self):
        balances = compute_balances(random_debts(seed=7))

        assert sum(b.amount_minor for b in balances.values()) == 0

    def test_each_call_returns_fresh_balances(self):
        debts = [make_debt("a", "b", 500)]
        first = compute_balances(debts)

        first["a"].amount_minor = 0

        assert compute_balances(debts)["a"].amount_minor == -500

    def test_greedy_transfers_leaves_balances_untouched(self):
        balances = compute_balances([make_debt("a", "b", 500)])

        transfers = list(greedy_transfers(balances))

        assert [(d.id, c.id, amount) for d, c, amount, _, _ in transfers] == [
            ("a", "b", 500)
        ]
        assert balances["a"].amount_minor == -500
        assert balances["b"].amount_minor == 500


class TestNetBalances:
    """Greedy minimum-transfer settlement."""

    def test_empty(self):
        assert net_balances([]) == []

    def test_two_debtors_one_creditor(self):
        debts = [make_debt("b", "a", 3333), make_debt("c", "a", 3333)]

        result = net_balances(debts)

        assert [(d.id, d.amount_minor) for d in result] == [
            ("b-a-0-0", 3333),
            ("c-a-1-0", 3333),
        ]

    def test_chain_collapses_through_intermediary(self):
        """A owes B and B owes C the same amount: A pays C directly."""
        result = net_balances([make_debt("a", "b", 1000), make_debt("b", "c", 1000)])

        assert [(d.debtor.id, d.creditor.id, d.amount_minor) for d in result] == [
            ("a", "c", 1000)
        ]

    def test_cycle_cancels_out(self):
        debts = [
            make_debt("a", "b", 500),
            make_debt("b", "c", 500),
            make_debt("c", "a", 500),
        ]

        assert net_balances(debts) == []

    def test_opposite_debts_net(self):
        result = net_balances([make_debt("a", "b", 700), make_debt("b", "a", 200)])

        assert [(d.debtor.id, d.creditor.id, d.amount_minor) for d in result] == [
            ("a", "b", 500)
        ]

    def test_both_pointers_advance_together(self):
        debts = [make_debt("a", "c", 500), make_debt("b", "d", 500)]

        result = net_balances(debts)

        assert [d.id for d in result] == ["a-c-0-0", "b-d-1-1"]

    def test_one_debtor_many_creditors(self):
        debts = [
            make_debt("a", "b", 1000),
            make_debt("b", "c", 500),
            make_debt("c", "d", 700),
            make_debt("d", "a", 200),
            make_debt("a", "c", 300),
        ]

        result = net_balances(debts)

        assert [(d.debtor.id, d.creditor.id, d.amount_minor) for d in result] == [
            ("a", "b", 500),
            ("a", "c", 100),
            ("a", "d", 500),
        ]

    def test_deterministic(self):
        debts = random_debts(seed=3)

        first = [d.model_dump() for d in net_balances(debts)]
        second = [d.model_dump() for d in net_balances(debts)]

        assert first == second


class TestSettlementProperties:
    """Minimality and balance preservation over generated inputs."""

    @pytest.mark.parametrize("seed", range(20))
    def test_at_most_creditors_plus_debtors_minus_one(self, seed):
        debts = random_debts(seed)
        balances = signed_balances(debts)
        creditors = sum(1 for amount in balances.values() if amount > 0)
        debtors = sum(1 for amount in balances.values() if amount < 0)

        result = net_balances(debts)

        assert len(result) <= max(creditors + debtors - 1, 0)

    @pytest.mark.parametrize("seed", range(20))
    def test_net_balances_preserved(self, seed):
        debts = random_debts(seed)

        assert signed_balances(net_balances(debts)) == signed_balances(debts)

    @pytest.mark.parametrize("seed", range(5))
    def test_all_amounts_positive(self, seed):
        assert all(d.amount_minor > 0 for d in net_balances(random_debts(seed)))
