"""Tests for the evensplit command line."""

import json

import pytest
from typer.testing import CliRunner

from evensplit.cli import app
from evensplit.snapshot import load_snapshot

runner = CliRunner()


@pytest.fixture
def snapshot_path(tmp_path):
    """Write a snapshot where Alice paid $100.00 for three people."""
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps(
            {
                "id": "ev1",
                "title": "Ski trip",
                "currency": "USD",
                "participants": [
                    {"id": "a", "name": "Alice"},
                    {"id": "b", "name": "Bob"},
                    {"id": "c", "name": "Carol"},
                ],
                "expenses": [{"id": "e1", "amount": "100.00", "payer_id": "a"}],
            }
        )
    )
    return path


class TestShow:
    """The debts show command."""

    def test_table(self, snapshot_path):
        result = runner.invoke(app, ["debts", "show", "--snapshot", str(snapshot_path)])

        assert result.exit_code == 0
        assert "Ski trip" in result.output
        assert "Bob" in result.output
        assert "33.33" in result.output

    def test_csv(self, snapshot_path):
        result = runner.invoke(
            app, ["debts", "show", "--snapshot", str(snapshot_path), "--csv"]
        )

        assert result.exit_code == 0
        assert result.output == (
            '"From","To","Amount"\n'
            '"Bob","Alice","33.33"\n'
            '"Carol","Alice","33.33"\n'
        )

    def test_detailed_view_csv(self, snapshot_path):
        result = runner.invoke(
            app,
            [
                "debts",
                "show",
                "--snapshot",
                str(snapshot_path),
                "--view",
                "detailed",
                "--csv",
            ],
        )

        assert result.exit_code == 0
        assert '"Carol","Alice","33.33"' in result.output

    def test_missing_snapshot(self, tmp_path):
        result = runner.invoke(
            app, ["debts", "show", "--snapshot", str(tmp_path / "missing.json")]
        )

        assert result.exit_code == 1
        assert "Cannot read snapshot" in result.output


class TestPay:
    """The debts pay command."""

    def test_records_payment(self, snapshot_path):
        result = runner.invoke(
            app, ["debts", "pay", "b", "a", "33.33", "--snapshot", str(snapshot_path)]
        )

        assert result.exit_code == 0
        assert "Recorded payment" in result.output
        payments = load_snapshot(snapshot_path).payments
        assert len(payments) == 1
        assert payments[0].amount_minor == 3333

        shown = runner.invoke(
            app, ["debts", "show", "--snapshot", str(snapshot_path), "--csv"]
        )
        assert shown.output == '"From","To","Amount"\n"Carol","Alice","33.33"\n'

    def test_summary_counts_paid_debts(self, snapshot_path):
        runner.invoke(
            app, ["debts", "pay", "b", "a", "33.33", "--snapshot", str(snapshot_path)]
        )

        result = runner.invoke(app, ["debts", "show", "--snapshot", str(snapshot_path)])

        assert result.exit_code == 0
        assert "Detailed debts paid off: 1 of 2" in result.output
        assert "Simplified debts paid off: 1 of 2" in result.output

    def test_ignore_payments(self, snapshot_path):
        runner.invoke(
            app, ["debts", "pay", "b", "a", "33.33", "--snapshot", str(snapshot_path)]
        )

        result = runner.invoke(
            app,
            [
                "debts",
                "show",
                "--snapshot",
                str(snapshot_path),
                "--ignore-payments",
                "--csv",
            ],
        )

        assert '"Bob","Alice","33.33"' in result.output

    def test_overpayment_rejected(self, snapshot_path):
        result = runner.invoke(
            app, ["debts", "pay", "b", "a", "50", "--snapshot", str(snapshot_path)]
        )

        assert result.exit_code == 1
        assert "exceeds outstanding debt" in result.output
        assert load_snapshot(snapshot_path).payments == ()

    def test_force_overpayment(self, snapshot_path):
        result = runner.invoke(
            app,
            ["debts", "pay", "b", "a", "50", "--force", "--snapshot", str(snapshot_path)],
        )

        assert result.exit_code == 0
        assert load_snapshot(snapshot_path).payments[0].amount_minor == 5000

    def test_invalid_amount(self, snapshot_path):
        result = runner.invoke(
            app, ["debts", "pay", "b", "a", "abc", "--snapshot", str(snapshot_path)]
        )

        assert result.exit_code == 1
        assert "Invalid amount" in result.output


def test_balances(snapshot_path):
    result = runner.invoke(app, ["debts", "balances", "--snapshot", str(snapshot_path)])

    assert result.exit_code == 0
    assert "Carol" in result.output
    assert "66.66" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "evensplit 0.1.0" in result.output
