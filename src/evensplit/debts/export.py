"""CSV export of debt lists."""

import csv
import io
from collections.abc import Sequence

from ..models import RawDebt

CSV_HEADERS = ["From", "To", "Amount"]


def debts_to_csv(debts: Sequence[RawDebt]) -> str:
    """
    Render debts as CSV with a From/To/Amount header.

    Every field is quoted; amounts are plain two-place decimals.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for debt in debts:
        writer.writerow([debt.debtor.name, debt.creditor.name, str(debt.amount)])
    return buffer.getvalue()
