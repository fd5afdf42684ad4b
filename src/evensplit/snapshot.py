"""Event snapshot files.

A snapshot is a JSON document holding one event's participants, expenses and
payments. It is how the CLI hands a consistent input to the debt engine; the
engine itself never touches files.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from .exceptions import SnapshotError
from .models import EventSnapshot, Payment

logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> EventSnapshot:
    """
    Load and validate an event snapshot.

    Raises:
        SnapshotError: If the file is missing, unreadable or invalid
    """
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e

    try:
        snapshot = EventSnapshot.model_validate_json(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot {path}:\n{e}") from e

    logger.debug(
        f"Loaded snapshot {snapshot.id} from {path}: "
        f"{len(snapshot.participants)} participants, "
        f"{len(snapshot.expenses)} expenses, {len(snapshot.payments)} payments"
    )
    return snapshot


def save_snapshot(snapshot: EventSnapshot, path: Path) -> None:
    """Write a snapshot as JSON, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Cannot write snapshot {path}: {e}") from e


def append_payment(path: Path, payment: Payment) -> EventSnapshot:
    """Append a payment to the snapshot stored at ``path``."""
    snapshot = load_snapshot(path).with_payment(payment)
    save_snapshot(snapshot, path)
    return snapshot
