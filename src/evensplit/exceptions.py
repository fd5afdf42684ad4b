"""Custom exceptions for evensplit.

The pure debt engine never raises these; they belong to the caller-side
helpers (configuration, snapshot files, payment validation) and the CLI.
"""


class EvenSplitError(Exception):
    """Base exception for all evensplit errors."""

    pass


class ConfigurationError(EvenSplitError):
    """Raised when configuration is invalid or missing."""

    pass


class SnapshotError(EvenSplitError):
    """Raised when an event snapshot file cannot be read or written."""

    pass


class PaymentError(EvenSplitError):
    """Base class for payment recording errors."""

    pass


class InvalidPaymentError(PaymentError):
    """Raised when a payment is malformed (e.g. paying yourself)."""

    pass


class PaymentExceedsDebtError(PaymentError):
    """Raised when a payment is larger than what the payer currently owes."""

    def __init__(
        self,
        from_id: str,
        to_id: str,
        amount_minor: int,
        outstanding_minor: int,
        message: str | None = None,
    ):
        self.from_id = from_id
        self.to_id = to_id
        self.amount_minor = amount_minor
        self.outstanding_minor = outstanding_minor
        super().__init__(
            message
            or f"Payment of {amount_minor} from {from_id} to {to_id} exceeds "
            f"outstanding debt of {outstanding_minor}"
        )
