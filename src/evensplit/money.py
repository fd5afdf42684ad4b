"""Exact-money helpers.

All debt computation works on integer minor units (cents). Conversion to and
from Decimal happens only at the boundary, through the helpers below.
"""

from decimal import (
    ROUND_HALF_UP,
    Decimal,
    DecimalException,
    InvalidOperation,
    localcontext,
)

MINOR_UNITS_SCALE = 100

Amount = Decimal | float | int | str


def to_minor_units(amount: Amount) -> int:
    """
    Convert a decimal amount to integer minor units.

    Uses ROUND_HALF_UP, so 0.005 becomes 1 cent. Floats are converted through
    their shortest repr to avoid binary representation drift.

    Args:
        amount: Amount in major units (e.g. dollars)

    Returns:
        Amount in minor units. Non-finite, unparsable and negative amounts
        are coerced to 0, as are amounts past the Decimal exponent range.
        Large amounts are converted exactly, whatever the context precision.
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        return 0

    if not value.is_finite() or value <= 0:
        return 0

    try:
        with localcontext() as ctx:
            # Room for every digit of value * 100, integer part included
            ctx.prec = max(
                ctx.prec, len(value.as_tuple().digits) + 3, value.adjusted() + 4
            )
            minor = value * MINOR_UNITS_SCALE
            return int(minor.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except DecimalException:
        return 0


def from_minor_units(amount_minor: int) -> Decimal:
    """Convert integer minor units back to a two-place Decimal."""
    value = Decimal(int(amount_minor))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits))
        return value.scaleb(-2)


def round_money(amount: Amount) -> Decimal:
    """Canonicalize an amount to exact-cent precision."""
    return from_minor_units(to_minor_units(amount))
