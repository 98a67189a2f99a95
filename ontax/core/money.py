from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ontax.errors import InvalidInputError

D = Decimal

Number = Decimal | int | float | str

_CENT = D("0.01")
_RATE_PLACES = D("0.000001")

# Largest accepted amount; cent results stay inside the default 28-digit context.
MAX_AMOUNT = D("1000000000000000")


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("booleans are not amounts")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def to_income(value: Number, *, label: str = "income") -> Decimal:
    """Coerce a caller-supplied amount, rejecting negative or non-finite values."""
    try:
        amount = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidInputError(f"{label} must be a number, got {value!r}") from exc
    if not amount.is_finite():
        raise InvalidInputError(f"{label} must be finite, got {value!r}")
    if amount < 0:
        raise InvalidInputError(f"{label} cannot be negative, got {amount}")
    if amount > MAX_AMOUNT:
        raise InvalidInputError(f"{label} exceeds the supported maximum of {MAX_AMOUNT}, got {amount}")
    return amount


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def round_rate(value: Decimal) -> Decimal:
    return value.quantize(_RATE_PLACES, rounding=ROUND_HALF_UP)


__all__ = [
    "D",
    "MAX_AMOUNT",
    "Number",
    "round_cents",
    "round_rate",
    "to_decimal",
    "to_income",
]
