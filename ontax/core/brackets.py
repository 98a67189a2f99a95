from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Iterator

from ontax.core.money import D, Number, round_cents, to_decimal, to_income
from ontax.errors import ConfigurationError

_ZERO = D("0")
_ONE = D("1")


@dataclass(frozen=True)
class TaxBracket:
    lower: D
    upper: D | None
    rate: D

    def __iter__(self) -> Iterator[D | None]:
        return iter((self.lower, self.upper, self.rate))


@dataclass(frozen=True)
class SurtaxThreshold:
    threshold: D
    rate: D

    def __iter__(self) -> Iterator[D]:
        return iter((self.threshold, self.rate))


BracketRow = TaxBracket | tuple[Number, Number | None, Number]
SurtaxRow = SurtaxThreshold | tuple[Number, Number]


def _config_decimal(value: Number, what: str) -> Decimal:
    try:
        return to_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ConfigurationError(f"{what} must be numeric, got {value!r}") from exc


def _check_rate(rate: Decimal, where: str) -> None:
    if not rate.is_finite() or rate < _ZERO or rate > _ONE:
        raise ConfigurationError(f"{where}: rate {rate} outside [0, 1]")


def build_bracket_table(rows: Iterable[BracketRow]) -> tuple[TaxBracket, ...]:
    """Validate ``(lower, upper, rate)`` rows into an immutable bracket table.

    Brackets must start at a non-negative lower bound, be contiguous and
    ascending, and end with exactly one unbounded bracket. An infinite upper
    bound is stored as ``None``.
    """
    table: list[TaxBracket] = []
    for index, row in enumerate(rows):
        lower_raw, upper_raw, rate_raw = row
        where = f"bracket {index}"
        lower = _config_decimal(lower_raw, f"{where} lower bound")
        upper = None if upper_raw is None else _config_decimal(upper_raw, f"{where} upper bound")
        rate = _config_decimal(rate_raw, f"{where} rate")
        if upper is not None and upper.is_infinite():
            if upper < 0:
                raise ConfigurationError(f"{where}: upper bound cannot be negative infinity")
            upper = None
        if not lower.is_finite() or lower < _ZERO:
            raise ConfigurationError(f"{where}: lower bound {lower} must be finite and non-negative")
        if upper is not None and upper <= lower:
            raise ConfigurationError(f"{where}: upper bound {upper} must exceed lower bound {lower}")
        _check_rate(rate, where)
        if table:
            previous = table[-1]
            if previous.upper is None:
                raise ConfigurationError(f"{where}: follows an unbounded bracket")
            if lower != previous.upper:
                raise ConfigurationError(
                    f"{where}: lower bound {lower} does not continue from {previous.upper}"
                )
        table.append(TaxBracket(lower=lower, upper=upper, rate=rate))
    if not table:
        raise ConfigurationError("bracket table is empty")
    if table[-1].upper is not None:
        raise ConfigurationError("last bracket must be unbounded")
    return tuple(table)


def build_surtax_table(rows: Iterable[SurtaxRow]) -> tuple[SurtaxThreshold, ...]:
    table: list[SurtaxThreshold] = []
    for index, row in enumerate(rows):
        threshold_raw, rate_raw = row
        where = f"surtax threshold {index}"
        threshold = _config_decimal(threshold_raw, where)
        rate = _config_decimal(rate_raw, f"{where} rate")
        if not threshold.is_finite() or threshold < _ZERO:
            raise ConfigurationError(f"{where}: {threshold} must be finite and non-negative")
        _check_rate(rate, where)
        if table and threshold <= table[-1].threshold:
            raise ConfigurationError(f"{where}: thresholds must be strictly ascending")
        table.append(SurtaxThreshold(threshold=threshold, rate=rate))
    if not table:
        raise ConfigurationError("surtax table is empty")
    return tuple(table)


def calculate_progressive_tax(
    brackets: Iterable[TaxBracket | tuple[D, D | None, D]],
    income: Number,
) -> D:
    ti = to_income(income)
    tax = _ZERO
    for bracket in brackets:
        lower, upper, rate = bracket
        if ti <= lower:
            break
        hi = ti if upper is None else min(ti, upper)
        tax += (hi - lower) * rate
    return round_cents(tax)


def calculate_cumulative_surtax(
    thresholds: Iterable[SurtaxThreshold | tuple[D, D]],
    tax_payable: Number,
) -> D:
    # Each threshold applies to the full excess above it; rates stack.
    base = to_income(tax_payable, label="tax payable")
    surtax = _ZERO
    for threshold, rate in thresholds:
        if base > threshold:
            surtax += (base - threshold) * rate
    return round_cents(surtax)


__all__ = [
    "SurtaxThreshold",
    "TaxBracket",
    "build_bracket_table",
    "build_surtax_table",
    "calculate_cumulative_surtax",
    "calculate_progressive_tax",
]
