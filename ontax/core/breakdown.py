"""Compose the individual calculators into a named tax and deduction breakdown."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ontax.core.federal import federal_tax
from ontax.core.money import D, Number, round_cents, round_rate, to_income
from ontax.core.payroll import insurance_deduction, pension_deduction
from ontax.core.provinces import get_provincial_calculator
from ontax.errors import DomainError, InvalidArgumentError

logger = logging.getLogger("ontax").getChild("breakdown")


class BreakdownField(str, Enum):
    TOTAL_TAX = "total_tax"
    TOTAL_DEDUCTIONS = "total_deductions"
    NET_PAY = "net_pay"
    AFTER_TAX_INCOME = "after_tax_income"
    TOTAL_PROVINCIAL_TAX = "total_provincial_tax"
    PROVINCIAL_TAX = "provincial_tax"
    PROVINCIAL_SURTAX = "provincial_surtax"
    FEDERAL_TAX = "federal_tax"
    TAX_RATE = "tax_rate"
    CANADA_PENSION_PLAN = "canada_pension_plan"
    EI_DEDUCTION = "ei_deduction"
    NET_PAY_RATE = "net_pay_rate"

    @property
    def is_rate(self) -> bool:
        return self in _RATE_FIELDS


_RATE_FIELDS = frozenset({BreakdownField.TAX_RATE, BreakdownField.NET_PAY_RATE})
DEFAULT_FIELD = BreakdownField.TOTAL_TAX


def resolve_field(field: BreakdownField | str) -> BreakdownField:
    if isinstance(field, BreakdownField):
        return field
    key = str(field).strip().lower()
    try:
        return BreakdownField(key)
    except ValueError as exc:
        choices = ", ".join(f.value for f in BreakdownField)
        raise InvalidArgumentError(f"Unknown breakdown field '{field}'; expected one of: {choices}") from exc


@dataclass(frozen=True)
class TaxBreakdown:
    income: D
    provincial_tax: D
    provincial_surtax: D
    federal_tax: D
    canada_pension_plan: D
    ei_deduction: D

    @property
    def total_provincial_tax(self) -> D:
        return self.provincial_tax + self.provincial_surtax

    @property
    def total_tax(self) -> D:
        return self.total_provincial_tax + self.federal_tax

    @property
    def total_deductions(self) -> D:
        return self.canada_pension_plan + self.ei_deduction

    @property
    def net_pay(self) -> D:
        return round_cents(self.income - self.total_tax - self.total_deductions)

    @property
    def after_tax_income(self) -> D:
        return round_cents(self.income - self.total_tax)

    @property
    def tax_rate(self) -> D:
        return self._rate(self.total_tax, BreakdownField.TAX_RATE)

    @property
    def net_pay_rate(self) -> D:
        return self._rate(self.net_pay, BreakdownField.NET_PAY_RATE)

    def _rate(self, amount: D, field: BreakdownField) -> D:
        if self.income == 0:
            raise DomainError(f"{field.value} is undefined for an income of zero")
        return round_rate(amount / self.income)

    def value(self, field: BreakdownField | str) -> D:
        return getattr(self, resolve_field(field).value)

    def as_dict(self, *, skip_undefined: bool = False) -> dict[str, D | None]:
        """Every breakdown field keyed by name.

        With ``skip_undefined`` the rate fields map to ``None`` for a zero
        income instead of raising :class:`DomainError`.
        """
        result: dict[str, D | None] = {}
        for field in BreakdownField:
            if skip_undefined and field.is_rate and self.income == 0:
                result[field.value] = None
                continue
            result[field.value] = self.value(field)
        return result


def compute_breakdown(income: Number, province: str | None = None) -> TaxBreakdown:
    amount = to_income(income)
    provincial = get_provincial_calculator(province)
    breakdown = TaxBreakdown(
        income=amount,
        provincial_tax=provincial.tax(amount),
        provincial_surtax=provincial.surtax_for_income(amount),
        federal_tax=federal_tax(amount),
        canada_pension_plan=pension_deduction(amount),
        ei_deduction=insurance_deduction(amount),
    )
    logger.debug(
        "Computed breakdown income=%s province=%s total_tax=%s total_deductions=%s",
        amount,
        provincial.code,
        breakdown.total_tax,
        breakdown.total_deductions,
    )
    return breakdown


def tax_breakdown(income: Number, field: BreakdownField | str = DEFAULT_FIELD) -> D:
    """Return a single figure from the breakdown of ``income``.

    Raises :class:`InvalidArgumentError` for an unknown field,
    :class:`InvalidInputError` for a negative income and :class:`DomainError`
    when a rate is requested for an income of zero.
    """
    selected = resolve_field(field)
    return compute_breakdown(income).value(selected)


__all__ = [
    "DEFAULT_FIELD",
    "BreakdownField",
    "TaxBreakdown",
    "compute_breakdown",
    "resolve_field",
    "tax_breakdown",
]
