from __future__ import annotations

from dataclasses import dataclass

from ontax.core.money import D, Number, round_cents, to_income
from ontax.core.payroll import limits_2021
from ontax.errors import ConfigurationError

_ZERO = D("0")


@dataclass(frozen=True)
class DeductionRule:
    """Capped-linear payroll deduction.

    ``min(max(income - exemption, 0), ceiling) * rate``, then capped at
    ``maximum`` when one is set.
    """

    name: str
    exemption: D
    ceiling: D
    rate: D
    maximum: D | None = None

    def __post_init__(self) -> None:
        for label in ("exemption", "ceiling"):
            value = getattr(self, label)
            if not value.is_finite() or value < _ZERO:
                raise ConfigurationError(f"{self.name}: {label} {value} must be finite and non-negative")
        if not self.rate.is_finite() or not _ZERO <= self.rate <= D("1"):
            raise ConfigurationError(f"{self.name}: rate {self.rate} outside [0, 1]")
        if self.maximum is not None and (not self.maximum.is_finite() or self.maximum < _ZERO):
            raise ConfigurationError(f"{self.name}: maximum {self.maximum} must be finite and non-negative")

    def earnings(self, income: Number) -> D:
        ti = to_income(income)
        return min(max(ti - self.exemption, _ZERO), self.ceiling)

    def apply(self, income: Number) -> D:
        amount = self.earnings(income) * self.rate
        if self.maximum is not None:
            amount = min(amount, self.maximum)
        return round_cents(amount)


CPP_RULE_2021 = DeductionRule(
    name="canada_pension_plan",
    exemption=limits_2021.CPP_BASIC_EXEMPTION,
    ceiling=limits_2021.CPP_MAX_PENSIONABLE_EARNINGS,
    rate=limits_2021.CPP_RATE,
    maximum=limits_2021.CPP_MAX_EMPLOYEE,
)

EI_RULE_2021 = DeductionRule(
    name="ei_deduction",
    exemption=_ZERO,
    ceiling=limits_2021.EI_MIE,
    rate=limits_2021.EI_RATE_EMP,
)


def pension_deduction(income: Number) -> D:
    """Employee Canada Pension Plan contribution for the year."""
    return CPP_RULE_2021.apply(income)


def insurance_deduction(income: Number) -> D:
    """Employee Employment Insurance premium for the year."""
    return EI_RULE_2021.apply(income)


__all__ = [
    "CPP_RULE_2021",
    "DeductionRule",
    "EI_RULE_2021",
    "insurance_deduction",
    "pension_deduction",
]
