from __future__ import annotations

from decimal import Decimal

from ontax.core.brackets import build_bracket_table, calculate_progressive_tax
from ontax.core.money import Number

D = Decimal

FEDERAL_BRACKETS_2021 = build_bracket_table([
    (D("13808"),   D("49020"),  D("0.15")),
    (D("49020"),   D("98040"),  D("0.205")),
    (D("98040"),   D("151978"), D("0.26")),
    (D("151978"),  D("216511"), D("0.29")),
    (D("216511"),  None,        D("0.33")),
])


def federal_tax_2021(taxable_income: Number) -> D:
    return calculate_progressive_tax(FEDERAL_BRACKETS_2021, taxable_income)


def federal_tax(income: Number) -> D:
    """Federal tax payable on employment income."""
    return federal_tax_2021(income)


__all__ = ["FEDERAL_BRACKETS_2021", "federal_tax", "federal_tax_2021"]
