from __future__ import annotations

from decimal import Decimal

from ontax.core.brackets import (
    build_bracket_table,
    build_surtax_table,
    calculate_cumulative_surtax,
    calculate_progressive_tax,
)
from ontax.core.money import Number

D = Decimal

# ------------------------------ 2021 ---------------------------------
ON_BRACKETS_2021 = build_bracket_table([
    (D("10880"),   D("45142"),  D("0.0505")),
    (D("45142"),   D("90287"),  D("0.0915")),
    (D("90287"),   D("150000"), D("0.1116")),
    (D("150000"),  D("220000"), D("0.1216")),
    (D("220000"),  None,        D("0.1316")),
])

ON_SURTAX_2021 = build_surtax_table([
    (D("4874"), D("0.20")),
    (D("6237"), D("0.36")),
])


def on_tax_on_taxable_income_2021(taxable_income: Number) -> D:
    return calculate_progressive_tax(ON_BRACKETS_2021, taxable_income)


def on_surtax_2021(ont_tax_before_surtax: Number) -> D:
    return calculate_cumulative_surtax(ON_SURTAX_2021, ont_tax_before_surtax)


def provincial_tax(income: Number) -> D:
    """Ontario tax payable on employment income, excluding surtax."""
    return on_tax_on_taxable_income_2021(income)


def provincial_surtax(income: Number) -> D:
    """Ontario surtax for an income.

    The surtax is levied on Ontario tax payable, not on income, so the
    provincial tax is computed first.
    """
    return on_surtax_2021(provincial_tax(income))


__all__ = [
    "ON_BRACKETS_2021",
    "ON_SURTAX_2021",
    "on_surtax_2021",
    "on_tax_on_taxable_income_2021",
    "provincial_surtax",
    "provincial_tax",
]
