from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from ontax.core.brackets import SurtaxThreshold, TaxBracket
from ontax.core.money import D, Number
from ontax.core.provinces import on
from ontax.errors import InvalidArgumentError

TaxFunction = Callable[[Number], D]


@dataclass(frozen=True)
class ProvincialCalculator:
    code: str
    name: str
    brackets: tuple[TaxBracket, ...]
    surtax: tuple[SurtaxThreshold, ...]
    tax: TaxFunction
    surtax_on: TaxFunction

    def surtax_for_income(self, income: Number) -> D:
        return self.surtax_on(self.tax(income))


_DEFAULT_PROVINCE = "ON"

_PROVINCE_CALCULATORS: dict[str, ProvincialCalculator] = {
    "ON": ProvincialCalculator(
        code="ON",
        name="Ontario",
        brackets=on.ON_BRACKETS_2021,
        surtax=on.ON_SURTAX_2021,
        tax=on.on_tax_on_taxable_income_2021,
        surtax_on=on.on_surtax_2021,
    ),
}


def get_provincial_calculator(province: str | None = None) -> ProvincialCalculator:
    province_code = province.strip().upper() if province else _DEFAULT_PROVINCE
    try:
        return _PROVINCE_CALCULATORS[province_code]
    except KeyError as exc:
        raise InvalidArgumentError(f"Unsupported province code '{province_code}'") from exc


def supported_provinces() -> Mapping[str, ProvincialCalculator]:
    return dict(_PROVINCE_CALCULATORS)


__all__ = [
    "ProvincialCalculator",
    "get_provincial_calculator",
    "supported_provinces",
]
