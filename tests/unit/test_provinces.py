from decimal import Decimal as D

import pytest

from ontax.core.provinces import get_provincial_calculator, supported_provinces
from ontax.core.provinces.on import ON_BRACKETS_2021, on_tax_on_taxable_income_2021
from ontax.errors import InvalidArgumentError


def test_default_province_is_ontario():
    calculator = get_provincial_calculator()
    assert calculator.code == "ON"
    assert calculator.name == "Ontario"
    assert calculator.brackets is ON_BRACKETS_2021
    assert calculator is get_provincial_calculator(" on ")


def test_supported_province_listing():
    assert set(supported_provinces()) == {"ON"}


def test_calculator_matches_module_functions():
    calculator = get_provincial_calculator("ON")
    income = D("95000.00")
    assert calculator.tax(income) == on_tax_on_taxable_income_2021(income)
    assert calculator.surtax_for_income(income) == calculator.surtax_on(calculator.tax(income))


def test_unsupported_province():
    with pytest.raises(InvalidArgumentError, match="Unsupported province code 'BC'"):
        get_provincial_calculator("bc")
