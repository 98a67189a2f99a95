from decimal import ROUND_HALF_UP, Decimal as D

import hypothesis.strategies as st
import pytest
from hypothesis import given

from ontax import insurance_deduction, pension_deduction
from ontax.errors import InvalidInputError

incomes = st.decimals(min_value=0, max_value=5_000_000, places=2, allow_nan=False, allow_infinity=False)


def test_cpp_edges():
    assert pension_deduction(0) == D("0.00")
    assert pension_deduction(3500) == D("0.00")
    assert pension_deduction(3600) == D("5.45")
    assert pension_deduction(60000) == D("3079.25")
    assert pension_deduction(65100) == D("3166.45")
    assert pension_deduction(400000) == D("3166.45")


def test_ei_edges():
    assert insurance_deduction(0) == D("0.00")
    assert insurance_deduction(50000) == D("790.00")
    assert insurance_deduction(56300) == D("889.54")
    assert insurance_deduction(100000) == D("889.54")


@given(incomes)
def test_cpp_never_exceeds_maximum(income):
    assert D("0") <= pension_deduction(income) <= D("3166.45")


@given(st.decimals(min_value=0, max_value=3500, places=2))
def test_cpp_zero_below_exemption(income):
    assert pension_deduction(income) == D("0.00")


@given(incomes)
def test_ei_is_flat_rate_up_to_ceiling(income):
    expected = (min(income, D("56300")) * D("0.0158")).quantize(D("0.01"), rounding=ROUND_HALF_UP)
    assert insurance_deduction(income) == expected


def test_negative_income_rejected():
    with pytest.raises(InvalidInputError):
        pension_deduction(-1)
    with pytest.raises(InvalidInputError):
        insurance_deduction(D("-0.01"))
