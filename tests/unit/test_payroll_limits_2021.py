from decimal import Decimal as D

import pytest

from ontax.core.payroll import CPP_RULE_2021, EI_RULE_2021, DeductionRule, limits_2021
from ontax.errors import ConfigurationError


def test_cpp_limits_2021():
    assert limits_2021.CPP_BASIC_EXEMPTION == D("3500")
    assert limits_2021.CPP_MAX_PENSIONABLE_EARNINGS == D("61600")
    assert limits_2021.CPP_RATE == D("0.0545")
    assert limits_2021.CPP_MAX_EMPLOYEE == D("3166.45")
    assert CPP_RULE_2021.maximum == limits_2021.CPP_MAX_EMPLOYEE


def test_ei_limits_2021():
    assert limits_2021.EI_MIE == D("56300")
    assert limits_2021.EI_RATE_EMP == D("0.0158")
    assert limits_2021.EI_MAX_EMPLOYEE == D("889.54")
    assert EI_RULE_2021.maximum is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"exemption": D("-1"), "ceiling": D("100"), "rate": D("0.1")},
        {"exemption": D("0"), "ceiling": D("100"), "rate": D("1.1")},
        {"exemption": D("0"), "ceiling": D("Infinity"), "rate": D("0.1")},
        {"exemption": D("0"), "ceiling": D("100"), "rate": D("0.1"), "maximum": D("-5")},
    ],
)
def test_deduction_rule_validation(kwargs):
    with pytest.raises(ConfigurationError):
        DeductionRule(name="bad", **kwargs)
