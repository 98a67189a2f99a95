from ontax.core.payroll.deductions import (
    CPP_RULE_2021,
    EI_RULE_2021,
    DeductionRule,
    insurance_deduction,
    pension_deduction,
)

__all__ = [
    "CPP_RULE_2021",
    "DeductionRule",
    "EI_RULE_2021",
    "insurance_deduction",
    "pension_deduction",
]
