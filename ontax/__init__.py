"""Canadian federal and Ontario income tax, surtax and payroll deductions."""
from __future__ import annotations

from ontax.core.breakdown import (
    BreakdownField,
    TaxBreakdown,
    compute_breakdown,
    tax_breakdown,
)
from ontax.core.federal import federal_tax
from ontax.core.payroll import insurance_deduction, pension_deduction
from ontax.core.provinces.on import provincial_surtax, provincial_tax
from ontax.errors import (
    ConfigurationError,
    DomainError,
    InvalidArgumentError,
    InvalidInputError,
    TaxCalculationError,
)

__version__ = "0.1.0"

__all__ = [
    "BreakdownField",
    "ConfigurationError",
    "DomainError",
    "InvalidArgumentError",
    "InvalidInputError",
    "TaxBreakdown",
    "TaxCalculationError",
    "compute_breakdown",
    "federal_tax",
    "insurance_deduction",
    "pension_deduction",
    "provincial_surtax",
    "provincial_tax",
    "tax_breakdown",
]
