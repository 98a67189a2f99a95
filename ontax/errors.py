from __future__ import annotations


class TaxCalculationError(Exception):
    code = "tax_calculation_error"


class InvalidInputError(TaxCalculationError, ValueError):
    """Income is negative, non-numeric or not finite."""

    code = "invalid_input"


class InvalidArgumentError(TaxCalculationError, ValueError):
    """Unknown breakdown field or province code."""

    code = "invalid_argument"


class DomainError(TaxCalculationError, ArithmeticError):
    """A rate was requested for an income of zero."""

    code = "domain_error"


class ConfigurationError(TaxCalculationError, ValueError):
    """A bracket table or deduction rule failed validation at import."""

    code = "configuration_error"


__all__ = [
    "ConfigurationError",
    "DomainError",
    "InvalidArgumentError",
    "InvalidInputError",
    "TaxCalculationError",
]
