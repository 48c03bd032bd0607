"""Services package for the transit benefit calculator."""

from .fare_calculator import (
    compute,
    get_benefit_calculator,
    pre_tax_savings,
    BenefitCalculatorInterface,
    MBTABenefitCalculator
)
from .form_state import CalculatorForm

__all__ = [
    'compute',
    'get_benefit_calculator',
    'pre_tax_savings',
    'BenefitCalculatorInterface',
    'MBTABenefitCalculator',
    'CalculatorForm'
]
