"""
Custom exceptions for the Transit Benefit Calculator
"""


class TransitBenefitError(Exception):
    """Base exception for the transit benefit calculator"""
    pass


class InvalidTaxBracketError(TransitBenefitError, ValueError):
    """Raised when a tax bracket is not one of the supported marginal rates"""

    def __init__(self, percent, allowed):
        self.percent = percent
        self.allowed = list(allowed)
        super().__init__(
            f"Tax bracket {percent}% is not supported. Choose one of: {self.allowed}"
        )


class UnknownTransitModeError(TransitBenefitError, ValueError):
    """Raised when a transit mode value does not match any supported mode"""

    def __init__(self, value, allowed):
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown transit mode {value!r}. Choose one of: {self.allowed}"
        )
