"""Mutable form state that feeds the calculator."""

import logging
import math
from typing import Any, Dict, List, Optional

from transit_benefit.config import settings
from transit_benefit.exceptions import InvalidTaxBracketError, UnknownTransitModeError
from transit_benefit.models import CalculatorInput, CalculatorOutput, TransitMode
from transit_benefit.services.fare_calculator import compute

logger = logging.getLogger(__name__)

TRUE_STRINGS = {"true", "1", "yes", "on", "y"}
ASCII_DIGITS = "0123456789"


def parse_count(raw: Any, maximum: Optional[int] = None) -> int:
    """
    Turn a raw numeric entry into a non-negative int.

    Anything that does not parse as an integer becomes 0. Strings are
    parsed the way a number input is: leading digits win, so "12.7" is 12.
    """
    if isinstance(raw, bool):
        value = int(raw)
    elif isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        value = int(raw) if math.isfinite(raw) else 0
    else:
        text = str(raw).strip() if raw is not None else ""
        digits = ""
        for idx, char in enumerate(text):
            if char in ASCII_DIGITS or (idx == 0 and char in "+-"):
                digits += char
            else:
                break
        try:
            value = int(digits)
        except ValueError:
            value = 0

    value = max(0, value)
    if maximum is not None:
        value = min(value, maximum)
    return value


def parse_flag(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in TRUE_STRINGS
    return bool(raw)


def parse_transit_mode(raw: Any) -> TransitMode:
    if isinstance(raw, TransitMode):
        return raw
    try:
        return TransitMode(str(raw).strip().lower())
    except ValueError:
        raise UnknownTransitModeError(raw, [mode.value for mode in TransitMode])


def parse_tax_bracket(raw: Any) -> int:
    try:
        percent = int(str(raw).strip().rstrip("%"))
    except ValueError:
        raise InvalidTaxBracketError(raw, settings.allowed_tax_brackets())
    if not settings.is_valid_tax_bracket(percent):
        raise InvalidTaxBracketError(percent, settings.allowed_tax_brackets())
    return percent


class CalculatorForm:
    """
    The rider's editable inputs for one session.

    The form owns the only mutable copy of the inputs. Every change is
    normalized here, and the calculator only ever sees an immutable
    CalculatorInput produced by snapshot().
    """

    PARSERS = {
        "transit_mode": parse_transit_mode,
        "commuter_zone_key": lambda raw: str(raw).strip(),
        "ferry_route_key": lambda raw: str(raw).strip(),
        "includes_subway_connection": parse_flag,
        "work_days_per_month": lambda raw: parse_count(
            raw, maximum=settings.MAX_WORK_DAYS_PER_MONTH
        ),
        "subway_rides_per_day": parse_count,
        "bus_rides_per_day": parse_count,
        "employer_subsidy_enabled": parse_flag,
        "tax_bracket_percent": parse_tax_bracket,
    }

    def __init__(self, **initial: Any):
        self._values: Dict[str, Any] = CalculatorInput().model_dump()
        if initial:
            self.update(**initial)

    def update(self, **changes: Any) -> "CalculatorForm":
        """
        Apply raw field changes.

        Raises:
            KeyError: If a field name is not part of the form
            InvalidTaxBracketError: If the tax bracket is not supported
            UnknownTransitModeError: If the transit mode is not supported
        """
        normalized = {}
        for field, raw in changes.items():
            if field not in self.PARSERS:
                raise KeyError(f"Unknown form field: {field}")
            normalized[field] = self.PARSERS[field](raw)

        self._values.update(normalized)
        logger.debug("Form updated: %s", normalized)
        return self

    def __getitem__(self, field: str) -> Any:
        return self._values[field]

    def snapshot(self) -> CalculatorInput:
        """Freeze the current values into a calculator input."""
        return CalculatorInput(**self._values)

    def calculate(self) -> CalculatorOutput:
        """Recompute the output from the current values."""
        return compute(self.snapshot())

    def visible_fields(self) -> List[str]:
        """Form fields that apply to the selected transit mode."""
        fields = ["transit_mode"]
        mode = self._values["transit_mode"]
        if mode == TransitMode.COMMUTER_RAIL:
            fields += ["commuter_zone_key", "includes_subway_connection"]
        elif mode == TransitMode.FERRY:
            fields += ["ferry_route_key", "includes_subway_connection"]
        fields.append("work_days_per_month")
        if mode == TransitMode.SUBWAY_BUS:
            fields += ["subway_rides_per_day", "bus_rides_per_day"]
        fields += ["employer_subsidy_enabled", "tax_bracket_percent"]
        return fields
