"""Transit benefit calculation: monthly pass vs. pay-per-ride."""

import logging
from typing import Mapping, Optional, Protocol, Tuple, runtime_checkable
from abc import ABC, abstractmethod

from transit_benefit.config import settings
from transit_benefit.fare_tables import FARE_TABLES, lookup_monthly_price
from transit_benefit.formatting import format_amount
from transit_benefit.models import (
    CalculatorInput,
    CalculatorOutput,
    FareTableEntry,
    Recommendation,
    TransitMode,
)

logger = logging.getLogger(__name__)

NEUTRAL_MESSAGE = (
    "Both options cost about the same. "
    "Consider the monthly pass for convenience and tax savings."
)


def pre_tax_savings(monthly_cost: float, tax_bracket_percent: int) -> float:
    """
    Monthly tax saved by paying for a pass with pre-tax dollars.

    The cost is annualized, taxed and brought back to a monthly figure in
    that order; float rounding depends on it.
    """
    annual_cost = monthly_cost * 12
    tax_savings = annual_cost * (tax_bracket_percent / 100)
    return tax_savings / 12


@runtime_checkable
class BenefitCalculatorInterface(Protocol):
    """
    Interface for transit benefit calculation.
    Any calculator the API is given must follow this contract.
    """

    def compute(self, calc_input: CalculatorInput) -> CalculatorOutput:
        """Derive every output amount and the recommendation."""
        ...


class BaseBenefitCalculator(ABC):
    """
    Abstract base class for benefit calculators.

    Subclasses decide what a pass and a month of single rides cost; the
    subsidy, tax and recommendation rules are shared.
    """

    def __init__(self, subsidy_rate: float = settings.SUBSIDY_RATE):
        self.subsidy_rate = subsidy_rate

    @abstractmethod
    def full_pass_cost(self, calc_input: CalculatorInput) -> float:
        """Monthly pass price before any subsidy."""
        pass

    @abstractmethod
    def pay_per_ride_cost(self, calc_input: CalculatorInput) -> float:
        """What a month of commuting costs without a pass."""
        pass

    def subsidy_amount(self, calc_input: CalculatorInput) -> float:
        """Dollars of the pass paid by the employer."""
        if not calc_input.employer_subsidy_enabled:
            return 0.0
        return self.full_pass_cost(calc_input) * self.subsidy_rate

    def subsidized_pass_cost(self, calc_input: CalculatorInput) -> float:
        """Rider's share of the pass after the employer subsidy."""
        full_cost = self.full_pass_cost(calc_input)
        if calc_input.employer_subsidy_enabled:
            return full_cost * (1 - self.subsidy_rate)
        return full_cost

    def net_savings(self, calc_input: CalculatorInput) -> float:
        """
        Pay-per-ride cost minus the pass cost net of its own tax benefit.
        Positive means the pass is cheaper.
        """
        pay_per_ride = self.pay_per_ride_cost(calc_input)
        pass_cost = self.subsidized_pass_cost(calc_input)
        tax_savings = pre_tax_savings(pass_cost, calc_input.tax_bracket_percent)
        return pay_per_ride - (pass_cost - tax_savings)

    def recommendation(self, calc_input: CalculatorInput) -> Tuple[Recommendation, str]:
        """
        Classify the comparison by the sign of net savings.

        Returns:
            (Recommendation, message) tuple
        """
        savings = self.net_savings(calc_input)
        pass_cost = self.subsidized_pass_cost(calc_input)
        tax_savings = pre_tax_savings(pass_cost, calc_input.tax_bracket_percent)
        subsidized = calc_input.employer_subsidy_enabled

        if savings > 0:
            message = (
                f"We recommend getting the Monthly Pass. "
                f"You'll save ${format_amount(savings)} per month including "
                f"${format_amount(tax_savings)} in tax savings"
            )
            if subsidized:
                subsidy = format_amount(self.subsidy_amount(calc_input))
                message += f" and ${subsidy} in employer subsidy"
            return Recommendation.PREFER_PASS, message + "."

        if savings < 0:
            message = (
                f"We recommend paying per ride. "
                f"The monthly pass would cost ${format_amount(abs(savings))} "
                f"more than what you need, even with tax savings"
            )
            if subsidized:
                message += " and employer subsidy"
            return Recommendation.PREFER_PAY_PER_RIDE, message + "."

        return Recommendation.NEUTRAL, NEUTRAL_MESSAGE

    def compute(self, calc_input: CalculatorInput) -> CalculatorOutput:
        """
        Run the whole calculation for one input.

        Args:
            calc_input: Immutable snapshot of the form

        Returns:
            CalculatorOutput with every derived amount and the recommendation
        """
        pass_cost = self.subsidized_pass_cost(calc_input)
        recommendation, message = self.recommendation(calc_input)
        output = CalculatorOutput(
            full_pass_cost=self.full_pass_cost(calc_input),
            subsidy_amount=self.subsidy_amount(calc_input),
            subsidized_pass_cost=pass_cost,
            pay_per_ride_cost=self.pay_per_ride_cost(calc_input),
            monthly_pre_tax_savings=pre_tax_savings(
                pass_cost, calc_input.tax_bracket_percent
            ),
            net_savings=self.net_savings(calc_input),
            recommendation=recommendation,
            message=message,
        )
        logger.debug(
            "Computed %s for mode=%s key=%s: net_savings=%.2f",
            output.recommendation.value,
            calc_input.transit_mode.value,
            calc_input.active_fare_key,
            output.net_savings,
        )
        return output


class MBTABenefitCalculator(BaseBenefitCalculator):
    """
    Calculator for MBTA fares.

    Subway/bus riders compare the flat LinkPass against single fares.
    Commuter rail and ferry riders have no per-ride fare table, so a ride
    day is approximated as 1/20 of the zone or route's monthly pass.
    """

    def __init__(
        self,
        fare_tables: Mapping[TransitMode, Mapping[str, FareTableEntry]] = FARE_TABLES,
        subsidy_rate: float = settings.SUBSIDY_RATE,
        link_pass_price: float = settings.MONTHLY_LINK_PASS,
        subway_fare: float = settings.SUBWAY_FARE,
        bus_fare: float = settings.BUS_FARE,
    ):
        super().__init__(subsidy_rate=subsidy_rate)
        self.fare_tables = fare_tables
        self.link_pass_price = link_pass_price
        self.subway_fare = subway_fare
        self.bus_fare = bus_fare

    def _table_price(self, calc_input: CalculatorInput) -> float:
        """Listed price for the active zone or route, 0.0 if none is configured."""
        price = lookup_monthly_price(
            calc_input.transit_mode, calc_input.active_fare_key, self.fare_tables
        )
        return price if price is not None else 0.0

    def compute(self, calc_input: CalculatorInput) -> CalculatorOutput:
        key = calc_input.active_fare_key
        if key is not None and lookup_monthly_price(
            calc_input.transit_mode, key, self.fare_tables
        ) is None:
            logger.warning(
                "No %s price configured for %r, using 0.00",
                calc_input.transit_mode.value,
                key,
            )
        return super().compute(calc_input)

    def full_pass_cost(self, calc_input: CalculatorInput) -> float:
        if calc_input.transit_mode == TransitMode.SUBWAY_BUS:
            return self.link_pass_price
        return self._table_price(calc_input)

    def pay_per_ride_cost(self, calc_input: CalculatorInput) -> float:
        work_days = calc_input.work_days_per_month

        if calc_input.transit_mode == TransitMode.SUBWAY_BUS:
            monthly_subway_rides = work_days * calc_input.subway_rides_per_day
            monthly_bus_rides = work_days * calc_input.bus_rides_per_day
            return (
                (monthly_subway_rides * self.subway_fare)
                + (monthly_bus_rides * self.bus_fare)
            )

        daily_cost = self._table_price(calc_input) / settings.RIDES_PER_MONTHLY_PASS
        ride_cost = daily_cost * work_days

        if calc_input.includes_subway_connection:
            ride_cost += (
                work_days * settings.CONNECTING_SUBWAY_RIDES_PER_DAY * self.subway_fare
            )

        return ride_cost


# Singleton instance for default calculator
_default_calculator: Optional[BenefitCalculatorInterface] = None


def get_benefit_calculator() -> BenefitCalculatorInterface:
    """
    Get the default benefit calculator instance (Singleton pattern).

    Returns:
        Calculator instance implementing BenefitCalculatorInterface
    """
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = MBTABenefitCalculator()
    return _default_calculator


def compute(calc_input: CalculatorInput) -> CalculatorOutput:
    """Calculate with the default MBTA calculator."""
    return get_benefit_calculator().compute(calc_input)
