"""Models for the transit benefit calculation system."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional, Union
from enum import Enum

from transit_benefit.config import settings
from transit_benefit.exceptions import InvalidTaxBracketError


class TransitMode(str, Enum):
    """Ways of commuting the calculator knows how to price."""
    SUBWAY_BUS = "subway-bus"
    COMMUTER_RAIL = "commuter-rail"
    FERRY = "ferry"


class Recommendation(str, Enum):
    """Outcome of comparing the monthly pass with paying per ride."""
    PREFER_PASS = "prefer-pass"
    PREFER_PAY_PER_RIDE = "prefer-pay-per-ride"
    NEUTRAL = "neutral"


class FareTableEntry(BaseModel):
    """Model representing one row of a monthly pass price table."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Zone or route code")
    monthly_price: float = Field(..., ge=0, description="Monthly pass price")


class CalculatorInput(BaseModel):
    """
    Immutable snapshot of everything the rider entered.

    Only one of commuter_zone_key / ferry_route_key matters for a given
    transit_mode; see active_fare_key.
    """
    model_config = ConfigDict(frozen=True)

    transit_mode: TransitMode = TransitMode.SUBWAY_BUS
    commuter_zone_key: str = settings.DEFAULT_COMMUTER_ZONE
    ferry_route_key: str = settings.DEFAULT_FERRY_ROUTE
    includes_subway_connection: bool = False
    work_days_per_month: int = Field(
        settings.DEFAULT_WORK_DAYS,
        ge=0,
        le=settings.MAX_WORK_DAYS_PER_MONTH,
        description="Days commuted per month"
    )
    subway_rides_per_day: int = Field(settings.DEFAULT_SUBWAY_RIDES_PER_DAY, ge=0)
    bus_rides_per_day: int = Field(settings.DEFAULT_BUS_RIDES_PER_DAY, ge=0)
    employer_subsidy_enabled: bool = True
    tax_bracket_percent: int = Field(
        settings.DEFAULT_TAX_BRACKET,
        description="Marginal federal tax bracket"
    )

    @field_validator('tax_bracket_percent')
    @classmethod
    def validate_tax_bracket(cls, v):
        if not settings.is_valid_tax_bracket(v):
            raise InvalidTaxBracketError(v, settings.allowed_tax_brackets())
        return v

    @property
    def active_fare_key(self) -> Optional[str]:
        """Zone or route key used for pricing, None for subway/bus."""
        if self.transit_mode == TransitMode.COMMUTER_RAIL:
            return self.commuter_zone_key
        if self.transit_mode == TransitMode.FERRY:
            return self.ferry_route_key
        return None


class CalculatorOutput(BaseModel):
    """Derived monthly amounts and the recommendation for one input."""
    full_pass_cost: float = Field(..., description="Monthly pass at full price")
    subsidy_amount: float = Field(..., description="Portion paid by the employer")
    subsidized_pass_cost: float = Field(..., description="Rider's share of the pass")
    pay_per_ride_cost: float = Field(..., description="Monthly cost paying per ride")
    monthly_pre_tax_savings: float = Field(
        ...,
        description="Tax saved by buying the pass with pre-tax dollars"
    )
    net_savings: float = Field(
        ...,
        description="Pay-per-ride cost minus the after-tax pass cost"
    )
    recommendation: Recommendation
    message: str


class CalculatorRequest(BaseModel):
    """
    Raw form values as submitted by a client.

    Everything is optional and loosely typed; values are normalized by
    CalculatorForm before they reach the calculator.
    """
    transit_mode: Optional[str] = None
    commuter_zone_key: Optional[Union[str, int]] = None
    ferry_route_key: Optional[Union[str, int]] = None
    includes_subway_connection: Optional[Union[bool, str]] = None
    work_days_per_month: Optional[Union[int, float, str]] = None
    subway_rides_per_day: Optional[Union[int, float, str]] = None
    bus_rides_per_day: Optional[Union[int, float, str]] = None
    employer_subsidy_enabled: Optional[Union[bool, str]] = None
    tax_bracket_percent: Optional[Union[int, str]] = None

    def submitted_fields(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_none=True)


class CalculationResponse(BaseModel):
    """Response model for the calculate endpoint."""
    input: CalculatorInput = Field(..., description="Normalized input used")
    result: CalculatorOutput
    visible_fields: List[str] = Field(
        ...,
        description="Form fields that apply to the selected transit mode"
    )


class FareOption(BaseModel):
    """A selectable zone or route with its display label."""
    key: str
    monthly_price: float
    label: str
