"""API endpoints for transit benefit calculation."""

from fastapi import APIRouter, HTTPException, Depends
import logging

from transit_benefit.models import CalculatorRequest, CalculationResponse, FareOption
from transit_benefit.services import CalculatorForm, get_benefit_calculator
from transit_benefit.services.fare_calculator import BenefitCalculatorInterface
from transit_benefit.config import settings
from transit_benefit.fare_tables import COMMUTER_RAIL_ZONES, FERRY_ROUTES
from transit_benefit.formatting import (
    format_currency,
    route_label,
    tax_bracket_label,
    zone_label,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Transit Benefit"])


def get_calculator() -> BenefitCalculatorInterface:
    """
    Dependency injection for the benefit calculator.
    Returns any implementation of BenefitCalculatorInterface.
    """
    return get_benefit_calculator()


@router.post("/calculate", response_model=CalculationResponse)
async def calculate(
    request: CalculatorRequest,
    calculator: BenefitCalculatorInterface = Depends(get_calculator)
) -> CalculationResponse:
    """
    Compare a monthly pass with paying per ride.

    Omitted fields keep the form defaults; numeric entries are clamped
    the same way the form does it.

    Args:
        request: Raw form values
        calculator: Injected calculator implementing BenefitCalculatorInterface

    Returns:
        CalculationResponse with the normalized input and every derived amount

    Raises:
        HTTPException: If the transit mode or tax bracket is not supported
    """
    try:
        form = CalculatorForm(**request.submitted_fields())
        calc_input = form.snapshot()
        result = calculator.compute(calc_input)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Calculation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")

    return CalculationResponse(
        input=calc_input,
        result=result,
        visible_fields=form.visible_fields()
    )


@router.get("/fare-tables")
async def get_fare_tables():
    """
    Get the static fare reference data shown on the form.

    Returns:
        Pass prices, per-ride fares, tax brackets and explanatory notes
    """
    commuter_rail_zones = [
        FareOption(key=entry.key, monthly_price=entry.monthly_price, label=zone_label(entry))
        for entry in COMMUTER_RAIL_ZONES.values()
    ]
    ferry_routes = [
        FareOption(key=entry.key, monthly_price=entry.monthly_price, label=route_label(entry))
        for entry in FERRY_ROUTES.values()
    ]
    tax_brackets = [
        {"percent": percent, "label": tax_bracket_label(percent)}
        for percent in settings.allowed_tax_brackets()
    ]

    return {
        "monthly_link_pass": settings.MONTHLY_LINK_PASS,
        "subway_fare": settings.SUBWAY_FARE,
        "bus_fare": settings.BUS_FARE,
        "subsidy_rate": settings.SUBSIDY_RATE,
        "commuter_rail_zones": commuter_rail_zones,
        "ferry_routes": ferry_routes,
        "tax_brackets": tax_brackets,
        "notes": fare_notes(),
    }


def fare_notes() -> list:
    """Plain-language assumptions behind the numbers."""
    subsidy_percent = round(settings.SUBSIDY_RATE * 100)
    return [
        f"Subway fare: {format_currency(settings.SUBWAY_FARE)} per ride",
        f"Bus fare: {format_currency(settings.BUS_FARE)} per ride",
        "Monthly passes include unlimited rides for their respective modes",
        "Commuter Rail and Ferry passes include subway/bus access",
        "Pre-tax savings are estimated based on your tax bracket",
        f"Employer subsidy covers {subsidy_percent}% of the monthly pass cost when selected",
        "Calculations assume regular weekday travel patterns",
    ]


@router.get("/health")
async def health_check():
    """Health check endpoint including reference data status."""
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "commuter_rail_zones": len(COMMUTER_RAIL_ZONES),
        "ferry_routes": len(FERRY_ROUTES)
    }
