"""Configuration for the Transit Benefit Calculator."""

from typing import List
import os
from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings:
    """Application settings."""

    # API Settings
    API_TITLE = "MBTA Transit Benefit Calculator"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = (
        "Compare monthly pass vs. pay-per-ride costs to find your best option"
    )

    # CORS Settings
    CORS_ORIGINS = _split_origins(
        os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000,"
            "http://localhost:8000,http://127.0.0.1:8000",
        )
    )

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # MBTA fares
    MONTHLY_LINK_PASS = 90.00
    SUBWAY_FARE = 2.40
    BUS_FARE = 1.70

    # Employer covers this share of the pass
    SUBSIDY_RATE = 0.60

    # Commuter rail / ferry pay-per-ride is approximated as a share of the pass
    RIDES_PER_MONTHLY_PASS = 20
    CONNECTING_SUBWAY_RIDES_PER_DAY = 2

    # Form limits and defaults
    MAX_WORK_DAYS_PER_MONTH = 31
    DEFAULT_WORK_DAYS = 20
    DEFAULT_SUBWAY_RIDES_PER_DAY = 2
    DEFAULT_BUS_RIDES_PER_DAY = 0
    DEFAULT_TAX_BRACKET = 22
    DEFAULT_COMMUTER_ZONE = "1A"
    DEFAULT_FERRY_ROUTE = "charlestown"

    # Federal marginal brackets offered by the form, with income ranges
    TAX_BRACKETS = {
        10: "Up to $11,000",
        12: "$11,001 to $44,725",
        22: "$44,726 to $95,375",
        24: "$95,376 to $182,100",
        32: "$182,101 to $231,250",
        35: "$231,251 to $578,125",
        37: "$578,126 or more",
    }

    @classmethod
    def allowed_tax_brackets(cls) -> List[int]:
        """Tax bracket percentages accepted by the calculator, ascending."""
        return sorted(cls.TAX_BRACKETS)

    @classmethod
    def is_valid_tax_bracket(cls, percent: int) -> bool:
        return percent in cls.TAX_BRACKETS


settings = Settings()
