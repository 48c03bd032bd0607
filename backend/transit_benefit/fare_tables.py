"""Static MBTA monthly pass price tables."""

from types import MappingProxyType
from typing import List, Mapping, Optional

from transit_benefit.models import FareTableEntry, TransitMode


def _build_table(rows) -> Mapping[str, FareTableEntry]:
    return MappingProxyType({
        key: FareTableEntry(key=key, monthly_price=price)
        for key, price in rows
    })


COMMUTER_RAIL_ZONES = _build_table([
    ("1A", 90.00),
    ("1", 214.00),
    ("2", 232.00),
    ("3", 261.00),
    ("4", 281.00),
    ("5", 311.00),
    ("6", 340.00),
    ("7", 360.00),
    ("8", 388.00),
    ("9", 406.00),
    ("10", 426.00),
])

FERRY_ROUTES = _build_table([
    ("charlestown", 90.00),
    ("hingham-hull", 329.00),
    ("east-boston", 90.00),
])

# Subway/bus has a single flat LinkPass price, see settings.MONTHLY_LINK_PASS
FARE_TABLES: Mapping[TransitMode, Mapping[str, FareTableEntry]] = MappingProxyType({
    TransitMode.COMMUTER_RAIL: COMMUTER_RAIL_ZONES,
    TransitMode.FERRY: FERRY_ROUTES,
})


def get_fare_table(
    mode: TransitMode,
    tables: Mapping[TransitMode, Mapping[str, FareTableEntry]] = FARE_TABLES,
) -> Optional[Mapping[str, FareTableEntry]]:
    """Return the price table for a mode, or None if it has no table."""
    return tables.get(mode)


def lookup_monthly_price(
    mode: TransitMode,
    key: str,
    tables: Mapping[TransitMode, Mapping[str, FareTableEntry]] = FARE_TABLES,
) -> Optional[float]:
    """
    Look up the monthly pass price for a zone or route.

    Returns:
        The listed price, or None when the mode has no table or the key
        is not in it
    """
    table = get_fare_table(mode, tables)
    if table is None:
        return None
    entry = table.get(key)
    return entry.monthly_price if entry else None


def available_keys(mode: TransitMode) -> List[str]:
    """Zone or route keys for a mode, in table order."""
    table = get_fare_table(mode)
    return list(table) if table else []
