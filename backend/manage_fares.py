#!/usr/bin/env python3
"""
Command line utility for the transit benefit calculator.

Usage:
    python manage_fares.py show       - Show pass prices, fares and tax brackets
    python manage_fares.py calculate  - Compare pass vs. pay-per-ride interactively
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from transit_benefit.config import settings
from transit_benefit.fare_tables import COMMUTER_RAIL_ZONES, FERRY_ROUTES, available_keys
from transit_benefit.formatting import format_currency, route_label, tax_bracket_label, zone_label
from transit_benefit.models import CalculatorOutput, TransitMode
from transit_benefit.services import CalculatorForm


def show_tables():
    """Display the static fare reference data."""
    print("\n" + "="*50)
    print("MBTA MONTHLY PASS PRICES")
    print("="*50)
    print(f"Subway/Bus LinkPass: {format_currency(settings.MONTHLY_LINK_PASS)}")
    print(f"Subway fare: {format_currency(settings.SUBWAY_FARE)} per ride")
    print(f"Bus fare: {format_currency(settings.BUS_FARE)} per ride")

    print("\nCommuter Rail")
    print("-"*30)
    for entry in COMMUTER_RAIL_ZONES.values():
        print(f"  {zone_label(entry)}")

    print("\nFerry")
    print("-"*30)
    for entry in FERRY_ROUTES.values():
        print(f"  {route_label(entry)}")

    print("\nTax brackets")
    print("-"*30)
    for percent in settings.allowed_tax_brackets():
        print(f"  {tax_bracket_label(percent)}")
    print("="*50)


def print_result(result: CalculatorOutput, subsidy_enabled: bool):
    """Print the output block the way the form shows it."""
    print("\n" + "="*50)
    print(f"Monthly Pass Cost (Full):  {format_currency(result.full_pass_cost)}")
    if subsidy_enabled:
        subsidy_percent = round(settings.SUBSIDY_RATE * 100)
        print(f"Employer Subsidy ({subsidy_percent}%):   -{format_currency(result.subsidy_amount)}")
    print(f"Your Monthly Pass Cost:    {format_currency(result.subsidized_pass_cost)}")
    print(f"Pay-per-ride Total:        {format_currency(result.pay_per_ride_cost)}")
    print(f"Monthly Pre-tax Savings:   {format_currency(result.monthly_pre_tax_savings)}")
    print("-"*50)
    print(result.message)
    print("="*50)


def ask(prompt: str, default) -> str:
    answer = input(f"{prompt} [{default}]: ").strip()
    return answer if answer else str(default)


def calculate_interactively():
    """Prompt for each form field and print the comparison."""
    print("\nCOMPARE MONTHLY PASS VS. PAY-PER-RIDE")
    print("-"*30)

    form = CalculatorForm()
    modes = [mode.value for mode in TransitMode]

    try:
        form.update(transit_mode=ask(f"Transit mode {modes}", form["transit_mode"].value))
        mode = form["transit_mode"]

        if mode == TransitMode.COMMUTER_RAIL:
            print(f"Zones: {available_keys(TransitMode.COMMUTER_RAIL)}")
            form.update(commuter_zone_key=ask("Commuter rail zone", form["commuter_zone_key"]))
        elif mode == TransitMode.FERRY:
            print(f"Routes: {available_keys(TransitMode.FERRY)}")
            form.update(ferry_route_key=ask("Ferry route", form["ferry_route_key"]))

        if mode != TransitMode.SUBWAY_BUS:
            form.update(includes_subway_connection=ask(
                "Includes subway connection? (yes/no)", "no"
            ))

        form.update(work_days_per_month=ask("Work days per month", form["work_days_per_month"]))

        if mode == TransitMode.SUBWAY_BUS:
            form.update(
                subway_rides_per_day=ask("Subway rides per day", form["subway_rides_per_day"]),
                bus_rides_per_day=ask("Bus rides per day", form["bus_rides_per_day"]),
            )

        form.update(
            employer_subsidy_enabled=ask("Include employer subsidy? (yes/no)", "yes"),
            tax_bracket_percent=ask(
                f"Tax bracket {settings.allowed_tax_brackets()}", form["tax_bracket_percent"]
            ),
        )
    except ValueError as e:
        print(f"Invalid input: {e}")
        return

    print_result(form.calculate(), form["employer_subsidy_enabled"])


def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        return

    command = sys.argv[1].lower()

    commands = {
        'show': show_tables,
        'calculate': calculate_interactively
    }

    if command in commands:
        commands[command]()
    else:
        print(f"Unknown command: {command}")
        print(__doc__)


if __name__ == "__main__":
    main()
