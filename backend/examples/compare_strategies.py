"""
Compare commuting scenarios against a running calculator API.

Start the API first:
    uvicorn transit_benefit.main:app --reload
"""

import sys

import requests


SCENARIOS = {
    "Subway commuter with subsidy": {
        "transit_mode": "subway-bus",
        "work_days_per_month": 20,
        "subway_rides_per_day": 2,
        "bus_rides_per_day": 0,
        "employer_subsidy_enabled": True,
        "tax_bracket_percent": 22,
    },
    "Part-time bus rider": {
        "transit_mode": "subway-bus",
        "work_days_per_month": 8,
        "subway_rides_per_day": 0,
        "bus_rides_per_day": 2,
        "employer_subsidy_enabled": False,
        "tax_bracket_percent": 12,
    },
    "Zone 4 commuter rail with subway connection": {
        "transit_mode": "commuter-rail",
        "commuter_zone_key": "4",
        "includes_subway_connection": True,
        "work_days_per_month": 12,
        "employer_subsidy_enabled": True,
        "tax_bracket_percent": 24,
    },
    "Hingham-Hull ferry": {
        "transit_mode": "ferry",
        "ferry_route_key": "hingham-hull",
        "work_days_per_month": 20,
        "employer_subsidy_enabled": False,
        "tax_bracket_percent": 32,
    },
}


def compare_via_api(base_url: str = "http://localhost:8000"):
    """
    Post every scenario to the calculate endpoint and print the results.

    Args:
        base_url: API base URL
    """
    for name, payload in SCENARIOS.items():
        response = requests.post(f"{base_url}/api/calculate", json=payload, timeout=10)

        if response.status_code != 200:
            print(f"✗ {name}: {response.text}")
            continue

        result = response.json()["result"]
        print(f"\n{name}")
        print("-" * len(name))
        print(f"  Pass (full):   ${result['full_pass_cost']:.2f}")
        print(f"  Pass (yours):  ${result['subsidized_pass_cost']:.2f}")
        print(f"  Pay-per-ride:  ${result['pay_per_ride_cost']:.2f}")
        print(f"  Net savings:   ${result['net_savings']:.2f}")
        print(f"  {result['message']}")


if __name__ == "__main__":
    compare_via_api(*sys.argv[1:2])
