"""Tests for UK location to climate zone resolution."""

import pytest

from garden_care.modules.plant_care.domain.models.climate_zone import (
    ClimateZone,
    get_zone_description,
    get_zone_temperature_range,
)
from garden_care.modules.plant_care.domain.services.climate_zone_resolver import (
    describe_location,
    resolve_climate_zone,
)


@pytest.mark.parametrize(
    "location, zone",
    [
        ("Penzance", 9),
        ("  EDINBURGH ", 7),
        ("Scilly Isles", 10),
        ("London", 8),
        ("Cornwall", 9),
        ("Scotland", 7),
        ("Yorkshire", 8),
    ],
)
def test_exact_matches(location, zone):
    assert resolve_climate_zone(location) == zone


def test_unknown_location_defaults_to_zone_8():
    assert resolve_climate_zone("totally unknown place") == 8


@pytest.mark.parametrize("location", [None, "", "   ", 42])
def test_missing_or_invalid_location_defaults(location):
    assert resolve_climate_zone(location) == 8


def test_city_substring_scan():
    assert resolve_climate_zone("Central Brighton, East Sussex") == 9


def test_region_substring_scan_after_cities():
    assert resolve_climate_zone("rural Devon") == 9


def test_location_contained_in_key():
    # "aberd" is a substring of the "aberdeen" key
    assert resolve_climate_zone("aberd") == 7


def test_city_table_wins_over_region_table():
    # "york" appears in the city table before "yorkshire" is tried as a region
    assert resolve_climate_zone("North Yorkshire Moors") == 8


def test_result_is_climate_zone_int():
    zone = resolve_climate_zone("Inverness")
    assert isinstance(zone, ClimateZone)
    assert isinstance(zone, int)


def test_describe_location():
    described = describe_location(" Falmouth ")
    assert described["location"] == "Falmouth"
    assert described["climate_zone"] == 9
    assert described["description"] == get_zone_description(9)
    assert described["temperature_range"] == get_zone_temperature_range(9)


def test_zone_helpers_fall_back_to_default():
    assert get_zone_description(3) == get_zone_description(8)
