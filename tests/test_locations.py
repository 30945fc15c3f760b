import dataclasses

import pytest

import rotater
from rotater.core.locations import LocationNotFoundError, get_location, list_locations


def test_mock_locations():
    names = [loc.name for loc in list_locations()]
    assert names == ["New York", "London", "Tokyo", "Mumbai", "Sydney"]


def test_get_location_case_insensitive():
    loc = get_location("  sydney ")
    assert (loc.lat, loc.lon) == (-33.8688, 151.2093)
    assert loc.to_dict() == {"name": "Sydney", "lat": -33.8688, "lon": 151.2093}


def test_unknown_location():
    with pytest.raises(LocationNotFoundError):
        get_location("Atlantis")
    with pytest.raises(KeyError):
        get_location("Atlantis")


def test_records_are_immutable():
    loc = get_location("Tokyo")
    with pytest.raises(dataclasses.FrozenInstanceError):
        loc.lat = 0.0


def test_package_exports():
    assert rotater.APP_NAME == "ROTATER"
    assert callable(rotater.fetch_climate_data)
    assert callable(rotater.generate_mock_data)
    assert callable(rotater.fetch_calamity_history)
