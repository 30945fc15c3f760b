"""Static reference locations."""

from typing import List

from rotater.core.models import Location
from rotater.utils.constants import MOCK_LOCATIONS


class LocationNotFoundError(KeyError):
    pass


def list_locations() -> List[Location]:
    return [Location(**loc) for loc in MOCK_LOCATIONS]


def get_location(name: str) -> Location:
    """Look up a mock location by name, ignoring case."""
    for loc in list_locations():
        if loc.name.lower() == name.strip().lower():
            return loc
    raise LocationNotFoundError(name)
