"""Core module."""
from rotater.core.models import Calamity, ClimateResult, ClimateStats, DataSource, Location
from rotater.core.synthesis import generate_mock_data
from rotater.core.climate import afetch_climate_data, fetch_climate_data
from rotater.core.calamity import fetch_calamity_history
from rotater.core.locations import LocationNotFoundError, get_location, list_locations
