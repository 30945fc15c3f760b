"""ROTATER climate data access."""

from loguru import logger

from rotater.core import (
    Calamity,
    ClimateResult,
    ClimateStats,
    DataSource,
    Location,
    LocationNotFoundError,
    afetch_climate_data,
    fetch_calamity_history,
    fetch_climate_data,
    generate_mock_data,
    get_location,
    list_locations,
)
from rotater.utils.constants import APP_NAME
from rotater.utils.logger import setup_logging

logger.disable("rotater")

__version__ = "0.1.0"

__all__ = [
    "APP_NAME",
    "Calamity",
    "ClimateResult",
    "ClimateStats",
    "DataSource",
    "Location",
    "LocationNotFoundError",
    "afetch_climate_data",
    "fetch_calamity_history",
    "fetch_climate_data",
    "generate_mock_data",
    "get_location",
    "list_locations",
    "setup_logging",
]
