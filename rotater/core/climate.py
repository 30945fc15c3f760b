"""Monthly climate data with synthetic fallback."""

from typing import List, Optional

import numpy as np
from loguru import logger

from rotater.core.models import ClimateResult, ClimateStats, DataSource
from rotater.core.synthesis import generate_mock_data, simulate_anomaly, simulate_ndvi
from rotater.data_sources.power_client import PowerAPIError, PowerClient, PowerPayloadError, power_client
from rotater.utils.config import settings
from rotater.utils.constants import PRECIPITATION_PARAM, TEMPERATURE_PARAM


def build_records(
    parameter: dict,
    lat: float,
    start_year: int,
    end_year: int,
    rng: Optional[np.random.Generator] = None,
) -> List[ClimateStats]:
    """
    Turn a POWER parameter mapping into monthly records.

    Dates are kept in payload order. Annual aggregates (month 13), dates
    outside the requested years and months with a missing value in either
    parameter are dropped.
    """
    rng = rng if rng is not None else np.random.default_rng()
    missing = settings.power.missing_value
    temps = parameter[TEMPERATURE_PARAM]
    rains = parameter[PRECIPITATION_PARAM]

    stats = []
    skipped = 0
    for date, temp in temps.items():
        if len(date) != 6 or not (date.isascii() and date.isdigit()):
            raise PowerPayloadError(f"Unexpected POWER date key: {date!r}")
        year, month = int(date[:4]), int(date[4:6])
        if not 1 <= month <= 12 or not start_year <= year <= end_year:
            continue

        rain = rains.get(date)
        if temp is None or rain is None or temp == missing or rain == missing:
            skipped += 1
            continue

        try:
            temp, rain = float(temp), float(rain)
        except (TypeError, ValueError) as e:
            raise PowerPayloadError(f"Non-numeric POWER value for {date}") from e

        stats.append(ClimateStats(
            date=f"{date[:4]}-{date[4:6]}",
            temperature=temp,
            rainfall=rain,
            ndvi=simulate_ndvi(month, lat, rng),
            anomaly=simulate_anomaly(rng),
        ))

    if skipped:
        logger.debug(f"Skipped {skipped} months with missing values")
    return stats


def _fallback(error: PowerAPIError, start_year: int, end_year: int, rng) -> ClimateResult:
    logger.error(f"Failed to fetch NASA data, using mock data: {error}")
    return ClimateResult(
        source=DataSource.SYNTHETIC,
        records=tuple(generate_mock_data(start_year, end_year, rng=rng)),
        error=str(error),
    )


def fetch_climate_data(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    *,
    client: Optional[PowerClient] = None,
    rng: Optional[np.random.Generator] = None,
) -> ClimateResult:
    """
    Fetch monthly climate records for a point.

    Never raises for API failures: the result is marked synthetic and holds
    mock records for the same year range instead.
    """
    client = client or power_client
    rng = rng if rng is not None else np.random.default_rng()

    try:
        parameter = client.fetch_monthly(lat, lon, start_year, end_year)
        records = build_records(parameter, lat, start_year, end_year, rng)
    except PowerAPIError as e:
        return _fallback(e, start_year, end_year, rng)

    logger.info(f"POWER data: {len(records)} monthly records")
    return ClimateResult(source=DataSource.LIVE, records=tuple(records))


async def afetch_climate_data(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    *,
    client: Optional[PowerClient] = None,
    rng: Optional[np.random.Generator] = None,
) -> ClimateResult:
    """Async variant of `fetch_climate_data`."""
    client = client or power_client
    rng = rng if rng is not None else np.random.default_rng()

    try:
        parameter = await client.afetch_monthly(lat, lon, start_year, end_year)
        records = build_records(parameter, lat, start_year, end_year, rng)
    except PowerAPIError as e:
        return _fallback(e, start_year, end_year, rng)

    logger.info(f"POWER data: {len(records)} monthly records")
    return ClimateResult(source=DataSource.LIVE, records=tuple(records))
