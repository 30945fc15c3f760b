"""Synthetic climate values.

NDVI and anomaly have no live source, so they are simulated for every
record. When the climate API is unreachable, whole records are simulated
instead by `generate_mock_data`.
"""

import math
from typing import List, Optional

import numpy as np
from loguru import logger

from rotater.core.models import ClimateStats
from rotater.utils.config import settings
from rotater.utils.constants import NORTHERN_SUMMER_MONTHS, SOUTHERN_SUMMER_MONTHS


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def is_local_summer(month: int, lat: float) -> bool:
    """Southern hemisphere for negative latitudes, northern otherwise."""
    if lat < 0:
        return month in SOUTHERN_SUMMER_MONTHS
    return month in NORTHERN_SUMMER_MONTHS


def simulate_ndvi(month: int, lat: float, rng: Optional[np.random.Generator] = None) -> float:
    """Seasonal NDVI: greener in local summer, plus small jitter."""
    rng = _rng(rng)
    cfg = settings.synthesis
    base = cfg.ndvi_summer if is_local_summer(month, lat) else cfg.ndvi_off_season
    ndvi = round(base + rng.random() * cfg.ndvi_jitter, 2)
    return min(1.0, max(0.0, ndvi))


def simulate_anomaly(rng: Optional[np.random.Generator] = None) -> float:
    rng = _rng(rng)
    bound = settings.synthesis.anomaly_bound
    return round((rng.random() * 2 - 1) * bound, 2)


def mock_temperature(year: int, month: int, start_year: int) -> float:
    """Sinusoidal seasonal curve with a slight warming drift per year."""
    return 15 + math.sin(month / 2) * 10 + (year - start_year) * 0.1


def generate_mock_data(
    start_year: int,
    end_year: int,
    *,
    rng: Optional[np.random.Generator] = None,
) -> List[ClimateStats]:
    """Generate one synthetic record per month in [start_year, end_year]."""
    rng = _rng(rng)

    if start_year > end_year:
        logger.warning(f"Empty year range {start_year}-{end_year}, no mock data generated")
        return []

    stats = []
    for year in range(start_year, end_year + 1):
        for month in range(1, 13):
            stats.append(ClimateStats(
                date=f"{year}-{month:02d}",
                temperature=mock_temperature(year, month, start_year),
                rainfall=rng.random() * 100,
                ndvi=0.4 + rng.random() * 0.4,
                anomaly=(rng.random() - 0.5) * 2,
            ))

    logger.debug(f"Generated {len(stats)} mock records for {start_year}-{end_year}")
    return stats
