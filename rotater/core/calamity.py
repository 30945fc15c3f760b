"""Mock historical calamity records."""

from typing import List, Optional

import numpy as np
from loguru import logger

from rotater.core.models import Calamity
from rotater.utils.config import settings
from rotater.utils.constants import CALAMITY_INTENSITIES, CALAMITY_TYPES


def fetch_calamity_history(
    lat: float,
    lon: float,
    *,
    rng: Optional[np.random.Generator] = None,
) -> List[Calamity]:
    """
    Return a randomized list of past disaster events.

    No disaster database is wired in, so the coordinates do not influence
    the result. Each configured year gets an event on a coin flip.
    """
    rng = rng if rng is not None else np.random.default_rng()
    cfg = settings.calamity

    calamities = []
    for year in cfg.years:
        if rng.random() > 0.5:
            calamities.append(Calamity(
                year=year,
                type=CALAMITY_TYPES[0] if rng.random() > 0.5 else CALAMITY_TYPES[1],
                intensity=CALAMITY_INTENSITIES[0] if rng.random() > 0.5 else CALAMITY_INTENSITIES[1],
                month=cfg.month,
            ))

    logger.info(f"Calamity history ({lat}, {lon}): {len(calamities)} events")
    return calamities
