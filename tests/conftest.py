import httpx
import numpy as np
import pytest

from rotater.data_sources.power_client import PowerClient
from rotater.utils.config import settings


def power_payload(year: int = 2020, temps=None, rains=None, annual: bool = True) -> dict:
    """Monthly POWER response for one year, with the YYYY13 annual row."""
    temps = temps or [-1.2, 0.5, 4.8, 10.9, 16.7, 21.8, 24.9, 24.1, 20.2, 13.7, 7.8, 2.1]
    rains = rains or [2.9, 2.6, 3.4, 3.5, 3.3, 3.6, 3.9, 3.7, 3.2, 3.1, 3.3, 3.0]
    t2m = {f"{year}{m:02d}": t for m, t in enumerate(temps, start=1)}
    prec = {f"{year}{m:02d}": r for m, r in enumerate(rains, start=1)}
    if annual:
        t2m[f"{year}13"] = 12.2
        prec[f"{year}13"] = 3.3
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-74.006, 40.7128, 19.4]},
        "properties": {"parameter": {"T2M": t2m, "PRECTOTCORR": prec}},
        "header": {"fill_value": -999.0},
    }


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def make_client():
    """Build a PowerClient whose requests go to `handler` instead of the network."""
    def _make(handler, **kwargs):
        kwargs.setdefault("api_key", None)
        return PowerClient(transport=httpx.MockTransport(handler), **kwargs)
    return _make


@pytest.fixture(autouse=True)
def no_configured_key(monkeypatch):
    monkeypatch.setattr(settings.power, "api_key", None)
