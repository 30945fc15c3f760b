"""NASA POWER monthly point client."""

from typing import Optional

import httpx
from loguru import logger

from rotater.utils.config import settings
from rotater.utils.constants import PRECIPITATION_PARAM, TEMPERATURE_PARAM


class PowerAPIError(Exception):
    """Base error for POWER API failures."""


class PowerRequestError(PowerAPIError):
    """Transport failure or non-2xx response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PowerPayloadError(PowerAPIError):
    """Response body is not the expected JSON shape."""


class PowerClient:
    """Client for monthly temperature and precipitation via NASA POWER."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        cfg = settings.power
        self.base_url = base_url or cfg.base_url
        self.api_key = api_key or cfg.api_key
        self.timeout = timeout if timeout is not None else cfg.timeout_seconds
        self.community = cfg.community
        self.response_format = cfg.response_format
        self.transport = transport

    def build_params(self, lat: float, lon: float, start_year: int, end_year: int) -> dict:
        params = {
            "parameters": ",".join([TEMPERATURE_PARAM, PRECIPITATION_PARAM]),
            "community": self.community,
            "longitude": lon,
            "latitude": lat,
            "start": start_year,
            "end": end_year,
            "format": self.response_format,
        }
        if self.api_key:
            params["api_key"] = self.api_key
        return params

    def fetch_monthly(self, lat: float, lon: float, start_year: int, end_year: int) -> dict:
        """
        Fetch monthly point data.

        Returns the `properties.parameter` mapping of the response, i.e.
        parameter code -> "YYYYMM" -> value. Raises PowerAPIError subclasses
        on any failure.
        """
        params = self.build_params(lat, lon, start_year, end_year)
        logger.info(f"POWER request ({lat}, {lon}) {start_year}-{end_year}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(self.base_url, params=params)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PowerRequestError(
                f"POWER API error: {e.response.status_code} {e.response.reason_phrase}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise PowerRequestError(f"POWER request failed: {e}") from e

        return self.extract_parameters(resp)

    async def afetch_monthly(self, lat: float, lon: float, start_year: int, end_year: int) -> dict:
        """Async variant of `fetch_monthly`."""
        params = self.build_params(lat, lon, start_year, end_year)
        logger.info(f"POWER request ({lat}, {lon}) {start_year}-{end_year}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.base_url, params=params)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PowerRequestError(
                f"POWER API error: {e.response.status_code} {e.response.reason_phrase}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise PowerRequestError(f"POWER request failed: {e}") from e

        return self.extract_parameters(resp)

    def extract_parameters(self, resp: httpx.Response) -> dict:
        try:
            data = resp.json()
        except ValueError as e:
            raise PowerPayloadError(f"Invalid JSON from POWER: {e}") from e

        try:
            parameter = data["properties"]["parameter"]
        except (KeyError, TypeError) as e:
            raise PowerPayloadError("POWER payload missing properties.parameter") from e
        if not isinstance(parameter, dict):
            raise PowerPayloadError("POWER properties.parameter is not an object")

        for code in (TEMPERATURE_PARAM, PRECIPITATION_PARAM):
            if not isinstance(parameter.get(code), dict):
                raise PowerPayloadError(f"POWER payload missing {code}")

        return parameter


power_client = PowerClient()
