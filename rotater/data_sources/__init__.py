"""Data sources module."""

from rotater.data_sources.power_client import (
    PowerAPIError,
    PowerClient,
    PowerPayloadError,
    PowerRequestError,
    power_client,
)

__all__ = ["PowerAPIError", "PowerClient", "PowerPayloadError", "PowerRequestError", "power_client"]
