"""Data models for climate and calamity records."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


@dataclass(frozen=True)
class ClimateStats:
    """One month of climate data for a point."""
    date: str  # YYYY-MM
    temperature: float
    rainfall: float
    ndvi: float
    anomaly: float

    @property
    def year(self) -> int:
        return int(self.date[:4])

    @property
    def month(self) -> int:
        return int(self.date[5:7])

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "temperature": self.temperature,
            "rainfall": self.rainfall,
            "ndvi": self.ndvi,
            "anomaly": self.anomaly,
        }


@dataclass(frozen=True)
class Calamity:
    """Historical disaster event."""
    year: int
    type: str
    intensity: str
    month: str = "07"

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "type": self.type,
            "intensity": self.intensity,
            "month": self.month,
        }


@dataclass(frozen=True)
class Location:
    """Named point on the globe."""
    name: str
    lat: float
    lon: float

    def to_dict(self) -> dict:
        return {"name": self.name, "lat": self.lat, "lon": self.lon}


class DataSource(str, Enum):
    LIVE = "live"
    SYNTHETIC = "synthetic"


@dataclass(frozen=True)
class ClimateResult:
    """Climate records tagged with where they came from.

    A synthetic result carries the error that forced the fallback.
    """
    source: DataSource
    records: tuple[ClimateStats, ...] = ()
    error: Optional[str] = None

    @property
    def is_live(self) -> bool:
        return self.source is DataSource.LIVE

    @property
    def is_synthetic(self) -> bool:
        return self.source is DataSource.SYNTHETIC

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ClimateStats]:
        return iter(self.records)

    def to_dict(self) -> dict:
        return {
            "source": self.source.value,
            "error": self.error,
            "records": [r.to_dict() for r in self.records],
        }
