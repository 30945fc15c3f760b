"""Configuration loader for ROTATER."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class AppConfig(BaseModel):
    name: str = "ROTATER"
    version: str = "0.1.0"
    environment: str = "development"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    rotation: str = "10 MB"
    retention: str = "7 days"
    file_enabled: bool = False


class PowerConfig(BaseModel):
    base_url: str = "https://power.larc.nasa.gov/api/temporal/monthly/point"
    community: str = "AG"
    response_format: str = "JSON"
    missing_value: float = -999.0
    api_key: Optional[str] = None
    timeout_seconds: float = 30.0


class SynthesisConfig(BaseModel):
    ndvi_summer: float = 0.7
    ndvi_off_season: float = 0.3
    ndvi_jitter: float = 0.1
    anomaly_bound: float = 1.5


class CalamityConfig(BaseModel):
    years: list[int] = [2018, 2020, 2022, 2023]
    month: str = "07"


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    logging: LoggingConfig = LoggingConfig()
    power: PowerConfig = PowerConfig()
    synthesis: SynthesisConfig = SynthesisConfig()
    calamity: CalamityConfig = CalamityConfig()


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_yaml_config(env: str = "development") -> dict[str, Any]:
    config_path = get_project_root() / "config" / "environments" / f"{env}.yaml"
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(env: Optional[str] = None) -> Settings:
    env = env or os.getenv("APP_ENV", "development")
    yaml_config = load_yaml_config(env)

    # Override with env vars
    if os.getenv("NASA_API_KEY"):
        yaml_config.setdefault("power", {})["api_key"] = os.getenv("NASA_API_KEY")
    if os.getenv("POWER_BASE_URL"):
        yaml_config.setdefault("power", {})["base_url"] = os.getenv("POWER_BASE_URL")
    if os.getenv("POWER_TIMEOUT_SECONDS"):
        yaml_config.setdefault("power", {})["timeout_seconds"] = os.getenv("POWER_TIMEOUT_SECONDS")
    if os.getenv("LOG_LEVEL"):
        yaml_config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    return Settings(**yaml_config) if yaml_config else Settings()


settings = get_settings()
