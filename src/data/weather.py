"""
src/data/weather.py
───────────────────
Weather enrichment glue.

Turns an OpenWeatherMap-style "current weather" payload into a
WeatherConditions record. Missing or malformed payloads never reach the
simulation core: they are replaced by a randomized fallback record. A null
field only falls back to that field's default (e.g. temperature -45).

Derived aviation figures:
  turbulence     — wind speed × 2 (cap 50) plus a precipitation/storm bonus, cap 100
  lightning risk — thunderstorms 80 + 0.2 × cloud cover, else cloud-cover based
"""
from __future__ import annotations

import logging
from typing import Any

import numpy as np
from pydantic import BaseModel, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

_CONDITION_TURBULENCE: dict[str, float] = {
    "thunderstorm": 40.0,
    "rain": 15.0,
    "snow": 20.0,
    "clouds": 10.0,
}


class WeatherConditions(BaseModel):
    turbulence: float = Field(ge=0.0, le=100.0)
    wind_speed: float = Field(ge=0.0)
    visibility: float = Field(ge=0.0)        # miles
    temperature: float
    humidity: float = Field(ge=0.0, le=100.0)
    lightning_risk: float = Field(ge=0.0, le=100.0)
    weather_alerts: list[str] = Field(default_factory=list)
    pressure: float = Field(gt=0.0)
    wind_direction: float = Field(ge=0.0, le=360.0)
    cloud_cover: float = Field(ge=0.0, le=100.0)
    is_fallback: bool = False


# Payload shape we accept; extra keys are ignored
class _PayloadPart(BaseModel):
    """Null fields take the field default instead of failing the whole payload."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class _Main(_PayloadPart):
    temp: float = -45.0
    humidity: float = 20.0
    pressure: float = 1013.0


class _Wind(_PayloadPart):
    speed: float = 0.0
    deg: float = 0.0


class _Clouds(_PayloadPart):
    all: float = 0.0


class _Condition(_PayloadPart):
    main: str = ""
    description: str = ""


class _Payload(_PayloadPart):
    main: _Main = Field(default_factory=_Main)
    wind: _Wind = Field(default_factory=_Wind)
    clouds: _Clouds = Field(default_factory=_Clouds)
    visibility: float = 10_000.0  # metres
    weather: list[_Condition] = Field(min_length=1)


def calculate_turbulence(wind_speed: float, condition: str) -> float:
    base = min(wind_speed * 2.0, 50.0)
    base += _CONDITION_TURBULENCE.get((condition or "").lower(), 0.0)
    return min(base, 100.0)


def calculate_lightning_risk(condition: str, cloud_cover: float) -> float:
    if (condition or "").lower() == "thunderstorm":
        return min(80.0 + cloud_cover * 0.2, 100.0)
    if cloud_cover > 80:
        return min(cloud_cover * 0.3, 30.0)
    return min(cloud_cover * 0.1, 10.0)


def fallback_weather(rng: np.random.Generator | None = None) -> WeatherConditions:
    """Plausible cruise-altitude conditions used whenever the provider fails."""
    rng = rng if rng is not None else np.random.default_rng()
    return WeatherConditions(
        turbulence=15.0 + rng.uniform(0, 20),
        wind_speed=25.0 + rng.uniform(0, 20),
        visibility=8.0 + rng.uniform(0, 4),
        temperature=-45.0 + rng.uniform(0, 10),
        humidity=15.0 + rng.uniform(0, 20),
        lightning_risk=rng.uniform(0, 15),
        weather_alerts=["Light turbulence ahead"] if rng.uniform() > 0.7 else [],
        pressure=1010.0 + rng.uniform(0, 10),
        wind_direction=rng.uniform(0, 360),
        cloud_cover=rng.uniform(0, 60),
        is_fallback=True,
    )


def parse_weather_payload(
    payload: dict[str, Any] | None,
    rng: np.random.Generator | None = None,
) -> WeatherConditions:
    """
    Parse a provider payload; fall back to synthetic conditions on any shape error.
    """
    if not payload:
        logger.warning("Empty weather payload, using fallback conditions")
        return fallback_weather(rng)
    try:
        data = _Payload.model_validate(payload)
        condition = data.weather[0].main
        cloud_cover = data.clouds.all
        return WeatherConditions(
            turbulence=calculate_turbulence(data.wind.speed, condition),
            wind_speed=data.wind.speed,
            visibility=data.visibility / 1000.0,
            temperature=data.main.temp,
            humidity=data.main.humidity,
            lightning_risk=calculate_lightning_risk(condition, cloud_cover),
            weather_alerts=[c.description for c in data.weather if c.description],
            pressure=data.main.pressure,
            wind_direction=data.wind.deg,
            cloud_cover=cloud_cover,
        )
    except (ValidationError, TypeError) as exc:
        logger.warning("Malformed weather payload, using fallback conditions: %s", exc)
        return fallback_weather(rng)


def flight_recommendation(weather: WeatherConditions) -> str:
    if weather.lightning_risk > 60:
        return "AVOID - Severe thunderstorm activity"
    if weather.turbulence > 50:
        return "CAUTION - Severe turbulence expected"
    if weather.visibility < 3:
        return "CAUTION - Low visibility conditions"
    if weather.wind_speed > 40:
        return "CAUTION - High wind conditions"
    return "Normal flight operations"


def is_safe_for_landing(weather: WeatherConditions) -> tuple[bool, list[str]]:
    """Return (safe, reasons) for a landing under these conditions."""
    reasons: list[str] = []
    if weather.visibility < 1:
        reasons.append("Visibility too low for safe landing")
    if weather.wind_speed > 45:
        reasons.append("Wind speed exceeds safe landing limits")
    if weather.lightning_risk > 70:
        reasons.append("Severe thunderstorm activity in area")
    if weather.turbulence > 60:
        reasons.append("Severe turbulence conditions")
    return not reasons, reasons
