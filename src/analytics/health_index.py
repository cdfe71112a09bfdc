"""
src/analytics/health_index.py
──────────────────────────────
Subsystem health scoring.

Health ∈ [0, 100] where 100 = fully serviceable.

The score is keyed on flight mode only: a high-health profile for normal
flight and a degraded profile for the engine-failure / decompression
scenario. Individual reading values do not move the percentages.
The cabin passenger-safety record follows the same two profiles.
"""

from __future__ import annotations

from src.data.models import FlightMode, PassengerSafety, SystemHealth

NORMAL_PROFILE: dict[str, float] = {
    "overall": 94.0,
    "engines": 96.0,
    "hydraulics": 98.0,
    "electrical": 92.0,
    "avionics": 95.0,
    "flight_controls": 97.0,
    "navigation": 99.0,
    "communication": 96.0,
    "fuel_system": 94.0,
    "landing_gear": 100.0,
    "pressurization": 98.0,
    "fire_detection": 100.0,
}

EMERGENCY_PROFILE: dict[str, float] = {
    "overall": 18.0,
    "engines": 12.0,
    "hydraulics": 35.0,
    "electrical": 78.0,
    "avionics": 89.0,
    "flight_controls": 65.0,
    "navigation": 95.0,
    "communication": 88.0,
    "fuel_system": 72.0,
    "landing_gear": 100.0,
    "pressurization": 15.0,
    "fire_detection": 100.0,
}

# Cabin state shown to the crew; equipment counts use the model defaults
NORMAL_PASSENGER_SAFETY: dict[str, float | bool] = {
    "seatbelt_sign": False,
    "turbulence_level": 15.0,
    "cabin_pressure_psi": 11.3,
    "oxygen_level_pct": 21.0,
}

EMERGENCY_PASSENGER_SAFETY: dict[str, float | bool] = {
    "seatbelt_sign": True,
    "turbulence_level": 45.0,
    "cabin_pressure_psi": 10.8,
    "oxygen_level_pct": 19.0,
}

SUBSYSTEM_LABELS: dict[str, str] = {
    "overall": "Overall",
    "engines": "Engines",
    "hydraulics": "Hydraulics",
    "electrical": "Electrical",
    "avionics": "Avionics",
    "flight_controls": "Flight Controls",
    "navigation": "Navigation",
    "communication": "Communication",
    "fuel_system": "Fuel System",
    "landing_gear": "Landing Gear",
    "pressurization": "Pressurization",
    "fire_detection": "Fire Detection",
}


def score(mode: FlightMode) -> SystemHealth:
    """Return a fresh SystemHealth snapshot for the given mode."""
    profile = EMERGENCY_PROFILE if FlightMode(mode) is FlightMode.EMERGENCY else NORMAL_PROFILE
    return SystemHealth(**profile)


def passenger_safety(mode: FlightMode) -> PassengerSafety:
    """Fresh cabin safety record for the given mode."""
    if FlightMode(mode) is FlightMode.EMERGENCY:
        return PassengerSafety(**EMERGENCY_PASSENGER_SAFETY)
    return PassengerSafety(**NORMAL_PASSENGER_SAFETY)


def turbulence_label(level: float) -> str:
    if level < 20:
        return "Smooth"
    if level < 40:
        return "Light"
    if level < 60:
        return "Moderate"
    return "Severe"


def health_color(value: float) -> str:
    if value >= 80:
        return "#2ea44f"
    if value >= 60:
        return "#58a6ff"
    if value >= 40:
        return "#e8a020"
    if value >= 20:
        return "#f0883e"
    return "#da3633"


def weakest_subsystems(health: SystemHealth, n: int = 3) -> list[tuple[str, float]]:
    """The n lowest-scoring subsystems, excluding the overall figure."""
    items = [(k, v) for k, v in health.model_dump().items() if k != "overall"]
    return sorted(items, key=lambda kv: kv[1])[:n]
