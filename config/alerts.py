"""
config/alerts.py
────────────────
Alert types, crew priorities, risk levels and display configuration.
"""

from enum import Enum


class CriticalAlertType(str, Enum):
    ENGINE_FAILURE = "engine_failure"
    CABIN_PRESSURE = "cabin_pressure"
    FIRE = "fire"
    FUEL_EMERGENCY = "fuel_emergency"
    STRUCTURAL = "structural"
    WEATHER_SEVERE = "weather_severe"


class CrewPriority(str, Enum):
    IMMEDIATE = "immediate"
    URGENT = "urgent"
    ADVISORY = "advisory"


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class LifeSavingCommand(str, Enum):
    OXYGEN_MASKS = "oxygen_masks"
    EVACUATION_PREP = "evacuation_prep"
    MAYDAY = "mayday"


STATUS_COLORS: dict[str, str] = {
    "ok": "#2ea44f",
    "warning": "#e8a020",
    "critical": "#da3633",
}

STATUS_LABELS: dict[str, str] = {
    "ok": "OPTIMAL",
    "warning": "WARNING",
    "critical": "CRITICAL",
}

PRIORITY_COLORS: dict[str, str] = {
    CrewPriority.IMMEDIATE: "#da3633",
    CrewPriority.URGENT: "#f0883e",
    CrewPriority.ADVISORY: "#58a6ff",
}

RISK_COLORS: dict[str, str] = {
    RiskLevel.LOW: "#2ea44f",
    RiskLevel.MEDIUM: "#e8a020",
    RiskLevel.HIGH: "#f0883e",
    RiskLevel.CRITICAL: "#da3633",
}

ALERT_TYPE_LABELS: dict[str, str] = {
    CriticalAlertType.ENGINE_FAILURE: "Engine Failure",
    CriticalAlertType.CABIN_PRESSURE: "Cabin Pressure",
    CriticalAlertType.FIRE: "Fire",
    CriticalAlertType.FUEL_EMERGENCY: "Fuel Emergency",
    CriticalAlertType.STRUCTURAL: "Structural",
    CriticalAlertType.WEATHER_SEVERE: "Severe Weather",
}

# Critical alerts at or above this severity drive the emergency overlay
EMERGENCY_UI_MIN_SEVERITY = 4

MAX_CREW_ALERTS_DISPLAY = 10
