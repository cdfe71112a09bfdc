"""
src/data/procedures.py
──────────────────────
Emergency checklist library and diversion airport reference data.

Checklists implemented:
  engine_failure  — aircraft control, engine fire/fail checklist, single-engine approach
  cabin_pressure  — crew oxygen, emergency descent, passenger masks
  fire            — locate, discharge, prepare emergency landing
  (any other)     — generic assess / checklist / ATC sequence

Every call returns fresh model instances so that completing a step on one
alert never leaks into another.
"""
from __future__ import annotations

from config.alerts import CriticalAlertType
from src.data.models import EmergencyProcedure, NearestAirport

# (step, action, time_limit_s, critical)
_CHECKLISTS: dict[CriticalAlertType, list[tuple[int, str, int, bool]]] = {
    CriticalAlertType.ENGINE_FAILURE: [
        (1, "Maintain aircraft control", 10, True),
        (2, "Engine fire/failure checklist", 30, True),
        (3, "Declare emergency with ATC", 60, True),
        (4, "Configure for single engine approach", 300, False),
        (5, "Brief cabin crew and passengers", 180, False),
    ],
    CriticalAlertType.CABIN_PRESSURE: [
        (1, "Don oxygen masks immediately", 5, True),
        (2, "Establish crew communications", 10, True),
        (3, "Begin emergency descent", 15, True),
        (4, "Deploy passenger oxygen masks", 20, True),
        (5, "Declare emergency with ATC", 30, True),
    ],
    CriticalAlertType.FIRE: [
        (1, "Identify fire location", 10, True),
        (2, "Execute fire checklist", 30, True),
        (3, "Discharge fire extinguisher", 45, True),
        (4, "Prepare for emergency landing", 120, True),
        (5, "Alert emergency services", 60, False),
    ],
}

_GENERIC_CHECKLIST: list[tuple[int, str, int, bool]] = [
    (1, "Assess situation", 30, True),
    (2, "Execute appropriate checklist", 60, True),
    (3, "Communicate with ATC", 90, False),
]

_AIRPORTS: list[dict] = [
    {
        "code": "LAX",
        "name": "Los Angeles International",
        "distance_nm": 45.0,
        "bearing_deg": 270.0,
        "runway_length_ft": 12_091,
        "emergency_services": True,
        "weather_conditions": "Clear, 10SM visibility, winds 250/08",
        "estimated_arrival_min": 12,
    },
    {
        "code": "BUR",
        "name": "Hollywood Burbank",
        "distance_nm": 38.0,
        "bearing_deg": 285.0,
        "runway_length_ft": 6_886,
        "emergency_services": True,
        "weather_conditions": "Clear, 10SM visibility, winds 260/06",
        "estimated_arrival_min": 10,
    },
    {
        "code": "LGB",
        "name": "Long Beach Airport",
        "distance_nm": 52.0,
        "bearing_deg": 255.0,
        "runway_length_ft": 10_000,
        "emergency_services": False,
        "weather_conditions": "Hazy, 8SM visibility, winds 240/12",
        "estimated_arrival_min": 14,
    },
]


def emergency_procedures(alert_type: CriticalAlertType | str) -> list[EmergencyProcedure]:
    """Ordered checklist for an alert type; unknown types get the generic list."""
    try:
        key = CriticalAlertType(alert_type)
    except ValueError:
        key = None
    rows = _CHECKLISTS.get(key, _GENERIC_CHECKLIST)
    return [
        EmergencyProcedure(step=step, action=action, time_limit=limit, critical=critical)
        for step, action, limit, critical in rows
    ]


def nearest_airports() -> list[NearestAirport]:
    """Static diversion candidates. Order carries no meaning; see sort_airports()."""
    return [NearestAirport(**a) for a in _AIRPORTS]


def sort_airports(airports: list[NearestAirport], key: str = "eta") -> list[NearestAirport]:
    """Sort diversion candidates by "eta" or "distance"."""
    if key == "distance":
        return sorted(airports, key=lambda a: a.distance_nm)
    return sorted(airports, key=lambda a: a.estimated_arrival_min)
