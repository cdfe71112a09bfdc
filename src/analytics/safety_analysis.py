"""
src/analytics/safety_analysis.py
─────────────────────────────────
Rule-based flight-safety risk assessment (stands in for the cloud model).

Risk score is additive over independent factors:
  engine temperature  > 500 °F +40 | > 450 +25 | > 400 +10
  cabin pressure      < 9 PSI  +50 | < 10  +30 | < 10.5 +15
  vibration           > 8      +20 | > 6   +10
  oil pressure        < 30 PSI +25 | < 40  +10
  fuel quantity       < 20 %   +30 | < 40  +15

Level bands: ≥ 70 CRITICAL, ≥ 40 HIGH, ≥ 20 MEDIUM, else LOW.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

import numpy as np

from config.alerts import RiskLevel
from src.data.models import MaintenanceInsights, SafetyAnalysis, SensorReading

LIVES_AT_RISK = 186  # 180 passengers + 6 crew

# (field, comparison, limit, points, factor text) — first match per field wins
_RISK_RULES: list[tuple[str, str, float, int, str]] = [
    ("engine_temp_f", ">", 500.0, 40, "Engine temperature critical - immediate failure risk"),
    ("engine_temp_f", ">", 450.0, 25, "Engine temperature elevated - bearing degradation likely"),
    ("engine_temp_f", ">", 400.0, 10, "Engine temperature above normal - monitor closely"),
    ("cabin_pressure_psi", "<", 9.0, 50, "Severe cabin pressure loss - oxygen masks required"),
    ("cabin_pressure_psi", "<", 10.0, 30, "Cabin pressure declining - prepare emergency descent"),
    ("cabin_pressure_psi", "<", 10.5, 15, "Cabin pressure below normal - monitor systems"),
    ("vibration_level", ">", 8.0, 20, "Severe vibration detected - structural concern"),
    ("vibration_level", ">", 6.0, 10, "Elevated vibration - engine imbalance possible"),
    ("oil_pressure_psi", "<", 30.0, 25, "Low oil pressure - engine lubrication compromised"),
    ("oil_pressure_psi", "<", 40.0, 10, "Oil pressure below optimal - monitor engine health"),
    ("fuel_quantity_pct", "<", 20.0, 30, "Critical fuel level - immediate diversion required"),
    ("fuel_quantity_pct", "<", 40.0, 15, "Low fuel - plan for nearest suitable airport"),
]

# (min score, level, recommendation, time to action s, predicted failure)
_LEVELS: list[tuple[int, RiskLevel, str, int | None, str | None]] = [
    (70, RiskLevel.CRITICAL, "DECLARE EMERGENCY - Land immediately at nearest airport", 180,
     "Multiple system failure imminent"),
    (40, RiskLevel.HIGH, "Divert to nearest suitable airport - Prepare emergency procedures", 900,
     "Engine failure likely within 30 minutes"),
    (20, RiskLevel.MEDIUM, "Increase monitoring - Consider precautionary landing", 1800, None),
    (0, RiskLevel.LOW, "Continue normal operations with standard monitoring", None, None),
]


def _matches(value: float, op: str, limit: float) -> bool:
    return value > limit if op == ">" else value < limit


def risk_factors(reading: SensorReading) -> tuple[int, list[str]]:
    """Return (risk score, factor descriptions) for a reading."""
    score = 0
    factors: list[str] = []
    scored_fields: set[str] = set()
    for field, op, limit, points, text in _RISK_RULES:
        if field in scored_fields:
            continue
        if _matches(getattr(reading, field), op, limit):
            score += points
            factors.append(text)
            scored_fields.add(field)
    return score, factors


def _level_row(score: int) -> tuple[int, RiskLevel, str, int | None, str | None]:
    for row in _LEVELS:
        if score >= row[0]:
            return row
    return _LEVELS[-1]


def classify_risk(score: int) -> RiskLevel:
    return _level_row(score)[1]


def analyze_flight_safety(
    reading: SensorReading,
    rng: np.random.Generator | None = None,
    now: datetime | None = None,
) -> SafetyAnalysis:
    """
    Assess a single reading.

    Confidence grows with the number of contributing factors plus up to
    10 points of noise, capped at 95.
    """
    rng = rng if rng is not None else np.random.default_rng()
    score, factors = risk_factors(reading)

    _, level, recommendation, time_to_action, predicted = _level_row(score)
    confidence = min(95.0, 75.0 + len(factors) * 5.0 + float(rng.uniform(0.0, 10.0)))

    return SafetyAnalysis(
        risk_level=level,
        risk_score=score,
        confidence=round(confidence, 1),
        recommendation=recommendation,
        time_to_action=time_to_action,
        predicted_failure=predicted,
        risk_factors=factors,
        lives_at_risk=LIVES_AT_RISK,
        analysis_timestamp=now or datetime.now(tz=UTC),
    )


def generate_maintenance_insights(history: Sequence[SensorReading]) -> MaintenanceInsights | None:
    """Trend and maintenance hints from the most recent reading; None without data."""
    if not history:
        return None
    latest = history[-1]
    trends: list[str] = []
    maintenance: list[str] = []

    if latest.engine_temp_f > 420:
        trends.append("Engine temperature trending upward - thermal stress increasing")
        maintenance.append("Schedule engine inspection within 48 hours")
    if latest.vibration_level > 4:
        trends.append("Vibration levels above baseline - potential imbalance developing")
        maintenance.append("Check engine mounts and fan blade condition")
    if latest.oil_pressure_psi < 45:
        trends.append("Oil pressure declining - lubrication system degrading")
        maintenance.append("Verify oil quantity and filter condition")

    if latest.engine_temp_f > 450 or latest.cabin_pressure_psi < 10:
        projection = "High probability of emergency within next flight segment"
    else:
        projection = "Normal operational risk profile for next 24-48 hours"

    return MaintenanceInsights(
        trend_analysis=trends,
        maintenance_recommendations=maintenance,
        risk_projection=projection,
    )
