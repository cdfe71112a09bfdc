"""
src/analytics/alert_deriver.py
───────────────────────────────
Promotes telemetry into typed alerts and a predictive risk assessment.

Normal mode:
  no critical or crew alerts; low-risk predictive analysis.

Emergency mode:
  each reading is checked against the configured limits and an alert is
  synthesized per tripped condition:
    engine_failure  — engine temp > critical, oil pressure < critical or vibration > critical
    cabin_pressure  — cabin pressure < critical
    fuel_emergency  — fuel quantity < low-fuel warning
  Each alert carries its checklist and the diversion airport list, and is
  paired with an immediate crew alert.

Pure computation: merging against alerts that are already open belongs to
AlertLifecycleStore.merge().
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from config.alerts import CriticalAlertType, CrewPriority
from config.thresholds import DEFAULT_THRESHOLDS, TelemetryThresholds
from src.analytics.thresholds import evaluate_current_value, get_static_thresholds
from src.data.models import (
    CrewAlert,
    CriticalAlert,
    FlightMode,
    PredictiveAnalysis,
    SensorReading,
    TrendSummary,
)
from src.data.procedures import emergency_procedures, nearest_airports


@dataclass
class DerivationResult:
    critical_alerts: list[CriticalAlert] = field(default_factory=list)
    crew_alerts: list[CrewAlert] = field(default_factory=list)
    predictive: PredictiveAnalysis | None = None


# ── Scenario templates ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class _AlertTemplate:
    severity: int
    title: str
    message: str
    time_to_action: int
    confidence: float
    offset_s: int               # timestamp offset so alerts sort deterministically
    crew_message: str
    crew_visual_cue: str


_TEMPLATES: dict[CriticalAlertType, _AlertTemplate] = {
    CriticalAlertType.ENGINE_FAILURE: _AlertTemplate(
        severity=5,
        title="ENGINE #1 FAILURE - IMMEDIATE ACTION REQUIRED",
        message=(
            "Engine #1 has failed. Oil pressure critical, temperature exceeding limits. "
            "Immediate emergency procedures required."
        ),
        time_to_action=180,
        confidence=98.7,
        offset_s=0,
        crew_message="ENGINE FAILURE - EXECUTE ENGINE FIRE/FAILURE CHECKLIST",
        crew_visual_cue="RED MASTER WARNING - ENGINE FIRE/FAIL",
    ),
    CriticalAlertType.CABIN_PRESSURE: _AlertTemplate(
        severity=5,
        title="CABIN PRESSURE LOSS - DEPLOY OXYGEN MASKS",
        message="Rapid cabin pressure loss detected. Passenger oxygen masks must be deployed immediately.",
        time_to_action=20,
        confidence=99.2,
        offset_s=1,
        crew_message="CABIN PRESSURE LOSS - DON OXYGEN MASKS - DEPLOY PAX MASKS",
        crew_visual_cue="AMBER CABIN ALTITUDE WARNING",
    ),
    CriticalAlertType.FUEL_EMERGENCY: _AlertTemplate(
        severity=4,
        title="LOW FUEL - DIVERSION REQUIRED",
        message="Fuel quantity below minimum reserve for planned route. Divert to nearest suitable airport.",
        time_to_action=600,
        confidence=92.0,
        offset_s=2,
        crew_message="LOW FUEL - PLAN DIVERSION - REVIEW FUEL CHECKLIST",
        crew_visual_cue="AMBER FUEL LOW",
    ),
}

# ── Predictive profiles ───────────────────────────────────────────────────────

NORMAL_PREDICTIVE = PredictiveAnalysis(
    risk_score=12.0,
    confidence=95.0,
    maintenance_window_h=2.3,
    anomalies=[],
    trends=TrendSummary(
        improving=["Fuel efficiency", "Electrical stability"],
        degrading=[],
        stable=["Navigation systems", "Communication arrays"],
    ),
)

EMERGENCY_PREDICTIVE = PredictiveAnalysis(
    risk_score=87.0,
    confidence=96.3,
    time_to_failure_h=0.2,
    maintenance_window_h=0.1,
    anomalies=[
        "Engine bearing degradation detected",
        "Abnormal vibration harmonics",
        "Temperature spike beyond operational limits",
        "Oil pressure declining rapidly",
    ],
    trends=TrendSummary(
        improving=[],
        degrading=["Engine performance", "Bearing condition", "Thermal efficiency", "Oil circulation"],
        stable=[],
    ),
)


def _status(reading: SensorReading, variable: str, thresholds: TelemetryThresholds) -> str:
    band = get_static_thresholds(variable, thresholds)
    return evaluate_current_value(getattr(reading, variable), band)


def tripped_conditions(
    reading: SensorReading,
    thresholds: TelemetryThresholds = DEFAULT_THRESHOLDS,
) -> list[CriticalAlertType]:
    """Alert types whose trigger conditions hold for this reading, in display order."""
    tripped: list[CriticalAlertType] = []

    engine_checks = ("engine_temp_f", "oil_pressure_psi", "vibration_level")
    if any(_status(reading, v, thresholds) == "critical" for v in engine_checks):
        tripped.append(CriticalAlertType.ENGINE_FAILURE)

    if _status(reading, "cabin_pressure_psi", thresholds) == "critical":
        tripped.append(CriticalAlertType.CABIN_PRESSURE)

    if _status(reading, "fuel_quantity_pct", thresholds) != "ok":
        tripped.append(CriticalAlertType.FUEL_EMERGENCY)

    return tripped


def _alert_id(prefix: str, alert_type: CriticalAlertType, ts: datetime) -> str:
    slug = alert_type.value.replace("_", "-")
    return f"{prefix}{slug}-{int(ts.timestamp() * 1000)}"


def build_critical_alert(alert_type: CriticalAlertType, now: datetime) -> CriticalAlert:
    tpl = _TEMPLATES[alert_type]
    ts = now + timedelta(seconds=tpl.offset_s)
    return CriticalAlert(
        id=_alert_id("", alert_type, ts),
        type=alert_type,
        severity=tpl.severity,
        title=tpl.title,
        message=tpl.message,
        timestamp=ts,
        time_to_action=tpl.time_to_action,
        confidence=tpl.confidence,
        emergency_procedures=emergency_procedures(alert_type),
        nearest_airports=nearest_airports(),
    )


def build_crew_alert(alert_type: CriticalAlertType, now: datetime) -> CrewAlert:
    tpl = _TEMPLATES[alert_type]
    ts = now + timedelta(seconds=tpl.offset_s)
    return CrewAlert(
        id=_alert_id("crew-", alert_type, ts),
        priority=CrewPriority.IMMEDIATE,
        message=tpl.crew_message,
        voice_alert=True,
        visual_cue=tpl.crew_visual_cue,
        timestamp=ts,
        procedure_required=True,
        time_limit=tpl.time_to_action,
        source=alert_type,
    )


def predictive_analysis(mode: FlightMode) -> PredictiveAnalysis:
    profile = EMERGENCY_PREDICTIVE if FlightMode(mode) is FlightMode.EMERGENCY else NORMAL_PREDICTIVE
    return profile.model_copy(deep=True)


def derive(
    reading: SensorReading,
    mode: FlightMode,
    previous_alerts: Sequence[CriticalAlert] = (),
    thresholds: TelemetryThresholds = DEFAULT_THRESHOLDS,
) -> DerivationResult:
    """
    Evaluate one reading under the given mode.

    Args:
        reading: Latest telemetry
        mode: Governing flight mode
        previous_alerts: Currently open alerts; informational only, the
            store deduplicates by alert type when merging
        thresholds: Limits to evaluate against

    Returns:
        DerivationResult with fresh alert and analysis instances
    """
    mode = FlightMode(mode)
    if mode is FlightMode.NORMAL:
        return DerivationResult(predictive=predictive_analysis(mode))

    now = reading.timestamp
    tripped = tripped_conditions(reading, thresholds)
    return DerivationResult(
        critical_alerts=[build_critical_alert(t, now) for t in tripped],
        crew_alerts=[build_crew_alert(t, now) for t in tripped],
        predictive=predictive_analysis(mode),
    )
