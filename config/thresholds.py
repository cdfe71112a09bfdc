"""
config/thresholds.py
────────────────────
Flight-parameter limits used by the alert deriver, the safety analysis and
the dashboard status colours.

Direction matters:
  "high" limits fire when the value rises above them (temperature, vibration)
  "low"  limits fire when the value drops below them (pressures, fuel)
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Limit:
    warning: float
    critical: float
    direction: str = "high"  # "high" | "low"


@dataclass(frozen=True)
class TelemetryThresholds:
    engine_temp_f: Limit
    cabin_pressure_psi: Limit
    oil_pressure_psi: Limit
    vibration_level: Limit
    fuel_quantity_pct: Limit

    def for_variable(self, variable: str) -> Limit | None:
        return getattr(self, variable, None)


DEFAULT_THRESHOLDS = TelemetryThresholds(
    engine_temp_f=Limit(warning=400.0, critical=450.0),
    cabin_pressure_psi=Limit(warning=10.5, critical=10.0, direction="low"),
    oil_pressure_psi=Limit(warning=40.0, critical=30.0, direction="low"),
    vibration_level=Limit(warning=6.0, critical=8.0),
    # "low" fuel is the warning band; below critical is an immediate diversion
    fuel_quantity_pct=Limit(warning=30.0, critical=20.0, direction="low"),
)
