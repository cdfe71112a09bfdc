"""
src/analytics/thresholds.py
────────────────────────────
Threshold evaluation for flight parameters.

Provides:
  - Static limit lookup per monitored variable
  - Direction-aware status classification ("ok" | "warning" | "critical")
  - Status colours for the dashboard KPI cards
"""
from __future__ import annotations

from dataclasses import dataclass

from config.alerts import STATUS_COLORS
from config.thresholds import DEFAULT_THRESHOLDS, TelemetryThresholds


@dataclass(frozen=True)
class ThresholdBand:
    variable: str
    warning: float | None
    critical: float | None
    direction: str = "high"   # "high" = bad when rising, "low" = bad when falling


def get_static_thresholds(
    variable: str,
    thresholds: TelemetryThresholds = DEFAULT_THRESHOLDS,
) -> ThresholdBand:
    """Return the threshold band for a reading field; empty band if unmonitored."""
    limit = thresholds.for_variable(variable)
    if limit is None:
        return ThresholdBand(variable=variable, warning=None, critical=None)
    return ThresholdBand(
        variable=variable,
        warning=limit.warning,
        critical=limit.critical,
        direction=limit.direction,
    )


def _beyond(value: float, limit: float | None, direction: str) -> bool:
    if limit is None:
        return False
    return value < limit if direction == "low" else value > limit


def evaluate_current_value(value: float, band: ThresholdBand) -> str:
    """
    Classify a value against a ThresholdBand.

    Limits are strict: a value sitting exactly on a limit is not past it.

    Returns: "ok" | "warning" | "critical"
    """
    if _beyond(value, band.critical, band.direction):
        return "critical"
    if _beyond(value, band.warning, band.direction):
        return "warning"
    return "ok"


def get_value_color(value: float, band: ThresholdBand) -> str:
    return STATUS_COLORS[evaluate_current_value(value, band)]
