"""
tests/test_thresholds.py
─────────────────────────
Tests for the threshold engine.
"""

from config.thresholds import DEFAULT_THRESHOLDS, Limit, TelemetryThresholds
from src.analytics.thresholds import (
    ThresholdBand,
    evaluate_current_value,
    get_static_thresholds,
    get_value_color,
)


class TestGetStaticThresholds:
    def test_engine_temperature(self):
        band = get_static_thresholds("engine_temp_f")
        assert band.warning == 400.0
        assert band.critical == 450.0
        assert band.direction == "high"

    def test_cabin_pressure_is_low_direction(self):
        band = get_static_thresholds("cabin_pressure_psi")
        assert band.critical == 10.0
        assert band.direction == "low"

    def test_unmonitored_variable(self):
        band = get_static_thresholds("altitude_ft")
        assert band.warning is None
        assert band.critical is None

    def test_custom_thresholds(self):
        custom = TelemetryThresholds(
            engine_temp_f=Limit(300.0, 350.0),
            cabin_pressure_psi=DEFAULT_THRESHOLDS.cabin_pressure_psi,
            oil_pressure_psi=DEFAULT_THRESHOLDS.oil_pressure_psi,
            vibration_level=DEFAULT_THRESHOLDS.vibration_level,
            fuel_quantity_pct=DEFAULT_THRESHOLDS.fuel_quantity_pct,
        )
        assert get_static_thresholds("engine_temp_f", custom).critical == 350.0


class TestEvaluateCurrentValue:
    def _high(self):
        return ThresholdBand("engine_temp_f", warning=400.0, critical=450.0)

    def _low(self):
        return ThresholdBand("cabin_pressure_psi", warning=10.5, critical=10.0, direction="low")

    def test_high_ok(self):
        assert evaluate_current_value(380.0, self._high()) == "ok"

    def test_high_warning(self):
        assert evaluate_current_value(420.0, self._high()) == "warning"

    def test_high_critical(self):
        assert evaluate_current_value(520.0, self._high()) == "critical"

    def test_limit_itself_is_not_past(self):
        assert evaluate_current_value(450.0, self._high()) == "warning"
        assert evaluate_current_value(10.0, self._low()) == "warning"

    def test_low_direction(self):
        assert evaluate_current_value(11.3, self._low()) == "ok"
        assert evaluate_current_value(10.2, self._low()) == "warning"
        assert evaluate_current_value(8.2, self._low()) == "critical"

    def test_empty_band_always_ok(self):
        assert evaluate_current_value(1e9, ThresholdBand("altitude_ft", None, None)) == "ok"


class TestGetValueColor:
    def test_critical_is_red(self):
        band = get_static_thresholds("vibration_level")
        assert get_value_color(9.2, band) == "#da3633"

    def test_ok_is_green(self):
        band = get_static_thresholds("vibration_level")
        assert get_value_color(3.2, band) == "#2ea44f"
