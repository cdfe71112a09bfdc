"""
tests/test_safety_analysis.py
──────────────────────────────
Tests for the rule-based flight-safety risk assessment.
"""

import pytest

from config.alerts import RiskLevel
from src.analytics.safety_analysis import (
    LIVES_AT_RISK,
    analyze_flight_safety,
    classify_risk,
    generate_maintenance_insights,
    risk_factors,
)


class TestRiskFactors:
    def test_normal_reading(self, normal_reading):
        score, factors = risk_factors(normal_reading)
        assert score == 10  # engine temp just above 400
        assert len(factors) == 1

    def test_emergency_reading(self, emergency_reading):
        score, factors = risk_factors(emergency_reading)
        # temp > 500 (40) + cabin < 9 (50) + vibration > 8 (20) + oil < 30 (25)
        assert score == 135
        assert len(factors) == 4

    def test_only_first_band_per_field(self, normal_reading):
        reading = normal_reading.model_copy(update={"engine_temp_f": 510.0})
        score, _ = risk_factors(reading)
        assert score == 40

    def test_low_fuel(self, low_fuel_reading):
        score, factors = risk_factors(low_fuel_reading)
        assert score == 10 + 30
        assert "Critical fuel level - immediate diversion required" in factors


class TestClassifyRisk:
    @pytest.mark.parametrize(
        "score,level",
        [(0, RiskLevel.LOW), (19, RiskLevel.LOW), (20, RiskLevel.MEDIUM),
         (40, RiskLevel.HIGH), (69, RiskLevel.HIGH), (70, RiskLevel.CRITICAL)],
    )
    def test_bands(self, score, level):
        assert classify_risk(score) is level


class TestAnalyzeFlightSafety:
    def test_emergency_is_critical(self, emergency_reading, rng, now):
        result = analyze_flight_safety(emergency_reading, rng, now=now)
        assert result.risk_level is RiskLevel.CRITICAL
        assert result.time_to_action == 180
        assert result.predicted_failure == "Multiple system failure imminent"
        assert result.lives_at_risk == LIVES_AT_RISK
        assert result.analysis_timestamp == now

    def test_confidence_bounds(self, emergency_reading, normal_reading, rng):
        for _ in range(50):
            assert analyze_flight_safety(emergency_reading, rng).confidence <= 95.0
            normal = analyze_flight_safety(normal_reading, rng)
            assert 80.0 <= normal.confidence <= 90.0

    def test_low_has_no_deadline(self, normal_reading, rng):
        result = analyze_flight_safety(normal_reading, rng)
        assert result.risk_level is RiskLevel.LOW
        assert result.time_to_action is None


class TestMaintenanceInsights:
    def test_empty_history(self):
        assert generate_maintenance_insights([]) is None

    def test_emergency_projection(self, emergency_reading):
        insights = generate_maintenance_insights([emergency_reading])
        assert insights.risk_projection.startswith("High probability")
        assert len(insights.maintenance_recommendations) == 3

    def test_normal_projection(self, normal_reading):
        insights = generate_maintenance_insights([normal_reading])
        assert insights.risk_projection.startswith("Normal")
