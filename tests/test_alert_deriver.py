"""
tests/test_alert_deriver.py
────────────────────────────
Tests for alert derivation and the predictive profiles.
"""

from datetime import timedelta

from config.alerts import CriticalAlertType, CrewPriority
from src.analytics.alert_deriver import (
    build_crew_alert,
    derive,
    predictive_analysis,
    tripped_conditions,
)
from src.data.models import FlightMode


class TestTrippedConditions:
    def test_normal_reading_trips_nothing(self, normal_reading):
        assert tripped_conditions(normal_reading) == []

    def test_emergency_reading(self, emergency_reading):
        assert tripped_conditions(emergency_reading) == [
            CriticalAlertType.ENGINE_FAILURE,
            CriticalAlertType.CABIN_PRESSURE,
        ]

    def test_oil_pressure_alone_trips_engine(self, normal_reading):
        reading = normal_reading.model_copy(update={"oil_pressure_psi": 25.0})
        assert tripped_conditions(reading) == [CriticalAlertType.ENGINE_FAILURE]

    def test_low_fuel(self, low_fuel_reading):
        assert tripped_conditions(low_fuel_reading) == [CriticalAlertType.FUEL_EMERGENCY]


class TestDeriveEmergency:
    def test_exactly_two_critical_alerts(self, emergency_reading):
        result = derive(emergency_reading, FlightMode.EMERGENCY)
        assert len(result.critical_alerts) == 2
        assert {a.type for a in result.critical_alerts} == {
            CriticalAlertType.ENGINE_FAILURE,
            CriticalAlertType.CABIN_PRESSURE,
        }

    def test_alerts_are_severity_five_and_open(self, emergency_reading):
        for alert in derive(emergency_reading, FlightMode.EMERGENCY).critical_alerts:
            assert alert.severity == 5
            assert alert.acknowledged is False

    def test_engine_failure_details(self, emergency_reading):
        engine = derive(emergency_reading, FlightMode.EMERGENCY).critical_alerts[0]
        assert engine.time_to_action == 180
        assert engine.confidence == 98.7
        assert [p.step for p in engine.emergency_procedures] == [1, 2, 3, 4, 5]
        assert engine.emergency_procedures[0].action == "Maintain aircraft control"

    def test_cabin_pressure_details(self, emergency_reading):
        cabin = derive(emergency_reading, FlightMode.EMERGENCY).critical_alerts[1]
        assert cabin.time_to_action == 20
        assert cabin.confidence == 99.2
        assert cabin.timestamp == emergency_reading.timestamp + timedelta(seconds=1)

    def test_airports_attached(self, emergency_reading):
        for alert in derive(emergency_reading, FlightMode.EMERGENCY).critical_alerts:
            assert [a.code for a in alert.nearest_airports] == ["LAX", "BUR", "LGB"]

    def test_ids_are_unique(self, emergency_reading):
        result = derive(emergency_reading, FlightMode.EMERGENCY)
        ids = [a.id for a in result.critical_alerts] + [c.id for c in result.crew_alerts]
        assert len(ids) == len(set(ids))

    def test_crew_alerts_pair_with_critical(self, emergency_reading):
        result = derive(emergency_reading, FlightMode.EMERGENCY)
        assert [c.source for c in result.crew_alerts] == [a.type for a in result.critical_alerts]
        for crew in result.crew_alerts:
            assert crew.priority is CrewPriority.IMMEDIATE
            assert crew.voice_alert is True
            assert crew.procedure_required is True

    def test_checklists_are_independent(self, emergency_reading):
        a = derive(emergency_reading, FlightMode.EMERGENCY).critical_alerts[0]
        b = derive(emergency_reading, FlightMode.EMERGENCY).critical_alerts[0]
        a.emergency_procedures[0].completed = True
        assert b.emergency_procedures[0].completed is False

    def test_low_fuel_is_severity_four(self, low_fuel_reading):
        result = derive(low_fuel_reading, FlightMode.EMERGENCY)
        assert [a.severity for a in result.critical_alerts] == [4]


class TestDeriveNormal:
    def test_no_alerts(self, normal_reading):
        result = derive(normal_reading, FlightMode.NORMAL)
        assert result.critical_alerts == []
        assert result.crew_alerts == []

    def test_out_of_limit_reading_ignored_in_normal_mode(self, emergency_reading):
        assert derive(emergency_reading, FlightMode.NORMAL).critical_alerts == []

    def test_predictive_is_low_risk(self, normal_reading):
        result = derive(normal_reading, FlightMode.NORMAL)
        assert result.predictive.risk_score == 12.0
        assert result.predictive.time_to_failure_h is None


class TestPredictiveAnalysis:
    def test_emergency_profile(self):
        p = predictive_analysis(FlightMode.EMERGENCY)
        assert p.risk_score == 87.0
        assert p.confidence == 96.3
        assert p.time_to_failure_h == 0.2
        assert len(p.anomalies) == 4
        assert len(p.trends.degrading) == 4

    def test_returns_copies(self):
        predictive_analysis(FlightMode.EMERGENCY).anomalies.clear()
        assert len(predictive_analysis(FlightMode.EMERGENCY).anomalies) == 4


class TestBuildCrewAlert:
    def test_id_prefix(self, now):
        crew = build_crew_alert(CriticalAlertType.CABIN_PRESSURE, now)
        assert crew.id.startswith("crew-cabin-pressure-")
        assert crew.time_limit == 20
