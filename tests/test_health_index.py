"""
tests/test_health_index.py
───────────────────────────
Tests for subsystem health scoring.
"""

from src.analytics.health_index import (
    EMERGENCY_PROFILE,
    NORMAL_PROFILE,
    health_color,
    passenger_safety,
    score,
    turbulence_label,
    weakest_subsystems,
)
from src.data.models import FlightMode, SystemHealth


class TestScore:
    def test_normal_profile(self):
        health = score(FlightMode.NORMAL)
        assert isinstance(health, SystemHealth)
        assert health.overall == 94.0
        assert health.landing_gear == 100.0
        assert health.model_dump() == NORMAL_PROFILE

    def test_emergency_profile(self):
        health = score(FlightMode.EMERGENCY)
        assert health.overall == 18.0
        assert health.engines == 12.0
        assert health.pressurization == 15.0
        assert health.model_dump() == EMERGENCY_PROFILE

    def test_accepts_mode_string(self):
        assert score("emergency").overall == 18.0

    def test_returns_fresh_instances(self):
        a = score(FlightMode.NORMAL)
        a.engines = 1.0
        assert score(FlightMode.NORMAL).engines == 96.0

    def test_all_values_in_range(self):
        for mode in FlightMode:
            for value in score(mode).model_dump().values():
                assert 0.0 <= value <= 100.0


class TestHealthColor:
    def test_bands(self):
        assert health_color(95) == "#2ea44f"
        assert health_color(65) == "#58a6ff"
        assert health_color(45) == "#e8a020"
        assert health_color(25) == "#f0883e"
        assert health_color(5) == "#da3633"


class TestWeakestSubsystems:
    def test_emergency_weakest(self):
        weakest = weakest_subsystems(score(FlightMode.EMERGENCY), n=2)
        assert weakest == [("engines", 12.0), ("pressurization", 15.0)]

    def test_excludes_overall(self):
        names = [name for name, _ in weakest_subsystems(score(FlightMode.EMERGENCY), n=11)]
        assert "overall" not in names


class TestPassengerSafety:
    def test_normal_cabin(self):
        cabin = passenger_safety(FlightMode.NORMAL)
        assert cabin.seatbelt_sign is False
        assert cabin.turbulence_level == 15.0
        assert cabin.cabin_pressure_psi == 11.3
        assert cabin.oxygen_level_pct == 21.0

    def test_emergency_cabin(self):
        cabin = passenger_safety("emergency")
        assert cabin.seatbelt_sign is True
        assert cabin.turbulence_level == 45.0
        assert cabin.cabin_pressure_psi == 10.8
        assert cabin.oxygen_level_pct == 19.0

    def test_equipment_counts_same_in_both_modes(self):
        for mode in FlightMode:
            eq = passenger_safety(mode).emergency_equipment
            assert (eq.lifevests, eq.oxygen_masks, eq.emergency_slides) == (180, 200, 8)

    def test_returns_fresh_instances(self):
        passenger_safety(FlightMode.NORMAL).emergency_equipment.lifevests = 0
        assert passenger_safety(FlightMode.NORMAL).emergency_equipment.lifevests == 180

    def test_turbulence_labels(self):
        assert turbulence_label(15) == "Smooth"
        assert turbulence_label(20) == "Light"
        assert turbulence_label(45) == "Moderate"
        assert turbulence_label(75) == "Severe"
