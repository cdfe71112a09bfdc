"""
tests/test_models.py
─────────────────────
Tests for Pydantic v2 data models.
"""
import pytest
from pydantic import ValidationError

from config.alerts import CriticalAlertType
from src.data.models import (
    CommunicationSystems,
    CriticalAlert,
    EmergencyProcedure,
    LifeSavingSystem,
    PassengerSafety,
    SensorReading,
    SystemHealth,
)


class TestSensorReading:
    def test_valid_reading(self, normal_reading):
        assert normal_reading.engine_temp_f == 420.0
        assert 0.0 <= normal_reading.fuel_quantity_pct <= 100.0

    def test_reading_is_frozen(self, normal_reading):
        with pytest.raises(ValidationError):
            normal_reading.engine_temp_f = 999.0

    def test_fuel_percentage_bounds(self, normal_reading):
        data = normal_reading.model_dump()
        data["fuel_quantity_pct"] = 120.0
        with pytest.raises(ValidationError):
            SensorReading(**data)

    def test_negative_pressure_rejected(self, normal_reading):
        data = normal_reading.model_dump()
        data["oil_pressure_psi"] = -1.0
        with pytest.raises(ValidationError):
            SensorReading(**data)

    def test_model_dump(self, normal_reading):
        data = normal_reading.model_dump()
        assert isinstance(data, dict)
        assert "cabin_pressure_psi" in data


class TestSystemHealth:
    def test_out_of_range_rejected(self):
        values = {name: 90.0 for name in SystemHealth.model_fields}
        values["engines"] = 101.0
        with pytest.raises(ValidationError):
            SystemHealth(**values)


class TestPassengerSafety:
    def test_turbulence_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            PassengerSafety(seatbelt_sign=True, turbulence_level=120.0, cabin_pressure_psi=11.0, oxygen_level_pct=21.0)

    def test_equipment_defaults(self):
        cabin = PassengerSafety(seatbelt_sign=False, turbulence_level=10.0, cabin_pressure_psi=11.3, oxygen_level_pct=21.0)
        assert cabin.emergency_equipment.emergency_slides == 8
        assert cabin.evacuation_status.crew_positioned is False


class TestCriticalAlert:
    def test_severity_bounds(self, now):
        with pytest.raises(ValidationError):
            CriticalAlert(
                id="x", type=CriticalAlertType.FIRE, severity=6,
                title="t", message="m", timestamp=now,
                time_to_action=10, confidence=90.0,
            )

    def test_defaults(self, now):
        alert = CriticalAlert(
            id="x", type="fire", severity=3,
            title="t", message="m", timestamp=now,
            time_to_action=10, confidence=90.0,
        )
        assert alert.type is CriticalAlertType.FIRE
        assert alert.acknowledged is False
        assert alert.emergency_procedures == []

    def test_procedure_step_starts_at_one(self):
        with pytest.raises(ValidationError):
            EmergencyProcedure(step=0, action="noop", time_limit=5)


class TestLifeSavingSystem:
    def test_baseline_values(self):
        systems = LifeSavingSystem()
        assert systems.oxygen_system.oxygen_pressure == 1850.0
        assert systems.oxygen_system.estimated_duration_min == 22.0
        assert systems.oxygen_system.passenger_masks is False
        assert systems.fire_suppression_system.engine_fire_bottles == 2
        assert systems.communication_systems.squawk_code == "1200"
        assert systems.communication_systems.atc_contact is True

    def test_squawk_must_be_octal(self):
        with pytest.raises(ValidationError):
            CommunicationSystems(squawk_code="7800")
