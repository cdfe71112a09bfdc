"""
tests/conftest.py
─────────────────
Shared pytest fixtures for Flight Safety Monitor test suite.
"""
import os
import pytest
import numpy as np
from datetime import datetime, timezone

os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def normal_reading(now):
    """A cruise reading sitting on the normal profile centre."""
    from src.data.models import SensorReading
    return SensorReading(
        timestamp=now,
        engine_temp_f=420.0,
        vibration_level=3.2,
        oil_pressure_psi=45.0,
        fuel_flow_pph=2_800.0,
        fuel_quantity_pct=85.0,
        hydraulic_pressure_psi=3_000.0,
        electrical_load_pct=85.0,
        g_force=1.0,
        cabin_pressure_psi=11.3,
        wing_stress_pct=15.0,
        engine_rpm=2_400.0,
        airspeed_kts=520.0,
        altitude_ft=35_000.0,
    )


@pytest.fixture
def emergency_reading(now):
    """Engine #1 failure with rapid decompression."""
    from src.data.models import SensorReading
    return SensorReading(
        timestamp=now,
        engine_temp_f=520.0,
        vibration_level=9.2,
        oil_pressure_psi=28.0,
        fuel_flow_pph=2_200.0,
        fuel_quantity_pct=65.0,
        hydraulic_pressure_psi=2_400.0,
        electrical_load_pct=98.0,
        g_force=1.4,
        cabin_pressure_psi=8.2,
        wing_stress_pct=28.0,
        engine_rpm=1_800.0,
        airspeed_kts=480.0,
        altitude_ft=34_500.0,
    )


@pytest.fixture
def low_fuel_reading(normal_reading):
    return normal_reading.model_copy(update={"fuel_quantity_pct": 18.0})


@pytest.fixture
def simulation(rng):
    from src.data.session import FlightSimulation
    return FlightSimulation(rng=rng)


@pytest.fixture
def emergency_store(emergency_reading):
    """A store holding the two alerts of one emergency tick."""
    from src.analytics.alert_deriver import derive
    from src.data.models import FlightMode
    from src.data.store import AlertLifecycleStore

    store = AlertLifecycleStore()
    result = derive(emergency_reading, FlightMode.EMERGENCY)
    store.merge(result.critical_alerts, result.crew_alerts)
    store.apply_emergency_posture()
    return store
