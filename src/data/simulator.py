"""
src/data/simulator.py
─────────────────────
Synthetic flight telemetry generator.

Generates:
  - One SensorReading per tick from the normal or emergency profile
  - A bounded FIFO history of the most recent readings (30 by default)
  - A backfilled history of normal readings for a warm dashboard start

Design:
  - Each field is base ± uniform jitter, independently drawn per tick
  - The random source is an injectable numpy Generator for reproducible tests
  - Physically impossible values are clamped (temperature and oil pressure floors)
"""
from __future__ import annotations

import logging
from collections import deque
from datetime import UTC, datetime, timedelta

import numpy as np
import pandas as pd

from config.settings import settings
from src.data.models import FlightMode, SensorReading

logger = logging.getLogger(__name__)

# ── Operating profiles ────────────────────────────────────────────────────────

BASELINES: dict[FlightMode, dict[str, float]] = {
    FlightMode.NORMAL: {
        "engine_temp_f": 420.0,
        "vibration_level": 3.2,
        "oil_pressure_psi": 45.0,
        "fuel_flow_pph": 2_800.0,
        "hydraulic_pressure_psi": 3_000.0,
        "electrical_load_pct": 85.0,
        "g_force": 1.0,
        "cabin_pressure_psi": 11.3,
        "wing_stress_pct": 15.0,
        "fuel_quantity_pct": 85.0,
        "engine_rpm": 2_400.0,
        "airspeed_kts": 520.0,
        "altitude_ft": 35_000.0,
    },
    # Engine #1 failure combined with rapid decompression
    FlightMode.EMERGENCY: {
        "engine_temp_f": 520.0,
        "vibration_level": 9.2,
        "oil_pressure_psi": 28.0,
        "fuel_flow_pph": 2_200.0,
        "hydraulic_pressure_psi": 2_400.0,
        "electrical_load_pct": 98.0,
        "g_force": 1.4,
        "cabin_pressure_psi": 8.2,
        "wing_stress_pct": 28.0,
        "fuel_quantity_pct": 65.0,
        "engine_rpm": 1_800.0,
        "airspeed_kts": 480.0,
        "altitude_ft": 34_500.0,
    },
}

# Jitter half-widths: value = base + U(-j, +j)
JITTER: dict[FlightMode, dict[str, float]] = {
    FlightMode.NORMAL: {
        "engine_temp_f": 7.5,
        "vibration_level": 0.25,
        "oil_pressure_psi": 1.5,
        "fuel_flow_pph": 50.0,
        "hydraulic_pressure_psi": 25.0,
        "electrical_load_pct": 2.5,
        "g_force": 0.05,
        "cabin_pressure_psi": 0.1,
        "wing_stress_pct": 1.0,
        "fuel_quantity_pct": 1.0,
        "engine_rpm": 25.0,
        "airspeed_kts": 5.0,
        "altitude_ft": 50.0,
    },
    FlightMode.EMERGENCY: {
        "engine_temp_f": 15.0,
        "vibration_level": 0.5,
        "oil_pressure_psi": 2.5,
        "fuel_flow_pph": 100.0,
        "hydraulic_pressure_psi": 100.0,
        "electrical_load_pct": 2.5,
        "g_force": 0.15,
        "cabin_pressure_psi": 0.25,
        "wing_stress_pct": 2.5,
        "fuel_quantity_pct": 2.5,
        "engine_rpm": 100.0,
        "airspeed_kts": 10.0,
        "altitude_ft": 250.0,
    },
}

# Backfilled history is noisier than live normal ticks
SEED_JITTER: dict[str, float] = {
    **JITTER[FlightMode.NORMAL],
    "engine_temp_f": 10.0,
    "vibration_level": 0.4,
    "oil_pressure_psi": 2.5,
}

# (floor, ceiling) per field; None = unbounded
CLAMPS: dict[str, tuple[float | None, float | None]] = {
    "engine_temp_f": (200.0, None),
    "vibration_level": (0.0, None),
    "oil_pressure_psi": (20.0, None),
    "fuel_flow_pph": (0.0, None),
    "hydraulic_pressure_psi": (0.0, None),
    "electrical_load_pct": (0.0, 100.0),
    "g_force": (None, None),
    "cabin_pressure_psi": (0.0, None),
    "wing_stress_pct": (0.0, 100.0),
    "fuel_quantity_pct": (0.0, 100.0),
    "engine_rpm": (0.0, None),
    "airspeed_kts": (0.0, None),
    "altitude_ft": (0.0, None),
}

TICK_SECONDS = 2.0


def _jittered_values(
    base: dict[str, float],
    jitter: dict[str, float],
    rng: np.random.Generator,
) -> dict[str, float]:
    values: dict[str, float] = {}
    for field, centre in base.items():
        half = jitter[field]
        raw = centre + rng.uniform(-half, half)
        lo, hi = CLAMPS[field]
        if lo is not None:
            raw = max(lo, raw)
        if hi is not None:
            raw = min(hi, raw)
        values[field] = float(raw)
    return values


class TelemetryGenerator:
    """
    Produces one SensorReading per tick and keeps a bounded history.

    Args:
        rng: Random source; a fresh unseeded generator when omitted
        history_size: Maximum readings retained (oldest evicted first)
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        history_size: int = settings.HISTORY_SIZE,
    ) -> None:
        if history_size < 1:
            raise ValueError(f"history_size must be positive, got {history_size}")
        self._rng = rng if rng is not None else np.random.default_rng(settings.SIMULATION_SEED)
        self._history: deque[SensorReading] = deque(maxlen=history_size)

    @property
    def history_size(self) -> int:
        return self._history.maxlen  # type: ignore[return-value]

    @property
    def history(self) -> tuple[SensorReading, ...]:
        return tuple(self._history)

    @property
    def latest(self) -> SensorReading | None:
        return self._history[-1] if self._history else None

    def generate(self, mode: FlightMode, now: datetime | None = None) -> SensorReading:
        """Build a reading without touching the history."""
        mode = FlightMode(mode)
        values = _jittered_values(BASELINES[mode], JITTER[mode], self._rng)
        return SensorReading(timestamp=now or datetime.now(tz=UTC), **values)

    def tick(self, mode: FlightMode, now: datetime | None = None) -> SensorReading:
        """Generate one reading and append it, evicting the oldest at capacity."""
        reading = self.generate(mode, now)
        self._history.append(reading)
        return reading

    def seed_history(self, now: datetime | None = None) -> None:
        """Backfill the history with normal readings spaced one tick apart."""
        end = now or datetime.now(tz=UTC)
        size = self.history_size
        self._history.clear()
        for i in range(size - 1, -1, -1):
            values = _jittered_values(BASELINES[FlightMode.NORMAL], SEED_JITTER, self._rng)
            ts = end - timedelta(seconds=i * TICK_SECONDS)
            self._history.append(SensorReading(timestamp=ts, **values))
        logger.debug("Seeded telemetry history with %d readings", size)

    def clear(self) -> None:
        self._history.clear()


def to_dataframe(readings: list[SensorReading] | tuple[SensorReading, ...]) -> pd.DataFrame:
    """Convert a sequence of SensorReadings to a pandas DataFrame."""
    return pd.DataFrame([r.model_dump() for r in readings])
