"""
tests/test_simulator.py
────────────────────────
Tests for the synthetic telemetry generator.
"""

from datetime import timedelta

import numpy as np
import pytest

from src.data.models import FlightMode
from src.data.simulator import (
    BASELINES,
    JITTER,
    SEED_JITTER,
    TICK_SECONDS,
    TelemetryGenerator,
    to_dataframe,
)


def _within(reading, base, jitter, tol=1e-9):
    for field, centre in base.items():
        value = getattr(reading, field)
        assert centre - jitter[field] - tol <= value <= centre + jitter[field] + tol, field


class TestGenerate:
    def test_normal_values_within_envelope(self, rng):
        gen = TelemetryGenerator(rng=rng)
        for _ in range(200):
            _within(gen.generate(FlightMode.NORMAL), BASELINES[FlightMode.NORMAL], JITTER[FlightMode.NORMAL])

    def test_emergency_values_within_envelope(self, rng):
        gen = TelemetryGenerator(rng=rng)
        for _ in range(200):
            _within(gen.generate(FlightMode.EMERGENCY), BASELINES[FlightMode.EMERGENCY], JITTER[FlightMode.EMERGENCY])

    def test_accepts_mode_string(self, rng, now):
        reading = TelemetryGenerator(rng=rng).generate("emergency", now)
        assert reading.engine_temp_f > 500.0
        assert reading.timestamp == now

    def test_generate_does_not_touch_history(self, rng):
        gen = TelemetryGenerator(rng=rng)
        gen.generate(FlightMode.NORMAL)
        assert gen.history == ()
        assert gen.latest is None

    def test_reproducibility(self, now):
        a = TelemetryGenerator(rng=np.random.default_rng(7)).generate(FlightMode.NORMAL, now)
        b = TelemetryGenerator(rng=np.random.default_rng(7)).generate(FlightMode.NORMAL, now)
        assert a == b


class TestHistory:
    def test_tick_appends(self, rng):
        gen = TelemetryGenerator(rng=rng)
        reading = gen.tick(FlightMode.NORMAL)
        assert gen.latest == reading
        assert len(gen.history) == 1

    def test_history_is_bounded(self, rng):
        gen = TelemetryGenerator(rng=rng, history_size=30)
        for _ in range(45):
            gen.tick(FlightMode.NORMAL)
        assert len(gen.history) == 30

    def test_oldest_evicted_first(self, rng, now):
        gen = TelemetryGenerator(rng=rng, history_size=3)
        stamps = [now + timedelta(seconds=i) for i in range(5)]
        for ts in stamps:
            gen.tick(FlightMode.NORMAL, ts)
        assert [r.timestamp for r in gen.history] == stamps[2:]

    def test_invalid_history_size(self, rng):
        with pytest.raises(ValueError):
            TelemetryGenerator(rng=rng, history_size=0)

    def test_clear(self, rng):
        gen = TelemetryGenerator(rng=rng)
        gen.tick(FlightMode.NORMAL)
        gen.clear()
        assert gen.history == ()


class TestSeedHistory:
    def test_fills_to_capacity(self, rng, now):
        gen = TelemetryGenerator(rng=rng, history_size=30)
        gen.seed_history(now)
        assert len(gen.history) == 30

    def test_spaced_one_tick_apart_ending_now(self, rng, now):
        gen = TelemetryGenerator(rng=rng, history_size=30)
        gen.seed_history(now)
        stamps = [r.timestamp for r in gen.history]
        assert stamps == sorted(stamps)
        assert stamps[-1] == now
        assert stamps[-1] - stamps[-2] == timedelta(seconds=TICK_SECONDS)

    def test_seeded_values_are_normal(self, rng, now):
        gen = TelemetryGenerator(rng=rng)
        gen.seed_history(now)
        for reading in gen.history:
            _within(reading, BASELINES[FlightMode.NORMAL], SEED_JITTER)


class TestToDataframe:
    def test_columns_and_length(self, rng):
        gen = TelemetryGenerator(rng=rng)
        for _ in range(5):
            gen.tick(FlightMode.NORMAL)
        df = to_dataframe(gen.history)
        assert len(df) == 5
        assert "timestamp" in df.columns
        assert "altitude_ft" in df.columns

    def test_empty(self):
        assert to_dataframe([]).empty
