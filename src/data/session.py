"""
src/data/session.py
───────────────────
Simulation session: the explicit state owned by the scheduler.

One FlightSimulation holds the mode flag, telemetry generator, alert store
and the latest derived analyses. step() runs one cooperative tick:

  1. Generator tick under the current mode
  2. Health score and cabin passenger-safety record for the mode
  3. Alert derivation for the new reading
  4. Store merge + emergency posture (emergency) or reset (normal)
  5. Safety analysis and maintenance insights
  6. Snapshot

Nothing here sleeps or spawns threads; the Dash interval (or a test) calls
step() at whatever cadence it likes.
"""
from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any

import numpy as np

from config.settings import settings
from config.thresholds import DEFAULT_THRESHOLDS, TelemetryThresholds
from src.analytics.alert_deriver import derive, predictive_analysis
from src.analytics.health_index import passenger_safety, score
from src.analytics.safety_analysis import analyze_flight_safety, generate_maintenance_insights
from src.data.models import (
    FlightMode,
    MaintenanceInsights,
    PassengerSafety,
    PredictiveAnalysis,
    SafetyAnalysis,
    SimulationSnapshot,
    SystemHealth,
)
from src.data.simulator import TelemetryGenerator
from src.data.store import AlertLifecycleStore
from src.data.weather import WeatherConditions, fallback_weather, parse_weather_payload

logger = logging.getLogger(__name__)


class FlightSimulation:
    """
    Args:
        rng: Random source shared by the generator and the safety analysis
        history_size: Telemetry ring-buffer capacity
        thresholds: Limits used by the alert deriver
        seed_history: Backfill the history with normal readings on creation
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        history_size: int = settings.HISTORY_SIZE,
        thresholds: TelemetryThresholds = DEFAULT_THRESHOLDS,
        seed_history: bool = False,
    ) -> None:
        self._lock = threading.RLock()
        self._rng = rng if rng is not None else np.random.default_rng(settings.SIMULATION_SEED)
        self._thresholds = thresholds
        self._mode = FlightMode.NORMAL
        self._tick = 0

        self.generator = TelemetryGenerator(rng=self._rng, history_size=history_size)
        self.store = AlertLifecycleStore()

        self._health: SystemHealth = score(self._mode)
        self._passenger: PassengerSafety = passenger_safety(self._mode)
        self._predictive: PredictiveAnalysis = predictive_analysis(self._mode)
        self._safety: SafetyAnalysis | None = None
        self._insights: MaintenanceInsights | None = None
        self._weather: WeatherConditions = fallback_weather(self._rng)

        if seed_history:
            self.generator.seed_history()

    # ── Mode ──────────────────────────────────────────────────────────────────

    @property
    def mode(self) -> FlightMode:
        return self._mode

    @property
    def thresholds(self) -> TelemetryThresholds:
        """Limits the deriver evaluates against; the dashboard colours use the same."""
        return self._thresholds

    def set_mode(self, mode: FlightMode | str) -> None:
        """Takes effect on the next step()."""
        mode = FlightMode(mode)
        with self._lock:
            if mode is not self._mode:
                logger.info("Flight mode %s → %s", self._mode.value, mode.value)
            self._mode = mode

    def toggle_mode(self) -> FlightMode:
        with self._lock:
            target = FlightMode.NORMAL if self._mode is FlightMode.EMERGENCY else FlightMode.EMERGENCY
            self.set_mode(target)
            return target

    # ── Tick ──────────────────────────────────────────────────────────────────

    def step(self, now: datetime | None = None) -> SimulationSnapshot:
        with self._lock:
            mode = self._mode
            reading = self.generator.tick(mode, now)
            self._health = score(mode)
            self._passenger = passenger_safety(mode)

            result = derive(reading, mode, self.store.critical_alerts(), self._thresholds)
            if mode is FlightMode.EMERGENCY:
                self.store.merge(result.critical_alerts, result.crew_alerts)
                self.store.apply_emergency_posture()
            else:
                self.store.reset_to_normal()

            self._predictive = result.predictive or predictive_analysis(mode)
            self._safety = analyze_flight_safety(reading, self._rng, now=reading.timestamp)
            self._insights = generate_maintenance_insights(self.generator.history)
            self._tick += 1
            return self.snapshot()

    def update_weather(self, payload: dict[str, Any] | None) -> WeatherConditions:
        """Feed a provider payload; malformed data is replaced by fallback conditions."""
        weather = parse_weather_payload(payload, self._rng)
        with self._lock:
            self._weather = weather
        return weather

    def snapshot(self) -> SimulationSnapshot:
        with self._lock:
            history = list(self.generator.history)
            return SimulationSnapshot(
                mode=self._mode,
                tick=self._tick,
                history=history,
                current=history[-1] if history else None,
                system_health=self._health.model_copy(),
                passenger_safety=self._passenger.model_copy(deep=True),
                critical_alerts=self.store.critical_alerts(),
                crew_alerts=self.store.crew_alerts(),
                life_saving_systems=self.store.life_saving_systems(),
                predictive=self._predictive.model_copy(deep=True),
                safety=self._safety.model_copy(deep=True) if self._safety else None,
                insights=self._insights.model_copy(deep=True) if self._insights else None,
                weather=self._weather.model_copy(deep=True),
            )

    # ── Crew actions ──────────────────────────────────────────────────────────

    def acknowledge_critical(self, alert_id: str) -> bool:
        return self.store.acknowledge_critical(alert_id)

    def acknowledge_crew(self, alert_id: str) -> bool:
        return self.store.acknowledge_crew(alert_id)

    def activate_system(self, command: str) -> bool:
        return self.store.activate_system(command)

    def complete_procedure(self, alert_id: str, step: int) -> bool:
        return self.store.complete_procedure(alert_id, step)
