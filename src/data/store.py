"""
src/data/store.py
─────────────────
In-memory alert lifecycle store.

Provides:
  - merge()                   : Open derived alerts whose type is not already open
  - acknowledge_critical()    : Mark a critical alert acknowledged (stays visible)
  - acknowledge_crew()        : Dismiss a crew alert entirely
  - activate_system()         : Partial update of the life-saving systems record
  - complete_procedure()      : Tick off one checklist step of a critical alert
  - apply_emergency_posture() : Oxygen draw-down + 7700 squawk on emergency ticks
  - reset_to_normal()         : Drop all alerts and restore baseline systems

Lifecycles:
  critical alert  absent → open → acknowledged   (reset → absent)
  crew alert      absent → open → absent         (dismissed types stay dismissed until reset)

Unknown ids and unknown activation commands are no-ops, never errors.
Every query returns deep copies; callers cannot mutate store state.

Thread safety: all public methods serialize on an instance-level RLock.
"""
from __future__ import annotations

import logging
import threading

from config.alerts import EMERGENCY_UI_MIN_SEVERITY, CriticalAlertType, LifeSavingCommand
from src.data.models import CrewAlert, CriticalAlert, LifeSavingSystem

logger = logging.getLogger(__name__)

EMERGENCY_OXYGEN_PRESSURE = 1650.0
EMERGENCY_OXYGEN_DURATION_MIN = 18.0
EMERGENCY_SQUAWK = "7700"


def baseline_life_saving_systems() -> LifeSavingSystem:
    """The documented normal-flight record (masks stowed, squawk 1200)."""
    return LifeSavingSystem()


class AlertLifecycleStore:

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._critical: list[CriticalAlert] = []
        self._crew: list[CrewAlert] = []
        self._dismissed_crew_sources: set[CriticalAlertType] = set()
        self._systems = baseline_life_saving_systems()

    # ── Merge / reset ─────────────────────────────────────────────────────────

    def merge(
        self,
        critical_alerts: list[CriticalAlert],
        crew_alerts: list[CrewAlert],
    ) -> list[CriticalAlert]:
        """
        Open derived alerts whose type is not already open.

        Alerts already open keep their id, acknowledgement and checklist
        progress. Returns the critical alerts that were newly opened.
        """
        opened: list[CriticalAlert] = []
        with self._lock:
            open_types = {a.type for a in self._critical}
            for alert in critical_alerts:
                if alert.type in open_types:
                    continue
                self._critical.append(alert.model_copy(deep=True))
                open_types.add(alert.type)
                opened.append(alert)
                logger.info("Critical alert opened: %s (severity %d)", alert.type.value, alert.severity)

            crew_sources = {c.source for c in self._crew}
            for crew in crew_alerts:
                if crew.source is not None and (
                    crew.source in crew_sources or crew.source in self._dismissed_crew_sources
                ):
                    continue
                if crew.source is None and any(c.id == crew.id for c in self._crew):
                    continue
                self._crew.append(crew.model_copy(deep=True))
                crew_sources.add(crew.source)
        return opened

    def reset_to_normal(self) -> None:
        with self._lock:
            if self._critical or self._crew:
                logger.info(
                    "Clearing %d critical and %d crew alerts",
                    len(self._critical),
                    len(self._crew),
                )
            self._critical = []
            self._crew = []
            self._dismissed_crew_sources.clear()
            self._systems = baseline_life_saving_systems()

    def apply_emergency_posture(self) -> None:
        """Oxygen draw-down and emergency transponder code; mask flags untouched."""
        with self._lock:
            oxygen = self._systems.oxygen_system
            oxygen.oxygen_pressure = EMERGENCY_OXYGEN_PRESSURE
            oxygen.estimated_duration_min = EMERGENCY_OXYGEN_DURATION_MIN
            comms = self._systems.communication_systems
            comms.squawk_code = EMERGENCY_SQUAWK
            comms.emergency_frequency = True

    # ── Mutations ─────────────────────────────────────────────────────────────

    def acknowledge_critical(self, alert_id: str) -> bool:
        """Returns True if an alert with this id exists (acknowledged or not)."""
        with self._lock:
            for alert in self._critical:
                if alert.id == alert_id:
                    alert.acknowledged = True
                    return True
        logger.debug("acknowledge_critical: unknown alert id %s", alert_id)
        return False

    def acknowledge_crew(self, alert_id: str) -> bool:
        """Returns True if a crew alert was removed."""
        with self._lock:
            for i, crew in enumerate(self._crew):
                if crew.id == alert_id:
                    del self._crew[i]
                    if crew.source is not None:
                        self._dismissed_crew_sources.add(crew.source)
                    return True
        logger.debug("acknowledge_crew: unknown crew alert id %s", alert_id)
        return False

    def activate_system(self, command: LifeSavingCommand | str) -> bool:
        """
        Apply a named partial update to the life-saving systems record.

        Unrecognised names are ignored (returns False) so newer clients can
        send commands this build does not know yet.
        """
        try:
            command = LifeSavingCommand(command)
        except ValueError:
            logger.debug("activate_system: ignoring unknown command %r", command)
            return False

        with self._lock:
            if command is LifeSavingCommand.OXYGEN_MASKS:
                oxygen = self._systems.oxygen_system
                oxygen.passenger_masks = True
                oxygen.crew_masks = True
            elif command is LifeSavingCommand.EVACUATION_PREP:
                evac = self._systems.emergency_evacuation
                evac.slides_armed = True
                evac.emergency_lighting = True
                evac.exit_path_illumination = True
                evac.crew_stations = True
            elif command is LifeSavingCommand.MAYDAY:
                comms = self._systems.communication_systems
                comms.mayday_transmitted = True
                comms.emergency_frequency = True
        logger.info("Life-saving system activated: %s", command.value)
        return True

    def complete_procedure(self, alert_id: str, step: int) -> bool:
        """Returns True if the step exists on the alert."""
        with self._lock:
            for alert in self._critical:
                if alert.id != alert_id:
                    continue
                for procedure in alert.emergency_procedures:
                    if procedure.step == step:
                        procedure.completed = True
                        return True
        logger.debug("complete_procedure: no step %s on alert %s", step, alert_id)
        return False

    # ── Queries ───────────────────────────────────────────────────────────────

    def critical_alerts(self) -> list[CriticalAlert]:
        with self._lock:
            return [a.model_copy(deep=True) for a in self._critical]

    def crew_alerts(self) -> list[CrewAlert]:
        with self._lock:
            return [c.model_copy(deep=True) for c in self._crew]

    def get_critical(self, alert_id: str) -> CriticalAlert | None:
        with self._lock:
            for alert in self._critical:
                if alert.id == alert_id:
                    return alert.model_copy(deep=True)
        return None

    def get_crew(self, alert_id: str) -> CrewAlert | None:
        with self._lock:
            for crew in self._crew:
                if crew.id == alert_id:
                    return crew.model_copy(deep=True)
        return None

    def unacknowledged_critical(self, min_severity: int = EMERGENCY_UI_MIN_SEVERITY) -> list[CriticalAlert]:
        """Open, unacknowledged alerts at or above min_severity; drives the emergency overlay."""
        with self._lock:
            return [
                a.model_copy(deep=True)
                for a in self._critical
                if not a.acknowledged and a.severity >= min_severity
            ]

    def life_saving_systems(self) -> LifeSavingSystem:
        with self._lock:
            return self._systems.model_copy(deep=True)
