"""
src/data/models.py
──────────────────
Pydantic v2 data models for sensor readings, alerts, life-saving systems
and analysis results.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config.alerts import CriticalAlertType, CrewPriority, RiskLevel
from src.data.weather import WeatherConditions


class FlightMode(str, Enum):
    NORMAL = "normal"
    EMERGENCY = "emergency"


class SensorReading(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    engine_temp_f: float = Field(ge=0.0)
    vibration_level: float = Field(ge=0.0)
    oil_pressure_psi: float = Field(ge=0.0)
    fuel_flow_pph: float = Field(ge=0.0)
    fuel_quantity_pct: float = Field(ge=0.0, le=100.0)
    hydraulic_pressure_psi: float = Field(ge=0.0)
    electrical_load_pct: float = Field(ge=0.0, le=100.0)
    g_force: float
    cabin_pressure_psi: float = Field(ge=0.0)
    wing_stress_pct: float = Field(ge=0.0, le=100.0)
    engine_rpm: float = Field(ge=0.0)
    airspeed_kts: float = Field(ge=0.0)
    altitude_ft: float = Field(ge=0.0)


class SystemHealth(BaseModel):
    overall: float = Field(ge=0.0, le=100.0)
    engines: float = Field(ge=0.0, le=100.0)
    hydraulics: float = Field(ge=0.0, le=100.0)
    electrical: float = Field(ge=0.0, le=100.0)
    avionics: float = Field(ge=0.0, le=100.0)
    flight_controls: float = Field(ge=0.0, le=100.0)
    navigation: float = Field(ge=0.0, le=100.0)
    communication: float = Field(ge=0.0, le=100.0)
    fuel_system: float = Field(ge=0.0, le=100.0)
    landing_gear: float = Field(ge=0.0, le=100.0)
    pressurization: float = Field(ge=0.0, le=100.0)
    fire_detection: float = Field(ge=0.0, le=100.0)


# ── Alerts ────────────────────────────────────────────────────────────────────

class EmergencyProcedure(BaseModel):
    step: int = Field(ge=1)
    action: str
    time_limit: int = Field(ge=0)  # seconds to complete
    completed: bool = False
    critical: bool = False         # life-threatening if skipped


class NearestAirport(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    distance_nm: float = Field(ge=0.0)
    bearing_deg: float = Field(ge=0.0, lt=360.0)
    runway_length_ft: int = Field(ge=0)
    emergency_services: bool
    weather_conditions: str
    estimated_arrival_min: int = Field(ge=0)


class CriticalAlert(BaseModel):
    id: str
    type: CriticalAlertType
    severity: int = Field(ge=1, le=5)  # 5 = immediate life threat
    title: str
    message: str
    timestamp: datetime
    acknowledged: bool = False
    time_to_action: int = Field(ge=0)  # seconds, display only
    confidence: float = Field(ge=0.0, le=100.0)
    emergency_procedures: list[EmergencyProcedure] = Field(default_factory=list)
    nearest_airports: list[NearestAirport] = Field(default_factory=list)
    evacuation_required: bool = False
    oxygen_masks_deployed: bool = False


class CrewAlert(BaseModel):
    id: str
    priority: CrewPriority
    message: str
    voice_alert: bool
    visual_cue: str
    timestamp: datetime
    procedure_required: bool = False
    time_limit: int | None = None
    source: CriticalAlertType | None = None


# ── Life-saving systems ───────────────────────────────────────────────────────

class OxygenSystem(BaseModel):
    passenger_masks: bool = False
    crew_masks: bool = False
    oxygen_pressure: float = 1850.0
    estimated_duration_min: float = 22.0


class FireSuppressionSystem(BaseModel):
    engine_fire_bottles: int = 2
    cargo_fire_suppression: bool = True
    lavatory_fire_detection: bool = True


class EmergencyEvacuation(BaseModel):
    slides_armed: bool = False
    emergency_lighting: bool = False
    exit_path_illumination: bool = False
    crew_stations: bool = False


class CommunicationSystems(BaseModel):
    mayday_transmitted: bool = False
    squawk_code: str = Field(default="1200", pattern=r"^[0-7]{4}$")
    atc_contact: bool = True
    emergency_frequency: bool = False


class LifeSavingSystem(BaseModel):
    oxygen_system: OxygenSystem = Field(default_factory=OxygenSystem)
    fire_suppression_system: FireSuppressionSystem = Field(default_factory=FireSuppressionSystem)
    emergency_evacuation: EmergencyEvacuation = Field(default_factory=EmergencyEvacuation)
    communication_systems: CommunicationSystems = Field(default_factory=CommunicationSystems)


# ── Passenger safety ──────────────────────────────────────────────────────────

class EmergencyEquipment(BaseModel):
    lifevests: int = Field(default=180, ge=0)
    oxygen_masks: int = Field(default=200, ge=0)
    emergency_slides: int = Field(default=8, ge=0)


class EvacuationStatus(BaseModel):
    exit_rows_cleared: bool = False
    crew_positioned: bool = False
    passengers_informed: bool = False


class PassengerSafety(BaseModel):
    seatbelt_sign: bool
    turbulence_level: float = Field(ge=0.0, le=100.0)
    cabin_pressure_psi: float = Field(ge=0.0)
    oxygen_level_pct: float = Field(ge=0.0, le=100.0)  # cabin O₂ concentration
    emergency_equipment: EmergencyEquipment = Field(default_factory=EmergencyEquipment)
    evacuation_status: EvacuationStatus = Field(default_factory=EvacuationStatus)


# ── Analysis ──────────────────────────────────────────────────────────────────

class TrendSummary(BaseModel):
    improving: list[str] = Field(default_factory=list)
    degrading: list[str] = Field(default_factory=list)
    stable: list[str] = Field(default_factory=list)


class PredictiveAnalysis(BaseModel):
    risk_score: float = Field(ge=0.0, le=100.0)
    confidence: float = Field(ge=0.0, le=100.0)
    time_to_failure_h: float | None = None
    maintenance_window_h: float = Field(ge=0.0)
    anomalies: list[str] = Field(default_factory=list)
    trends: TrendSummary = Field(default_factory=TrendSummary)


class SafetyAnalysis(BaseModel):
    risk_level: RiskLevel
    risk_score: int = Field(ge=0)
    confidence: float = Field(ge=0.0, le=100.0)
    recommendation: str
    time_to_action: int | None = None  # seconds
    predicted_failure: str | None = None
    risk_factors: list[str] = Field(default_factory=list)
    lives_at_risk: int = 186
    analysis_timestamp: datetime


class MaintenanceInsights(BaseModel):
    trend_analysis: list[str] = Field(default_factory=list)
    maintenance_recommendations: list[str] = Field(default_factory=list)
    risk_projection: str


class SimulationSnapshot(BaseModel):
    mode: FlightMode
    tick: int = Field(ge=0)
    history: list[SensorReading]
    current: SensorReading | None
    system_health: SystemHealth
    passenger_safety: PassengerSafety
    critical_alerts: list[CriticalAlert]
    crew_alerts: list[CrewAlert]
    life_saving_systems: LifeSavingSystem
    predictive: PredictiveAnalysis
    safety: SafetyAnalysis | None = None
    insights: MaintenanceInsights | None = None
    weather: WeatherConditions | None = None
