"""
app/models/forecast.py

Värdeobjekt för prognosmotorn. Alla är request-scoped och skapas per anrop;
inget av dem sparas av motorn själv.

JSON-nycklarna följer dashboardens kontrakt (camelCase). Där Python-namnet
skiljer sig från det dashboarden läser sätts alias explicit.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ── Enums ─────────────────────────────────────────────────────────────────────

class WeatherCondition(str, Enum):
    SUNNY  = "sunny"
    CLOUDY = "cloudy"
    RAINY  = "rainy"
    STORMY = "stormy"


class TimeOfDay(str, Enum):
    MORNING = "morning"
    NOON    = "noon"
    EVENING = "evening"
    NIGHT   = "night"


class OutageScenario(str, Enum):
    NORMAL       = "normal"
    MINOR_OUTAGE = "minor_outage"
    MAJOR_OUTAGE = "major_outage"
    GRID_FAILURE = "grid_failure"


class ForecastType(str, Enum):
    SOLAR  = "solar"
    DEMAND = "demand"
    PRICE  = "price"


class Trend(str, Enum):
    UP     = "up"
    DOWN   = "down"
    STABLE = "stable"


class GridStatus(str, Enum):
    OPTIMAL  = "optimal"
    WARNING  = "warning"
    CRITICAL = "critical"


class CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ── Mellanvärden ──────────────────────────────────────────────────────────────

class BaseValues(CamelModel):
    solar: float     # kW
    demand: float    # kW
    price: float     # kr/kWh


class WeatherAdapted(CamelModel):
    solar: float
    demand: float


class GridData(CamelModel):
    current_load: float
    solar_generation: float
    weather_condition: WeatherCondition
    outage_scenario: OutageScenario


class OutageResponse(GridData):
    battery_usage: float          # 0-1
    load_shedding: float          # 0-1, andel av lasten som kopplas bort
    emergency_mode: bool
    adapted_load: float
    estimated_recovery_minutes: int = Field(alias="estimatedRecoveryTime")


# ── Output ────────────────────────────────────────────────────────────────────

class ForecastItem(CamelModel):
    type: ForecastType
    current: float
    predicted: float
    confidence_percent: float = Field(alias="confidence")
    timeframe_label: str = Field(alias="timeframe")
    trend: Trend


class ForecastBundle(CamelModel):
    forecasts: List[ForecastItem]
    weather_condition: WeatherCondition
    model_accuracy_percent: int = Field(alias="modelAccuracy")
    outage_status: OutageResponse


class OutageInfo(CamelModel):
    scenario: OutageScenario
    estimated_recovery: str    # "120 minutes"
    battery_usage: str         # "100%"


class GridHealthView(CamelModel):
    feeder_utilization_percent: float = Field(alias="feederUtilization")
    feeder_limit: float
    current_load: float
    status: GridStatus
    peak_prediction: float
    time_to_next_peak: str
    # Sätts bara i nödläge (major_outage / grid_failure)
    outage_info: Optional[OutageInfo] = None
    timestamp: datetime
