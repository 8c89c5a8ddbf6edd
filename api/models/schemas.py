# api/models/schemas.py

"""
Pydantic schemas for request/response validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from api.models.enums import (
    Metric,
    Severity,
    DayNightMode,
    TimeWindow
)


# ============================================================
# Species Schemas
# ============================================================

class ConditionRangeResponse(BaseModel):
    min: float
    max: float
    ideal: float


class TemperatureRangesResponse(BaseModel):
    day: ConditionRangeResponse
    night: ConditionRangeResponse
    basking: Optional[ConditionRangeResponse] = None


class HumidityRangesResponse(BaseModel):
    day: ConditionRangeResponse
    night: ConditionRangeResponse


class SpeciesProfileResponse(BaseModel):
    species: str
    temperature: TemperatureRangesResponse
    humidity: HumidityRangesResponse
    description: Optional[str] = None


# ============================================================
# Enclosure Schemas
# ============================================================

class EnclosureResponse(BaseModel):
    enclosure_id: str
    name: str
    species: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None


# ============================================================
# Condition Schemas
# ============================================================

class EvaluationResponse(BaseModel):
    value: str  # "27.5°C", "45.0%" or "N/A"
    severity: Severity
    color: str


class CurrentConditionsResponse(BaseModel):
    enclosure_id: str
    species: Optional[str] = None
    period: DayNightMode
    evaluated_at: datetime
    reading_timestamp: Optional[datetime] = None
    humidity: EvaluationResponse
    air_temperature: EvaluationResponse
    surface_temperature: EvaluationResponse


# ============================================================
# Reading / Chart Schemas
# ============================================================

class ReadingResponse(BaseModel):
    reading_id: str
    timestamp: datetime
    humidity: Optional[float] = None
    air_temperature: Optional[float] = None
    surface_temperature: Optional[float] = None


class ReadingsListResponse(BaseModel):
    enclosure_id: str
    window: TimeWindow
    readings: list[ReadingResponse]
    count: int


class ChartSeriesResponse(BaseModel):
    """Index-aligned labels and values; empty lists mean no data."""
    metric: Metric
    labels: list[str]
    values: list[float]


class ChartResponse(ChartSeriesResponse):
    enclosure_id: str
    window: TimeWindow


class ChartsResponse(BaseModel):
    enclosure_id: str
    window: TimeWindow
    series: list[ChartSeriesResponse]


# ============================================================
# Day/Night Schemas
# ============================================================

class DayNightStatusResponse(BaseModel):
    mode: DayNightMode
    is_day_mode: bool
    current_time: datetime
    local_time: datetime
    timezone: str
    day_starts_at: str
    night_starts_at: str
