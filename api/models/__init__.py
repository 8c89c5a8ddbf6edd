# api/models/__init__.py

from api.models.enums import (
    Metric,
    Severity,
    DayNightMode,
    TimeWindow
)

from api.models.schemas import (
    # Species
    ConditionRangeResponse,
    TemperatureRangesResponse,
    HumidityRangesResponse,
    SpeciesProfileResponse,
    # Enclosures
    EnclosureResponse,
    # Conditions
    EvaluationResponse,
    CurrentConditionsResponse,
    # Readings / charts
    ReadingResponse,
    ReadingsListResponse,
    ChartSeriesResponse,
    ChartResponse,
    ChartsResponse,
    # Day/Night
    DayNightStatusResponse
)
