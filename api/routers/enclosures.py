# api/routers/enclosures.py

"""
Enclosure endpoints for the Geckowatch API: current conditions,
reading history and chart series.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import (
    get_condition_service,
    get_enclosure_repository,
    get_history_service
)
from api.models.enums import DayNightMode, Metric, Severity, TimeWindow
from api.models.schemas import (
    ChartResponse,
    ChartSeriesResponse,
    ChartsResponse,
    CurrentConditionsResponse,
    EnclosureResponse,
    EvaluationResponse,
    ReadingResponse,
    ReadingsListResponse
)
from domain import models
from domain.ports import EnclosureRepository
from domain.services import ConditionMonitoringService, ReadingHistoryService

router = APIRouter(prefix="/enclosures", tags=["Enclosures"])


@router.get("", response_model=list[EnclosureResponse])
def list_enclosures(enclosure_repo: EnclosureRepository = Depends(get_enclosure_repository)):
    """List all enclosures."""
    return [_enclosure_to_response(e) for e in enclosure_repo.list_enclosures()]


@router.get("/{enclosure_id}", response_model=EnclosureResponse)
def get_enclosure(
    enclosure_id: str,
    enclosure_repo: EnclosureRepository = Depends(get_enclosure_repository)
):
    """Get a specific enclosure."""
    enclosure = enclosure_repo.get_enclosure(enclosure_id)
    if enclosure is None:
        raise HTTPException(status_code=404, detail="Enclosure not found")
    return _enclosure_to_response(enclosure)


@router.get("/{enclosure_id}/conditions", response_model=CurrentConditionsResponse)
def get_current_conditions(
    enclosure_id: str,
    at: Optional[datetime] = Query(default=None, description="Evaluation time, defaults to now"),
    service: ConditionMonitoringService = Depends(get_condition_service)
):
    """Latest reading classified against the species' optimal ranges."""
    conditions = service.get_current_conditions(enclosure_id, at)
    return CurrentConditionsResponse(
        enclosure_id=conditions.enclosure_id,
        species=conditions.species,
        period=DayNightMode(conditions.period.value),
        evaluated_at=conditions.evaluated_at,
        reading_timestamp=conditions.reading_timestamp,
        humidity=_evaluation_to_response(conditions.humidity),
        air_temperature=_evaluation_to_response(conditions.air_temperature),
        surface_temperature=_evaluation_to_response(conditions.surface_temperature)
    )


@router.get("/{enclosure_id}/readings", response_model=ReadingsListResponse)
def get_readings(
    enclosure_id: str,
    window: TimeWindow = Query(default=TimeWindow.LAST_24_HOURS),
    service: ReadingHistoryService = Depends(get_history_service)
):
    """Raw readings inside the time window, oldest first."""
    readings = service.get_readings(enclosure_id, window.value)
    return ReadingsListResponse(
        enclosure_id=enclosure_id,
        window=window,
        readings=[
            ReadingResponse(
                reading_id=r.reading_id,
                timestamp=r.timestamp,
                humidity=r.value_for(models.Metric.HUMIDITY),
                air_temperature=r.value_for(models.Metric.AIR_TEMPERATURE),
                surface_temperature=r.value_for(models.Metric.SURFACE_TEMPERATURE)
            )
            for r in readings
        ],
        count=len(readings)
    )


@router.get("/{enclosure_id}/chart", response_model=ChartResponse)
def get_chart(
    enclosure_id: str,
    metric: Metric = Query(...),
    window: TimeWindow = Query(default=TimeWindow.LAST_24_HOURS),
    service: ReadingHistoryService = Depends(get_history_service)
):
    """Chart series (at most 24 points) for one metric."""
    series = service.get_chart(enclosure_id, window.value, models.Metric(metric.value))
    return ChartResponse(
        enclosure_id=enclosure_id,
        window=window,
        metric=metric,
        labels=series.labels,
        values=series.values
    )


@router.get("/{enclosure_id}/charts", response_model=ChartsResponse)
def get_charts(
    enclosure_id: str,
    window: TimeWindow = Query(default=TimeWindow.LAST_24_HOURS),
    service: ReadingHistoryService = Depends(get_history_service)
):
    """Chart series for every metric."""
    charts = service.get_charts(enclosure_id, window.value)
    return ChartsResponse(
        enclosure_id=enclosure_id,
        window=window,
        series=[
            ChartSeriesResponse(
                metric=Metric(metric.value),
                labels=series.labels,
                values=series.values
            )
            for metric, series in charts.items()
        ]
    )


def _enclosure_to_response(enclosure: models.Enclosure) -> EnclosureResponse:
    return EnclosureResponse(
        enclosure_id=enclosure.enclosure_id,
        name=enclosure.name,
        species=enclosure.species,
        description=enclosure.description,
        image_url=enclosure.image_url,
        created_at=enclosure.created_at
    )


def _evaluation_to_response(result: models.EvaluationResult) -> EvaluationResponse:
    return EvaluationResponse(
        value=result.display_value,
        severity=Severity(result.severity.value),
        color=result.color
    )
