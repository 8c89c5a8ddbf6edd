# api/routers/daynight.py

"""
Day/Night status endpoint for the Geckowatch API.
"""

from fastapi import APIRouter, Depends

from api.config import get_settings
from api.dependencies import get_condition_service, get_time_provider
from api.models.schemas import DayNightStatusResponse
from api.models.enums import DayNightMode
from domain.evaluation import DAY_START_HOUR, NIGHT_START_HOUR
from domain.models import Period
from domain.ports import TimeProvider
from domain.services import ConditionMonitoringService

router = APIRouter(prefix="/daynight", tags=["Day/Night"])


@router.get("/status", response_model=DayNightStatusResponse)
def get_daynight_status(
    service: ConditionMonitoringService = Depends(get_condition_service),
    time_provider: TimeProvider = Depends(get_time_provider)
):
    """Which thresholds (day or night) apply right now."""
    now = time_provider.now()
    period = service.get_period(now)

    return DayNightStatusResponse(
        mode=DayNightMode(period.value),
        is_day_mode=period == Period.DAY,
        current_time=now,
        local_time=service.to_local(now),
        timezone=get_settings().local_timezone,
        day_starts_at=f"{DAY_START_HOUR:02d}:00",
        night_starts_at=f"{NIGHT_START_HOUR:02d}:00"
    )
