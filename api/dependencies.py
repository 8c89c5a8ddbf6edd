# api/dependencies.py

"""
FastAPI dependencies that build the domain services.

Repositories and the species lookup are created once per process and
shared by every request. Tests swap them out with app.dependency_overrides.
"""

from datetime import tzinfo
from functools import lru_cache
from typing import Optional

from fastapi import Depends

from adapters.memory.repositories import InMemorySpeciesProfileRepository
from adapters.mongodb.repositories import (
    MongoDBEnclosureRepository,
    MongoDBReadingRepository,
    MongoDBSpeciesProfileRepository
)
from adapters.utils.logger import get_logger
from adapters.utils.time_providers import SystemTimeProvider, load_timezone
from api.config import get_settings
from api.database import get_database
from domain.ports import (
    EnclosureRepository,
    ReadingRepository,
    SpeciesProfileRepository,
    TimeProvider
)
from domain.services import ConditionMonitoringService, ReadingHistoryService


@lru_cache()
def get_species_repository() -> SpeciesProfileRepository:
    """Species profiles, loaded once from the configured source."""
    settings = get_settings()
    if settings.species_source == "mongodb":
        return MongoDBSpeciesProfileRepository(get_database())
    return InMemorySpeciesProfileRepository()


@lru_cache()
def get_enclosure_repository() -> EnclosureRepository:
    return MongoDBEnclosureRepository(get_database())


@lru_cache()
def get_reading_repository() -> ReadingRepository:
    return MongoDBReadingRepository(get_database())


def get_time_provider() -> TimeProvider:
    return SystemTimeProvider()


@lru_cache()
def get_local_timezone() -> Optional[tzinfo]:
    return load_timezone(get_settings().local_timezone)


def get_condition_service(
    enclosures: EnclosureRepository = Depends(get_enclosure_repository),
    readings: ReadingRepository = Depends(get_reading_repository),
    species: SpeciesProfileRepository = Depends(get_species_repository),
    time_provider: TimeProvider = Depends(get_time_provider),
    local_tz: Optional[tzinfo] = Depends(get_local_timezone)
) -> ConditionMonitoringService:
    return ConditionMonitoringService(
        enclosure_repository=enclosures,
        reading_repository=readings,
        species_repository=species,
        time_provider=time_provider,
        local_timezone=local_tz,
        logger=get_logger()
    )


def get_history_service(
    enclosures: EnclosureRepository = Depends(get_enclosure_repository),
    readings: ReadingRepository = Depends(get_reading_repository),
    time_provider: TimeProvider = Depends(get_time_provider),
    local_tz: Optional[tzinfo] = Depends(get_local_timezone)
) -> ReadingHistoryService:
    return ReadingHistoryService(
        enclosure_repository=enclosures,
        reading_repository=readings,
        time_provider=time_provider,
        local_timezone=local_tz,
        logger=get_logger()
    )
