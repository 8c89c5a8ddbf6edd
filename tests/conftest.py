from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from pymongo import ASCENDING

from adapters.memory.repositories import (
    InMemoryEnclosureRepository,
    InMemoryReadingRepository,
    InMemorySpeciesProfileRepository
)
from adapters.utils.time_providers import FixedTimeProvider
from domain.exceptions import ReadingStoreError
from domain.models import (
    ConditionRange,
    Enclosure,
    HumidityProfile,
    Reading,
    SpeciesProfile,
    TemperatureProfile
)
from domain.ports import Logger, ReadingRepository

# 2025-06-01 is a Sunday; 14:00 UTC falls in the day period
NOON_ISH = datetime(2025, 6, 1, 14, 0, tzinfo=timezone.utc)


class RecordingLogger(Logger):
    """Collects log calls so tests can assert on them."""

    def __init__(self):
        self.records = []

    def info(self, message: str, context: dict = None) -> None:
        self.records.append(("info", message, context))

    def warning(self, message: str, context: dict = None) -> None:
        self.records.append(("warning", message, context))

    def error(self, message: str, context: dict = None, exception: Exception = None) -> None:
        self.records.append(("error", message, context))

    def debug(self, message: str, context: dict = None) -> None:
        self.records.append(("debug", message, context))

    def messages(self, level: str):
        return [message for lvl, message, _ in self.records if lvl == level]


def make_reading(
        index: int,
        start: datetime = NOON_ISH,
        enclosure_id: str = "tank-1",
        humidity: Optional[float] = 35.0,
        air_temperature: Optional[float] = 27.0,
        surface_temperature: Optional[float] = 32.0,
        step: timedelta = timedelta(minutes=10)
) -> Reading:
    return Reading(
        reading_id=f"r-{index}",
        enclosure_id=enclosure_id,
        timestamp=start + step * index,
        humidity=humidity,
        air_temperature=air_temperature,
        surface_temperature=surface_temperature
    )


@pytest.fixture
def species_repo() -> InMemorySpeciesProfileRepository:
    return InMemorySpeciesProfileRepository()


@pytest.fixture
def leopard_gecko(species_repo) -> SpeciesProfile:
    return species_repo.get_profile("Leopard Gecko")


@pytest.fixture
def crested_gecko(species_repo) -> SpeciesProfile:
    return species_repo.get_profile("Crested Gecko")


@pytest.fixture
def ten_wide_profile() -> SpeciesProfile:
    """Every range is 20-30 so deviations are easy to reason about."""
    band = ConditionRange(min_value=20, max_value=30, ideal=25)
    return SpeciesProfile(
        species="Test Gecko",
        temperature=TemperatureProfile(day=band, night=band),
        humidity=HumidityProfile(day=band, night=band)
    )


@pytest.fixture
def enclosure_repo() -> InMemoryEnclosureRepository:
    return InMemoryEnclosureRepository([
        Enclosure(enclosure_id="tank-1", name="Leo's Tank", species="Leopard Gecko"),
        Enclosure(enclosure_id="tank-2", name="Crestie Tank", species="Crested Gecko"),
        Enclosure(enclosure_id="tank-3", name="Quarantine"),
        Enclosure(enclosure_id="tank-4", name="Mystery Tank", species="Tokay Gecko"),
    ])


@pytest.fixture
def reading_repo() -> InMemoryReadingRepository:
    return InMemoryReadingRepository()


@pytest.fixture
def time_provider() -> FixedTimeProvider:
    return FixedTimeProvider(NOON_ISH)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


class BrokenReadingRepository(ReadingRepository):
    """Reading store that is always down."""

    def get_readings(self, enclosure_id, since):
        raise ReadingStoreError("connection refused")

    def get_latest_reading(self, enclosure_id):
        raise ReadingStoreError("connection refused")


# ============ pymongo stand-in ============

def _matches(doc: dict, query: dict) -> bool:
    for key, condition in query.items():
        value = doc.get(key)
        if isinstance(condition, dict):
            if "$gte" in condition and not (value is not None and value >= condition["$gte"]):
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = list(docs)

    def sort(self, key, direction=ASCENDING):
        self._docs.sort(key=lambda d: d[key], reverse=direction != ASCENDING)
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    def __init__(self):
        self.docs = []
        self.indexes = []
        self.fail_with = None

    def create_index(self, keys, **kwargs):
        self.indexes.append(kwargs.get("name"))

    def find(self, query):
        if self.fail_with:
            raise self.fail_with
        return FakeCursor(d for d in self.docs if _matches(d, query))

    def find_one(self, query, sort=None):
        if self.fail_with:
            raise self.fail_with
        cursor = self.find(query)
        for key, direction in sort or []:
            cursor.sort(key, direction)
        return next(iter(cursor), None)

    def replace_one(self, query, doc, upsert=False):
        self.docs = [d for d in self.docs if not _matches(d, query)]
        self.docs.append(doc)

    def insert_many(self, docs):
        self.docs.extend(docs)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()
