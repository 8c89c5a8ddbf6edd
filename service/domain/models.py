# domain/models.py

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List

from domain.exceptions import InvalidRangeError


# ========== Enums for Metrics, Periods and Severity ==========

class Metric(Enum):
    HUMIDITY = "humidity"
    AIR_TEMPERATURE = "air_temperature"
    SURFACE_TEMPERATURE = "surface_temperature"

    @property
    def is_temperature(self) -> bool:
        return self in (Metric.AIR_TEMPERATURE, Metric.SURFACE_TEMPERATURE)

    @property
    def unit(self) -> 'SensorUnit':
        return SensorUnit.CELSIUS if self.is_temperature else SensorUnit.PERCENT


class SensorUnit(Enum):
    CELSIUS = "°C"
    PERCENT = "%"


class Period(Enum):
    DAY = "day"
    NIGHT = "night"


class Severity(Enum):
    """
    Classification of a reading against its optimal range.

    OPTIMAL < SLIGHT_DEVIATION < SEVERE_DEVIATION by distance from the range.
    UNKNOWN means there was nothing to compare (no profile, no range or no
    value) and is not part of that ordering.
    """
    OPTIMAL = "optimal"
    SLIGHT_DEVIATION = "slight-deviation"
    SEVERE_DEVIATION = "severe-deviation"
    UNKNOWN = "unknown"


class TimeWindow(Enum):
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"


# ========== Optimal Ranges and Species Profiles ==========

@dataclass(frozen=True)
class ConditionRange:
    """One acceptable band for one metric in one period."""
    min_value: float
    max_value: float
    ideal: float

    def __post_init__(self):
        if self.min_value > self.max_value:
            raise InvalidRangeError(
                f"Range minimum {self.min_value} is greater than maximum {self.max_value}"
            )
        if not self.min_value <= self.ideal <= self.max_value:
            raise InvalidRangeError(
                f"Ideal value {self.ideal} is outside range {self.min_value}-{self.max_value}"
            )

    @property
    def span(self) -> float:
        return self.max_value - self.min_value

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value

    def deviation(self, value: float) -> Optional[float]:
        """
        Distance of value from the nearest boundary as a fraction of the span.

        Returns 0.0 for values inside the range and None when the value is
        outside a zero-width range (the ratio is undefined).
        """
        if self.contains(value):
            return 0.0
        if self.span == 0:
            return None
        if value < self.min_value:
            return (self.min_value - value) / self.span
        return (value - self.max_value) / self.span


@dataclass(frozen=True)
class TemperatureProfile:
    day: ConditionRange
    night: ConditionRange
    basking: Optional[ConditionRange] = None

    def for_period(self, period: Period) -> ConditionRange:
        return self.night if period == Period.NIGHT else self.day


@dataclass(frozen=True)
class HumidityProfile:
    day: ConditionRange
    night: ConditionRange

    def for_period(self, period: Period) -> ConditionRange:
        return self.night if period == Period.NIGHT else self.day


@dataclass(frozen=True)
class SpeciesProfile:
    """
    Optimal conditions for a species.
    Day and night ranges are mandatory for both temperature and humidity;
    the basking range is optional and only ever applies to surface temperature.
    """
    species: str
    temperature: TemperatureProfile
    humidity: HumidityProfile
    description: Optional[str] = None

    def range_for(self, metric: Metric, period: Period) -> ConditionRange:
        """
        Pick the range a metric is judged against.

        Surface temperature uses the basking range whenever the species has
        one, whatever the period. Without it, surface temperature falls back
        to the period's air temperature range.
        """
        if metric == Metric.HUMIDITY:
            return self.humidity.for_period(period)
        if metric == Metric.SURFACE_TEMPERATURE and self.temperature.basking is not None:
            return self.temperature.basking
        return self.temperature.for_period(period)


# ========== Enclosures and Readings ==========

@dataclass(frozen=True)
class Reading:
    """
    One sample from an enclosure. Any subset of the three metrics may be
    missing; a missing value means "no data", never zero.
    """
    reading_id: str
    enclosure_id: str
    timestamp: datetime
    humidity: Optional[float] = None
    air_temperature: Optional[float] = None
    surface_temperature: Optional[float] = None

    def value_for(self, metric: Metric) -> Optional[float]:
        value = getattr(self, metric.value)
        if value is None or math.isnan(value):
            return None
        return value

    def has_value(self, metric: Metric) -> bool:
        return self.value_for(metric) is not None


@dataclass
class Enclosure:
    """
    A specific terrarium being monitored.
    Without a species there are no ranges to evaluate against.
    """
    enclosure_id: str
    name: str
    species: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None


# ========== Derived Values (never persisted) ==========

@dataclass(frozen=True)
class EvaluationResult:
    display_value: str
    severity: Severity
    color: str


@dataclass(frozen=True)
class ChartSeries:
    """Index-aligned labels and values for one metric."""
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.values

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class CurrentConditions:
    """Latest reading of an enclosure classified per metric."""
    enclosure_id: str
    species: Optional[str]
    period: Period
    evaluated_at: datetime
    reading_timestamp: Optional[datetime]
    humidity: EvaluationResult
    air_temperature: EvaluationResult
    surface_temperature: EvaluationResult

    def for_metric(self, metric: Metric) -> EvaluationResult:
        return getattr(self, metric.value)
