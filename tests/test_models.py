import math
from datetime import datetime, timezone

import pytest

from adapters.memory.repositories import InMemorySpeciesProfileRepository
from adapters.memory.species_catalog import builtin_profiles
from domain.exceptions import InvalidRangeError
from domain.models import (
    ConditionRange,
    Metric,
    Period,
    Reading,
    SensorUnit
)


def test_condition_range_rejects_min_above_max() -> None:
    with pytest.raises(InvalidRangeError):
        ConditionRange(min_value=30, max_value=20, ideal=25)


def test_invalid_range_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        ConditionRange(min_value=30, max_value=20, ideal=25)


def test_condition_range_rejects_ideal_outside_range() -> None:
    with pytest.raises(InvalidRangeError):
        ConditionRange(min_value=20, max_value=30, ideal=31)


def test_zero_width_range_is_allowed() -> None:
    band = ConditionRange(min_value=25, max_value=25, ideal=25)
    assert band.span == 0
    assert band.contains(25)
    assert band.deviation(25) == 0.0
    assert band.deviation(26) is None


def test_deviation_is_relative_to_nearest_boundary() -> None:
    band = ConditionRange(min_value=20, max_value=30, ideal=25)
    assert band.deviation(25) == 0.0
    assert band.deviation(18) == pytest.approx(0.2)
    assert band.deviation(33.5) == pytest.approx(0.35)


def test_humidity_uses_period_range(leopard_gecko) -> None:
    assert leopard_gecko.range_for(Metric.HUMIDITY, Period.DAY) == leopard_gecko.humidity.day
    assert leopard_gecko.range_for(Metric.HUMIDITY, Period.NIGHT) == leopard_gecko.humidity.night


def test_air_temperature_never_uses_basking_range(leopard_gecko) -> None:
    assert leopard_gecko.range_for(Metric.AIR_TEMPERATURE, Period.DAY) == leopard_gecko.temperature.day
    assert leopard_gecko.range_for(Metric.AIR_TEMPERATURE, Period.NIGHT) == leopard_gecko.temperature.night


@pytest.mark.parametrize("period", list(Period))
def test_surface_temperature_uses_basking_range_in_any_period(leopard_gecko, period) -> None:
    assert leopard_gecko.range_for(Metric.SURFACE_TEMPERATURE, period) == leopard_gecko.temperature.basking


def test_surface_temperature_falls_back_without_basking_range(crested_gecko) -> None:
    assert crested_gecko.temperature.basking is None
    assert crested_gecko.range_for(Metric.SURFACE_TEMPERATURE, Period.DAY) == crested_gecko.temperature.day
    assert crested_gecko.range_for(Metric.SURFACE_TEMPERATURE, Period.NIGHT) == crested_gecko.temperature.night


def test_metric_units() -> None:
    assert Metric.HUMIDITY.unit == SensorUnit.PERCENT
    assert Metric.AIR_TEMPERATURE.unit == SensorUnit.CELSIUS
    assert Metric.SURFACE_TEMPERATURE.unit == SensorUnit.CELSIUS


def test_reading_treats_missing_and_nan_as_no_data() -> None:
    reading = Reading(
        reading_id="r-1",
        enclosure_id="tank-1",
        timestamp=datetime(2025, 6, 1, 12, tzinfo=timezone.utc),
        humidity=0.0,
        air_temperature=math.nan
    )
    assert reading.value_for(Metric.HUMIDITY) == 0.0
    assert reading.has_value(Metric.HUMIDITY)
    assert reading.value_for(Metric.AIR_TEMPERATURE) is None
    assert not reading.has_value(Metric.SURFACE_TEMPERATURE)


def test_builtin_catalog_species() -> None:
    repo = InMemorySpeciesProfileRepository()
    assert repo.list_species() == [
        "Leopard Gecko",
        "Crested Gecko",
        "Day Gecko",
        "Gargoyle Gecko",
        "African Fat-Tailed Gecko",
    ]


def test_builtin_catalog_basking_ranges(species_repo) -> None:
    with_basking = {p.species for p in species_repo.list_profiles() if p.temperature.basking}
    assert with_basking == {"Leopard Gecko", "Day Gecko", "African Fat-Tailed Gecko"}


def test_builtin_catalog_leopard_gecko_values(leopard_gecko) -> None:
    assert leopard_gecko.temperature.day == ConditionRange(24, 29, 27)
    assert leopard_gecko.temperature.night == ConditionRange(18, 23, 21)
    assert leopard_gecko.temperature.basking == ConditionRange(30, 35, 32)
    assert leopard_gecko.humidity.day == ConditionRange(30, 40, 35)
    assert leopard_gecko.humidity.night == ConditionRange(40, 50, 45)
    assert leopard_gecko.description.startswith("Desert species")


def test_unknown_species_is_absent_not_an_error(species_repo) -> None:
    assert species_repo.get_profile("Tokay Gecko") is None


def test_duplicate_species_rejected() -> None:
    profiles = builtin_profiles()
    with pytest.raises(ValueError):
        InMemorySpeciesProfileRepository(profiles + [profiles[0]])
