import math
from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOON_ISH, make_reading
from domain.exceptions import UnsupportedWindowError
from domain.models import Metric, TimeWindow
from domain.series import (
    MAX_CHART_POINTS,
    format_label,
    parse_window,
    shape_series,
    window_start
)

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


# ============ Window start ============

@pytest.mark.parametrize(
    "window, expected",
    [
        ("24h", datetime(2025, 3, 9, 12, 0, tzinfo=timezone.utc)),
        ("7d", datetime(2025, 3, 3, 12, 0, tzinfo=timezone.utc)),
        ("30d", datetime(2025, 2, 8, 12, 0, tzinfo=timezone.utc)),
    ],
)
def test_window_start(window: str, expected: datetime) -> None:
    assert window_start(NOW, window) == expected


def test_window_start_accepts_enum() -> None:
    assert window_start(NOW, TimeWindow.LAST_7_DAYS) == NOW - timedelta(days=7)


@pytest.mark.parametrize("window", ["1y", "", "24H", "1h", "week"])
def test_unsupported_window_is_rejected(window: str) -> None:
    with pytest.raises(UnsupportedWindowError):
        window_start(NOW, window)


def test_unsupported_window_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_window("1y")


# ============ Labels ============

@pytest.mark.parametrize(
    "hour, minute, expected",
    [(0, 0, "0:00"), (7, 5, "7:05"), (19, 30, "19:30"), (23, 59, "23:59")],
)
def test_format_label(hour: int, minute: int, expected: str) -> None:
    assert format_label(datetime(2025, 6, 1, hour, minute)) == expected


# ============ Downsampling ============

def test_empty_history_gives_empty_series() -> None:
    series = shape_series([], Metric.HUMIDITY)
    assert series.labels == []
    assert series.values == []
    assert series.is_empty


def test_metric_absent_everywhere_gives_empty_series() -> None:
    readings = [make_reading(i, humidity=None) for i in range(5)]
    assert shape_series(readings, Metric.HUMIDITY).is_empty


def test_readings_without_metric_are_dropped() -> None:
    readings = [
        make_reading(0, humidity=40.0),
        make_reading(1, humidity=None),
        make_reading(2, humidity=math.nan),
        make_reading(3, humidity=42.0),
    ]
    series = shape_series(readings, Metric.HUMIDITY)
    assert series.values == [40.0, 42.0]
    assert series.labels == ["14:00", "14:30"]


def test_short_history_is_kept_whole() -> None:
    readings = [make_reading(i, air_temperature=float(i)) for i in range(MAX_CHART_POINTS)]
    series = shape_series(readings, Metric.AIR_TEMPERATURE)
    assert len(series) == 24
    assert series.values == [float(i) for i in range(24)]


def test_long_history_is_decimated_by_stride() -> None:
    # 100 readings: stride ceil(100 / 24) = 5 keeps indices 0, 5, ..., 95
    readings = [make_reading(i, air_temperature=float(i)) for i in range(100)]
    series = shape_series(readings, Metric.AIR_TEMPERATURE)

    assert len(series) == 20
    assert series.values == [float(i) for i in range(0, 100, 5)]
    assert series.labels[:3] == ["14:00", "14:50", "15:40"]


def test_one_over_the_limit_halves_the_series() -> None:
    readings = [make_reading(i, humidity=float(i)) for i in range(25)]
    series = shape_series(readings, Metric.HUMIDITY)
    assert series.values == [float(i) for i in range(0, 25, 2)]
    assert len(series) == 13


def test_stride_applies_after_dropping_missing_values() -> None:
    # 50 readings, every other one carries humidity: 25 points, stride 2
    readings = [
        make_reading(i, humidity=float(i) if i % 2 == 0 else None)
        for i in range(50)
    ]
    series = shape_series(readings, Metric.HUMIDITY)
    assert series.values == [float(i) for i in range(0, 50, 4)]


def test_series_never_exceeds_limit() -> None:
    for count in (24, 25, 47, 48, 49, 500, 4321):
        readings = [make_reading(i, step=timedelta(minutes=1)) for i in range(count)]
        assert len(shape_series(readings, Metric.SURFACE_TEMPERATURE)) <= MAX_CHART_POINTS


def test_series_keeps_chronological_order() -> None:
    readings = [make_reading(i, humidity=float(i)) for i in range(60)]
    values = shape_series(readings, Metric.HUMIDITY).values
    assert values == sorted(values)


def test_labels_use_local_timezone() -> None:
    minus_four = timezone(timedelta(hours=-4))
    readings = [make_reading(0, start=NOON_ISH)]
    assert shape_series(readings, Metric.HUMIDITY, minus_four).labels == ["10:00"]
    assert shape_series(readings, Metric.HUMIDITY).labels == ["14:00"]
