# domain/series.py

"""
Reading history shaping: the lower bound of a requested time window and the
reduction of an irregular history into a short series for charting.
"""

import math
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Sequence, Union

from domain.exceptions import UnsupportedWindowError
from domain.models import ChartSeries, Metric, Reading, TimeWindow


MAX_CHART_POINTS = 24

WINDOW_OFFSETS = {
    TimeWindow.LAST_24_HOURS: timedelta(hours=24),
    TimeWindow.LAST_7_DAYS: timedelta(days=7),
    TimeWindow.LAST_30_DAYS: timedelta(days=30),
}


def parse_window(window: Union[TimeWindow, str]) -> TimeWindow:
    """Accept a TimeWindow or one of its keywords ("24h", "7d", "30d")."""
    if isinstance(window, TimeWindow):
        return window
    try:
        return TimeWindow(window)
    except ValueError:
        raise UnsupportedWindowError(
            f"Unsupported time window: {window!r} (expected one of "
            f"{', '.join(w.value for w in TimeWindow)})"
        ) from None


def window_start(now: datetime, window: Union[TimeWindow, str]) -> datetime:
    """Earliest timestamp a reading may have to fall inside the window."""
    return now - WINDOW_OFFSETS[parse_window(window)]


def format_label(timestamp: datetime) -> str:
    """Chart axis label, e.g. "7:05" or "19:30"."""
    return f"{timestamp.hour}:{timestamp.minute:02d}"


def _to_local(timestamp: datetime, local_tz: Optional[tzinfo]) -> datetime:
    if local_tz is None or timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone(local_tz)


def shape_series(
        readings: Sequence[Reading],
        metric: Metric,
        local_tz: Optional[tzinfo] = None
) -> ChartSeries:
    """
    Turn an ascending reading history into a chart series for one metric.

    Readings without the metric are dropped. Histories longer than
    MAX_CHART_POINTS are decimated by keeping every `stride`-th reading;
    the points in between are discarded, not averaged, so short peaks and
    dips can disappear from the chart.

    Args:
        readings: Readings ordered by ascending timestamp
        metric: Metric to plot
        local_tz: Timezone for labels; aware timestamps are converted to it

    Returns:
        ChartSeries, empty when no reading carries the metric
    """
    points = [r for r in readings if r.has_value(metric)]
    if not points:
        return ChartSeries(labels=[], values=[])

    if len(points) > MAX_CHART_POINTS:
        stride = math.ceil(len(points) / MAX_CHART_POINTS)
        points = points[::stride]

    return ChartSeries(
        labels=[format_label(_to_local(r.timestamp, local_tz)) for r in points],
        values=[r.value_for(metric) for r in points]
    )
