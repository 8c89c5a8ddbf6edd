# domain/evaluation.py

"""
Condition evaluation: which period applies at an instant, and how far a
reading sits from its species' optimal range.

Everything here is a pure function of its arguments. The instant is always
passed in; nothing reads the system clock.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from datetime import datetime
from typing import Optional

from domain.models import (
    ConditionRange,
    EvaluationResult,
    Metric,
    Period,
    Severity,
    SpeciesProfile
)


# Night runs from 19:00 up to (not including) 07:00 local time
NIGHT_START_HOUR = 19
DAY_START_HOUR = 7

SLIGHT_DEVIATION_THRESHOLD = 0.15
# Not used by classify_value: every deviation above 0.15 is already severe.
SEVERE_DEVIATION_THRESHOLD = 0.30

NOT_AVAILABLE = "N/A"

_ONE_DECIMAL = Decimal("0.1")

SEVERITY_COLORS = {
    Severity.OPTIMAL: "#4ade80",
    Severity.SLIGHT_DEVIATION: "#fb923c",
    Severity.SEVERE_DEVIATION: "#ef4444",
    Severity.UNKNOWN: "#a1a1aa",
}


# ═══════════════════════════════════════════════════════════════════
# PERIOD RESOLVER
# ═══════════════════════════════════════════════════════════════════

def resolve_period(instant: datetime) -> Period:
    """
    Decide whether day or night thresholds apply.

    Only the wall-clock hour of `instant` is considered, so callers must pass
    it already in the local time they care about.
    """
    if instant.hour < DAY_START_HOUR or instant.hour >= NIGHT_START_HOUR:
        return Period.NIGHT
    return Period.DAY


# ═══════════════════════════════════════════════════════════════════
# CONDITION CLASSIFIER
# ═══════════════════════════════════════════════════════════════════

def severity_color(severity: Severity) -> str:
    return SEVERITY_COLORS[severity]


def format_value(metric: Metric, value: Optional[float]) -> str:
    """
    Render a value for display, e.g. "27.5°C" or "45.0%".

    Exact ties round away from zero (27.25 -> "27.3"). Decimal(value) keeps
    the exact binary value, so 1.45 (stored just below) still gives "1.4".
    """
    if value is None or math.isnan(value):
        return NOT_AVAILABLE
    rounded = Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{rounded}{metric.unit.value}"


def classify_value(value: float, condition_range: ConditionRange) -> Severity:
    """
    Classify a value against a single range.

    Deviations up to 15% of the range width are slight, anything beyond is
    severe. A zero-width range tolerates only the exact value.
    """
    if condition_range.contains(value):
        return Severity.OPTIMAL

    deviation = condition_range.deviation(value)
    if deviation is None:
        return Severity.SEVERE_DEVIATION

    if deviation <= SLIGHT_DEVIATION_THRESHOLD:
        return Severity.SLIGHT_DEVIATION
    return Severity.SEVERE_DEVIATION


def classify(
        value: Optional[float],
        profile: Optional[SpeciesProfile],
        metric: Metric,
        period: Period
) -> EvaluationResult:
    """
    Evaluate one metric of a reading against a species profile.

    Args:
        value: The measured value, None when the reading has no data for it
        profile: Species profile of the enclosure, None when unknown
        metric: Which metric the value belongs to
        period: Day or night, as returned by resolve_period()

    Returns:
        EvaluationResult with display value, severity and color
    """
    if value is None or math.isnan(value) or profile is None:
        return EvaluationResult(
            display_value=NOT_AVAILABLE,
            severity=Severity.UNKNOWN,
            color=severity_color(Severity.UNKNOWN)
        )

    condition_range = profile.range_for(metric, period)
    severity = classify_value(value, condition_range)

    return EvaluationResult(
        display_value=format_value(metric, value),
        severity=severity,
        color=severity_color(severity)
    )
