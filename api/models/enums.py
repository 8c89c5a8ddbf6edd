# api/models/enums.py

"""
Enums for the Geckowatch API.

Values match the domain enums so conversion is `DomainEnum(api_enum.value)`.
"""

from enum import Enum


class Metric(str, Enum):
    HUMIDITY = "humidity"
    AIR_TEMPERATURE = "air_temperature"
    SURFACE_TEMPERATURE = "surface_temperature"


class Severity(str, Enum):
    OPTIMAL = "optimal"
    SLIGHT_DEVIATION = "slight-deviation"
    SEVERE_DEVIATION = "severe-deviation"
    UNKNOWN = "unknown"


class DayNightMode(str, Enum):
    DAY = "day"
    NIGHT = "night"


class TimeWindow(str, Enum):
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
