# adapters/utils/time_providers.py

"""
Time provider adapters - for getting current time and the local timezone
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from domain.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production time provider - uses real system time"""

    def now(self) -> datetime:
        """Get current system time as timezone-aware UTC datetime"""
        return datetime.now(timezone.utc)


class FixedTimeProvider(TimeProvider):
    """Testing time provider - YOU control the time!"""

    def __init__(self, fixed_time: datetime):
        """
        Args:
            fixed_time: The time to return from now()
        """
        self._current_time = fixed_time

    def now(self) -> datetime:
        """Get the fixed time"""
        return self._current_time

    def advance(self, minutes: int):
        """
        Move time forward for testing.

        Args:
            minutes: How many minutes to advance
        """
        self._current_time += timedelta(minutes=minutes)

    def set_time(self, new_time: datetime):
        self._current_time = new_time


def load_timezone(timezone_name: Optional[str]) -> Optional[tzinfo]:
    """
    Resolve an IANA timezone name (e.g. "America/New_York").

    Returns None for an empty name so instants are used as given.
    Raises ZoneInfoNotFoundError for unknown names.
    """
    if not timezone_name:
        return None
    if timezone_name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(timezone_name)


def as_utc(timestamp: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC, the way MongoDB stores them."""
    if timestamp is not None and timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp
