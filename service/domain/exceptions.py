# domain/exceptions.py

"""
Errors raised by the habitat condition domain.

Missing data (no species, no metric value, an empty history) is not an
error: it produces "unknown" classifications and empty series instead.
"""


class HabitatConditionError(Exception):
    """Base class for domain errors."""


class InvalidRangeError(HabitatConditionError, ValueError):
    """A condition range is misconfigured (min > max, ideal outside the range)."""


class UnsupportedWindowError(HabitatConditionError, ValueError):
    """A time window keyword other than 24h, 7d or 30d was requested."""


class EnclosureNotFoundError(HabitatConditionError, LookupError):
    """No enclosure exists with the requested id."""

    def __init__(self, enclosure_id: str):
        super().__init__(f"Enclosure {enclosure_id} not found")
        self.enclosure_id = enclosure_id


class ReadingStoreError(HabitatConditionError):
    """The store holding readings and enclosures failed; no partial result is returned."""
