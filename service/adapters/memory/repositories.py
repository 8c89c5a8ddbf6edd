# adapters/memory/repositories.py

"""
In-memory repository adapters - store everything in Python lists/dicts.
The species repository is the production default; the others are handy
for tests and demos.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from adapters.memory.species_catalog import builtin_profiles
from adapters.utils.time_providers import as_utc
from domain.models import Enclosure, Reading, SpeciesProfile
from domain.ports import (
    EnclosureRepository,
    ReadingRepository,
    SpeciesProfileRepository
)


class InMemorySpeciesProfileRepository(SpeciesProfileRepository):
    """
    Read-only species lookup built once from a list of profiles.
    Defaults to the built-in gecko catalog.
    """

    def __init__(self, profiles: Optional[Iterable[SpeciesProfile]] = None):
        if profiles is None:
            profiles = builtin_profiles()
        self._profiles: Dict[str, SpeciesProfile] = {}
        for profile in profiles:
            if profile.species in self._profiles:
                raise ValueError(f"Duplicate species profile: {profile.species}")
            self._profiles[profile.species] = profile

    def get_profile(self, species: str) -> Optional[SpeciesProfile]:
        return self._profiles.get(species)

    def list_profiles(self) -> List[SpeciesProfile]:
        return list(self._profiles.values())


class InMemoryEnclosureRepository(EnclosureRepository):
    """Store enclosures in memory"""

    def __init__(self, enclosures: Optional[Iterable[Enclosure]] = None):
        self._enclosures: Dict[str, Enclosure] = {}
        for enclosure in enclosures or []:
            self.save_enclosure(enclosure)

    def get_enclosure(self, enclosure_id: str) -> Optional[Enclosure]:
        return self._enclosures.get(enclosure_id)

    def list_enclosures(self) -> List[Enclosure]:
        return list(self._enclosures.values())

    def save_enclosure(self, enclosure: Enclosure) -> bool:
        self._enclosures[enclosure.enclosure_id] = enclosure
        return True


class InMemoryReadingRepository(ReadingRepository):
    """
    Store readings in memory (Python list).
    All data is lost when program stops - perfect for testing!
    """

    def __init__(self, readings: Optional[Iterable[Reading]] = None):
        self._readings: List[Reading] = list(readings or [])

    def save_reading(self, reading: Reading) -> bool:
        self._readings.append(reading)
        return True

    def get_readings(self, enclosure_id: str, since: datetime) -> List[Reading]:
        """Get readings at or after `since`, oldest first (naive timestamps count as UTC)"""
        return sorted(
            (
                r for r in self._readings
                if r.enclosure_id == enclosure_id and as_utc(r.timestamp) >= as_utc(since)
            ),
            key=lambda r: as_utc(r.timestamp)
        )

    def get_latest_reading(self, enclosure_id: str) -> Optional[Reading]:
        enclosure_readings = [
            r for r in self._readings
            if r.enclosure_id == enclosure_id
        ]

        if not enclosure_readings:
            return None

        return max(enclosure_readings, key=lambda r: as_utc(r.timestamp))

    def clear(self):
        """Clear all data (useful for tests)"""
        self._readings = []

    def count(self) -> int:
        return len(self._readings)
