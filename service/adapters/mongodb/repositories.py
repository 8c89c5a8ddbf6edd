# adapters/mongodb/repositories.py

"""
MongoDB repository implementations for the Habitat Condition System.

These adapters implement the repository ports defined in domain/ports.py,
reading data from MongoDB collections.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapters.utils.time_providers import as_utc
from domain.exceptions import ReadingStoreError
from domain.models import (
    ConditionRange,
    Enclosure,
    HumidityProfile,
    Reading,
    SpeciesProfile,
    TemperatureProfile
)
from domain.ports import (
    EnclosureRepository,
    ReadingRepository,
    SpeciesProfileRepository
)


class MongoDBReadingRepository(ReadingRepository):
    """
    MongoDB adapter for enclosure readings.

    Collection: readings
    Indexes:
        - (enclosure_id, timestamp) for window queries and latest lookups
    """

    COLLECTION_NAME = "readings"

    def __init__(self, database: Database):
        self._db = database
        self._collection = database[self.COLLECTION_NAME]
        self._ensure_indexes()

    def _ensure_indexes(self):
        """Create necessary indexes if they don't exist."""
        self._collection.create_index(
            [("enclosure_id", ASCENDING), ("timestamp", ASCENDING)],
            name="enclosure_timestamp_idx"
        )

    def get_readings(self, enclosure_id: str, since: datetime) -> List[Reading]:
        """Get readings for an enclosure from `since` onwards, oldest first."""
        try:
            cursor = self._collection.find({
                "enclosure_id": enclosure_id,
                "timestamp": {"$gte": since}
            }).sort("timestamp", ASCENDING)
            return [self._doc_to_reading(doc) for doc in cursor]
        except PyMongoError as e:
            raise ReadingStoreError(f"Could not load readings for {enclosure_id}: {e}") from e

    def get_latest_reading(self, enclosure_id: str) -> Optional[Reading]:
        """Get the most recent reading for an enclosure."""
        try:
            doc = self._collection.find_one(
                {"enclosure_id": enclosure_id},
                sort=[("timestamp", DESCENDING)]
            )
        except PyMongoError as e:
            raise ReadingStoreError(f"Could not load latest reading for {enclosure_id}: {e}") from e
        return self._doc_to_reading(doc) if doc else None

    @staticmethod
    def _doc_to_reading(doc: dict) -> Reading:
        """Convert MongoDB document to Reading."""
        return Reading(
            reading_id=str(doc.get("reading_id", doc.get("_id"))),
            enclosure_id=doc["enclosure_id"],
            timestamp=as_utc(doc["timestamp"]),
            humidity=doc.get("humidity"),
            air_temperature=doc.get("air_temperature"),
            surface_temperature=doc.get("surface_temperature")
        )


class MongoDBEnclosureRepository(EnclosureRepository):
    """
    MongoDB adapter for enclosure configurations.

    Collection: enclosures
    """

    COLLECTION_NAME = "enclosures"

    def __init__(self, database: Database):
        self._db = database
        self._collection = database[self.COLLECTION_NAME]
        self._collection.create_index(
            "enclosure_id",
            unique=True,
            name="enclosure_id_idx"
        )

    def get_enclosure(self, enclosure_id: str) -> Optional[Enclosure]:
        try:
            doc = self._collection.find_one({"enclosure_id": enclosure_id})
        except PyMongoError as e:
            raise ReadingStoreError(f"Could not load enclosure {enclosure_id}: {e}") from e
        return self._doc_to_enclosure(doc) if doc else None

    def list_enclosures(self) -> List[Enclosure]:
        try:
            cursor = self._collection.find({}).sort("name", ASCENDING)
            return [self._doc_to_enclosure(doc) for doc in cursor]
        except PyMongoError as e:
            raise ReadingStoreError(f"Could not list enclosures: {e}") from e

    @staticmethod
    def _doc_to_enclosure(doc: dict) -> Enclosure:
        return Enclosure(
            enclosure_id=doc["enclosure_id"],
            name=doc["name"],
            species=doc.get("species") or None,
            description=doc.get("description"),
            image_url=doc.get("image_url"),
            created_at=as_utc(doc.get("created_at"))
        )


class MongoDBSpeciesProfileRepository(SpeciesProfileRepository):
    """
    MongoDB adapter for species profiles.

    The collection is read ONCE when the repository is created; lookups are
    served from memory afterwards, like the built-in catalog.

    Collection: species_profiles
    """

    COLLECTION_NAME = "species_profiles"

    def __init__(self, database: Database):
        self._db = database
        self._collection = database[self.COLLECTION_NAME]
        self._profiles = {
            profile.species: profile
            for profile in (self._doc_to_profile(doc) for doc in self._collection.find({}))
        }

    def get_profile(self, species: str) -> Optional[SpeciesProfile]:
        return self._profiles.get(species)

    def list_profiles(self) -> List[SpeciesProfile]:
        return list(self._profiles.values())

    @staticmethod
    def _doc_to_range(doc: Optional[dict]) -> Optional[ConditionRange]:
        if not doc:
            return None
        return ConditionRange(
            min_value=doc["min"],
            max_value=doc["max"],
            ideal=doc["ideal"]
        )

    @classmethod
    def _doc_to_profile(cls, doc: dict) -> SpeciesProfile:
        """Convert MongoDB document to SpeciesProfile (validates every range)."""
        temperature = doc["temperature"]
        humidity = doc["humidity"]
        return SpeciesProfile(
            species=doc["species"],
            temperature=TemperatureProfile(
                day=cls._doc_to_range(temperature["day"]),
                night=cls._doc_to_range(temperature["night"]),
                basking=cls._doc_to_range(temperature.get("basking"))
            ),
            humidity=HumidityProfile(
                day=cls._doc_to_range(humidity["day"]),
                night=cls._doc_to_range(humidity["night"])
            ),
            description=doc.get("description")
        )

    @staticmethod
    def _range_to_doc(condition_range: Optional[ConditionRange]) -> Optional[dict]:
        if condition_range is None:
            return None
        return {
            "min": condition_range.min_value,
            "max": condition_range.max_value,
            "ideal": condition_range.ideal
        }

    @classmethod
    def profile_to_doc(cls, profile: SpeciesProfile) -> dict:
        """Convert SpeciesProfile to a MongoDB document."""
        return {
            "species": profile.species,
            "temperature": {
                "day": cls._range_to_doc(profile.temperature.day),
                "night": cls._range_to_doc(profile.temperature.night),
                "basking": cls._range_to_doc(profile.temperature.basking)
            },
            "humidity": {
                "day": cls._range_to_doc(profile.humidity.day),
                "night": cls._range_to_doc(profile.humidity.night)
            },
            "description": profile.description
        }


def seed_species_profiles(database: Database, profiles: Iterable[SpeciesProfile]) -> int:
    """
    Upsert species profiles into the species_profiles collection.

    Returns:
        Number of profiles written
    """
    collection = database[MongoDBSpeciesProfileRepository.COLLECTION_NAME]
    collection.create_index("species", unique=True, name="species_idx")

    count = 0
    for profile in profiles:
        collection.replace_one(
            {"species": profile.species},
            MongoDBSpeciesProfileRepository.profile_to_doc(profile),
            upsert=True
        )
        count += 1
    return count
