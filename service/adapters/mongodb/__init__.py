# adapters/mongodb/__init__.py

"""
MongoDB adapter implementations for the Habitat Condition System.
"""

from adapters.mongodb.connection import MongoDBConnection
from adapters.mongodb.repositories import (
    MongoDBReadingRepository,
    MongoDBEnclosureRepository,
    MongoDBSpeciesProfileRepository,
    seed_species_profiles
)

__all__ = [
    'MongoDBConnection',
    'MongoDBReadingRepository',
    'MongoDBEnclosureRepository',
    'MongoDBSpeciesProfileRepository',
    'seed_species_profiles'
]
