# adapters/memory/__init__.py

"""
In-memory adapters: built-in species catalog and list-backed stores.
"""

from .species_catalog import builtin_profiles
from .repositories import (
    InMemoryEnclosureRepository,
    InMemoryReadingRepository,
    InMemorySpeciesProfileRepository
)

__all__ = [
    'builtin_profiles',
    'InMemoryEnclosureRepository',
    'InMemoryReadingRepository',
    'InMemorySpeciesProfileRepository'
]
