# domain/ports.py

"""
Ports (interfaces) for the habitat condition system.

Ports define the contracts between the domain and external systems.
They specify WHAT the domain needs and HOW to interact with it,
but NOT the implementation details.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import datetime

from domain.models import (
    Enclosure,
    Reading,
    SpeciesProfile
)


# ═══════════════════════════════════════════════════════════════════
# READING PORTS
# ═══════════════════════════════════════════════════════════════════

class ReadingRepository(ABC):
    """
    Port for retrieving enclosure readings.

    Adapters: MongoDBReadingRepository, InMemoryReadingRepository
    """

    @abstractmethod
    def get_readings(
            self,
            enclosure_id: str,
            since: datetime
    ) -> List[Reading]:
        """
        Retrieve the reading history of an enclosure.

        Args:
            enclosure_id: Enclosure to get readings for
            since: Only readings with timestamp >= since are returned

        Returns:
            List of Reading objects, ascending by timestamp

        Raises:
            ReadingStoreError: The store failed; no partial list is returned
        """
        pass

    @abstractmethod
    def get_latest_reading(self, enclosure_id: str) -> Optional[Reading]:
        """
        Get the most recent reading for an enclosure.

        Returns:
            Reading or None if no readings exist
        """
        pass


# ═══════════════════════════════════════════════════════════════════
# ENCLOSURE/SPECIES PORTS
# ═══════════════════════════════════════════════════════════════════

class EnclosureRepository(ABC):
    """
    Port for loading enclosure configurations.

    Adapters: MongoDBEnclosureRepository, InMemoryEnclosureRepository
    """

    @abstractmethod
    def get_enclosure(self, enclosure_id: str) -> Optional[Enclosure]:
        """
        Load a specific enclosure.

        Returns:
            Enclosure object or None if not found
        """
        pass

    @abstractmethod
    def list_enclosures(self) -> List[Enclosure]:
        """Get all configured enclosures."""
        pass


class SpeciesProfileRepository(ABC):
    """
    Port for species optimal-condition profiles.

    Profiles are static configuration: loaded once, read-only afterwards.

    Adapters: InMemorySpeciesProfileRepository, MongoDBSpeciesProfileRepository
    """

    @abstractmethod
    def get_profile(self, species: str) -> Optional[SpeciesProfile]:
        """
        Look up the profile of a species by name.

        Returns:
            SpeciesProfile or None when the species is unknown
        """
        pass

    @abstractmethod
    def list_profiles(self) -> List[SpeciesProfile]:
        """Get every known profile."""
        pass

    def list_species(self) -> List[str]:
        """Names of all species that can be assigned to an enclosure."""
        return [profile.species for profile in self.list_profiles()]


# ═══════════════════════════════════════════════════════════════════
# INFRASTRUCTURE/UTILITY PORTS
# ═══════════════════════════════════════════════════════════════════

class TimeProvider(ABC):
    """
    Port for getting current time.

    Adapters: SystemTimeProvider, FixedTimeProvider (for testing)
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Get current timestamp.

        Returns:
            Current datetime
        """
        pass


class Logger(ABC):
    """
    Port for logging.

    Adapters: DualLogger (stdout + optional file)
    """

    @abstractmethod
    def info(self, message: str, context: dict = None) -> None:
        """
        Log informational message.

        Args:
            message: Message to log
            context: Optional dict with additional context
        """
        pass

    @abstractmethod
    def warning(self, message: str, context: dict = None) -> None:
        """
        Log warning.

        Args:
            message: Warning message
            context: Optional dict with additional context
        """
        pass

    @abstractmethod
    def error(
            self,
            message: str,
            context: dict = None,
            exception: Exception = None
    ) -> None:
        """
        Log error.

        Args:
            message: Error message
            context: Optional dict with additional context
            exception: Optional exception object
        """
        pass

    @abstractmethod
    def debug(self, message: str, context: dict = None) -> None:
        """Log debug information."""
        pass
