# domain/services.py

"""
Domain Services for the Habitat Condition System

Services contain the orchestration for:
- Evaluating the latest reading of an enclosure against its species profile
- Fetching and shaping reading history for charts

The decision logic itself lives in domain.evaluation and domain.series;
services only fetch inputs through ports and hand them to those functions.
"""

from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Optional, Union

from domain.evaluation import classify, resolve_period
from domain.exceptions import EnclosureNotFoundError, ReadingStoreError
from domain.models import (
    ChartSeries,
    CurrentConditions,
    Enclosure,
    Metric,
    Period,
    Reading,
    SpeciesProfile,
    TimeWindow
)
from domain.ports import (
    EnclosureRepository,
    Logger,
    ReadingRepository,
    SpeciesProfileRepository,
    TimeProvider
)
from domain.series import parse_window, shape_series, window_start


class _ServiceBase:
    """Time and logging helpers shared by the services."""

    def __init__(
            self,
            time_provider: Optional[TimeProvider] = None,
            local_timezone: Optional[tzinfo] = None,
            logger: Optional[Logger] = None
    ):
        self._time_provider = time_provider
        self._local_tz = local_timezone
        self._logger = logger

    def _get_current_time(self) -> datetime:
        """Get current time (use time provider if available, otherwise datetime)"""
        if self._time_provider:
            return self._time_provider.now()
        return datetime.now(timezone.utc)

    def to_local(self, instant: datetime) -> datetime:
        """Convert an aware instant to local time; naive instants are taken as local already."""
        if self._local_tz is None or instant.tzinfo is None:
            return instant
        return instant.astimezone(self._local_tz)

    def _log_info(self, message: str, context: dict = None):
        if self._logger:
            self._logger.info(message, context)
        else:
            print(f"[INFO] {message}")

    def _log_warning(self, message: str, context: dict = None):
        if self._logger:
            self._logger.warning(message, context)
        else:
            print(f"[WARNING] {message}")

    def _log_error(self, message: str, context: dict = None, exception: Exception = None):
        if self._logger:
            self._logger.error(message, context, exception)
        else:
            print(f"[ERROR] {message}")
            if exception:
                print(f"  Exception: {exception}")


# ═══════════════════════════════════════════════════════════════════
# CONDITION MONITORING SERVICE
# ═══════════════════════════════════════════════════════════════════

class ConditionMonitoringService(_ServiceBase):

    """
    Service for evaluating current enclosure conditions.

    Responsibilities:
    - Load the enclosure and its latest reading
    - Resolve the day/night period for the evaluation instant
    - Look up the species profile and classify every metric
    """

    def __init__(
            self,
            enclosure_repository: EnclosureRepository,
            reading_repository: ReadingRepository,
            species_repository: SpeciesProfileRepository,
            time_provider: Optional[TimeProvider] = None,
            local_timezone: Optional[tzinfo] = None,
            logger: Optional[Logger] = None
    ):
        """
        Initialize monitoring service with dependencies.

        Args:
            enclosure_repository: Port for loading enclosures
            reading_repository: Port for retrieving readings
            species_repository: Port for species profiles (loaded once, read-only)
            time_provider: Port for getting current time (optional, uses datetime if not provided)
            local_timezone: Timezone defining day and night (optional, instants used as given)
            logger: Port for logging (optional, uses print if not provided)
        """
        super().__init__(time_provider, local_timezone, logger)
        self._enclosure_repo = enclosure_repository
        self._reading_repo = reading_repository
        self._species_repo = species_repository

    def get_period(self, at: Optional[datetime] = None) -> Period:
        """Day or night at `at` (defaults to now) in local time."""
        if at is None:
            at = self._get_current_time()
        return resolve_period(self.to_local(at))

    def get_current_conditions(
            self,
            enclosure_id: str,
            at: Optional[datetime] = None
    ) -> CurrentConditions:
        """
        Classify the latest reading of an enclosure.

        Args:
            enclosure_id: Enclosure to evaluate
            at: Evaluation instant (defaults to now), decides day or night

        Returns:
            CurrentConditions; every metric is unknown when there is no
            reading or no usable species profile

        Raises:
            EnclosureNotFoundError: No such enclosure
        """
        enclosure = self._enclosure_repo.get_enclosure(enclosure_id)
        if enclosure is None:
            raise EnclosureNotFoundError(enclosure_id)

        reading = self._reading_repo.get_latest_reading(enclosure_id)
        if reading is None:
            self._log_info(f"No readings yet for enclosure {enclosure_id}")

        return self.evaluate_reading(enclosure, reading, at)

    def get_all_current_conditions(
            self,
            at: Optional[datetime] = None
    ) -> List[CurrentConditions]:
        """Current conditions of every enclosure, evaluated at the same instant."""
        if at is None:
            at = self._get_current_time()
        return [
            self.evaluate_reading(
                enclosure,
                self._reading_repo.get_latest_reading(enclosure.enclosure_id),
                at
            )
            for enclosure in self._enclosure_repo.list_enclosures()
        ]

    def evaluate_reading(
            self,
            enclosure: Enclosure,
            reading: Optional[Reading],
            at: Optional[datetime] = None
    ) -> CurrentConditions:
        """Classify an already fetched reading for an enclosure."""
        if at is None:
            at = self._get_current_time()
        period = resolve_period(self.to_local(at))
        profile = self._profile_for(enclosure)

        results = {}
        for metric in Metric:
            value = reading.value_for(metric) if reading else None
            results[metric.value] = classify(value, profile, metric, period)

        return CurrentConditions(
            enclosure_id=enclosure.enclosure_id,
            species=enclosure.species,
            period=period,
            evaluated_at=at,
            reading_timestamp=reading.timestamp if reading else None,
            **results
        )

    def _profile_for(self, enclosure: Enclosure) -> Optional[SpeciesProfile]:
        if not enclosure.species:
            return None

        profile = self._species_repo.get_profile(enclosure.species)
        if profile is None:
            self._log_warning(
                f"No species profile for {enclosure.species}",
                {"enclosure_id": enclosure.enclosure_id}
            )
        return profile


# ═══════════════════════════════════════════════════════════════════
# READING HISTORY SERVICE
# ═══════════════════════════════════════════════════════════════════

class ReadingHistoryService(_ServiceBase):

    """
    Service for reading history over a time window.

    Responsibilities:
    - Turn a window keyword into the lower bound of the history query
    - Fetch readings through the reading port
    - Shape them into per-metric chart series
    """

    def __init__(
            self,
            enclosure_repository: EnclosureRepository,
            reading_repository: ReadingRepository,
            time_provider: Optional[TimeProvider] = None,
            local_timezone: Optional[tzinfo] = None,
            logger: Optional[Logger] = None
    ):
        super().__init__(time_provider, local_timezone, logger)
        self._enclosure_repo = enclosure_repository
        self._reading_repo = reading_repository

    def get_readings(
            self,
            enclosure_id: str,
            window: Union[TimeWindow, str],
            now: Optional[datetime] = None
    ) -> List[Reading]:
        """
        Get the readings of an enclosure inside a time window.

        Raises:
            UnsupportedWindowError: window is not 24h, 7d or 30d
            EnclosureNotFoundError: No such enclosure
            ReadingStoreError: The store failed
        """
        window = parse_window(window)
        if self._enclosure_repo.get_enclosure(enclosure_id) is None:
            raise EnclosureNotFoundError(enclosure_id)

        if now is None:
            now = self._get_current_time()
        since = window_start(now, window)

        try:
            readings = self._reading_repo.get_readings(enclosure_id, since)
        except ReadingStoreError as e:
            self._log_error(
                f"Error getting readings for {enclosure_id}",
                {"window": window.value},
                exception=e
            )
            raise

        self._log_info(
            f"Fetched {len(readings)} reading(s) for {enclosure_id}",
            {"window": window.value, "since": since.isoformat()}
        )
        return readings

    def get_chart(
            self,
            enclosure_id: str,
            window: Union[TimeWindow, str],
            metric: Metric,
            now: Optional[datetime] = None
    ) -> ChartSeries:
        """Chart series of one metric; empty when there is no data."""
        readings = self.get_readings(enclosure_id, window, now)
        return shape_series(readings, metric, self._local_tz)

    def get_charts(
            self,
            enclosure_id: str,
            window: Union[TimeWindow, str],
            now: Optional[datetime] = None
    ) -> Dict[Metric, ChartSeries]:
        """Chart series of every metric from a single fetch."""
        readings = self.get_readings(enclosure_id, window, now)
        return {
            metric: shape_series(readings, metric, self._local_tz)
            for metric in Metric
        }
