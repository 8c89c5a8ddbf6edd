# main.py

"""
Status reporter for the Habitat Condition System.

Wires MongoDB-backed stores into the domain services and periodically logs
the current conditions of every enclosure.

Usage:
    python main.py                 # report every REPORT_INTERVAL_SECONDS
    python main.py --once          # single report
    python main.py --seed-species  # write the built-in species catalog to MongoDB
"""

import os
import sys
import time

from dotenv import load_dotenv
from pymongo.database import Database

# Domain layer
from domain.models import CurrentConditions, Metric
from domain.services import ConditionMonitoringService

# MongoDB adapters
from adapters.mongodb.connection import MongoDBConnection
from adapters.mongodb.repositories import (
    MongoDBReadingRepository,
    MongoDBEnclosureRepository,
    MongoDBSpeciesProfileRepository,
    seed_species_profiles
)

# Util adapters
from adapters.memory.species_catalog import builtin_profiles
from adapters.utils.logger import get_logger
from adapters.utils.time_providers import SystemTimeProvider, load_timezone

# Load environment variables from .env file
load_dotenv()

DEFAULT_REPORT_INTERVAL_SECONDS = 300

METRIC_LABELS = {
    Metric.HUMIDITY: "Humidity",
    Metric.AIR_TEMPERATURE: "Air Temp",
    Metric.SURFACE_TEMPERATURE: "Surface Temp",
}


def connect_database(log) -> Database:
    return MongoDBConnection.from_env(logger=log).get_database()


def create_app() -> dict:
    """
    Create the services backed by MongoDB.

    Returns:
        Dict with services, repositories and the logger
    """
    log = get_logger()
    log("=" * 60)
    log("🦎 GECKOWATCH HABITAT CONDITION REPORTER")
    log("=" * 60)

    db = connect_database(log)

    timezone_name = os.getenv("LOCAL_TIMEZONE", "UTC")
    local_tz = load_timezone(timezone_name)
    time_provider = SystemTimeProvider()

    enclosure_repo = MongoDBEnclosureRepository(db)
    reading_repo = MongoDBReadingRepository(db)
    species_repo = MongoDBSpeciesProfileRepository(db)

    species = species_repo.list_species()
    if not species:
        log.warning("No species profiles in MongoDB - run with --seed-species")
    else:
        log.info(f"Loaded {len(species)} species profile(s)", {"species": ", ".join(species)})

    monitoring = ConditionMonitoringService(
        enclosure_repository=enclosure_repo,
        reading_repository=reading_repo,
        species_repository=species_repo,
        time_provider=time_provider,
        local_timezone=local_tz,
        logger=log
    )

    log.info(f"Local timezone: {timezone_name}")

    return {
        'db': db,
        'monitoring': monitoring,
        'enclosure_repo': enclosure_repo,
        'reading_repo': reading_repo,
        'species_repo': species_repo,
        'logger': log
    }


def format_conditions(conditions: CurrentConditions) -> str:
    """One-line summary, e.g. 'tank-1 (Leopard Gecko, day): Humidity 35.0% [optimal] ...'"""
    species = conditions.species or "no species"
    parts = [
        f"{METRIC_LABELS[metric]} {result.display_value} [{result.severity.value}]"
        for metric in Metric
        for result in [conditions.for_metric(metric)]
    ]
    return f"{conditions.enclosure_id} ({species}, {conditions.period.value}): " + " | ".join(parts)


def report_once(app: dict) -> int:
    """Log current conditions of every enclosure. Returns how many were reported."""
    log = app['logger']
    all_conditions = app['monitoring'].get_all_current_conditions()

    if not all_conditions:
        log.warning("No enclosures configured")
        return 0

    for conditions in all_conditions:
        log.info(format_conditions(conditions))
    return len(all_conditions)


def run_report_loop(app: dict, interval_seconds: int):
    """Report forever, every `interval_seconds`."""
    log = app['logger']
    log.info(f"🔄 Reporting every {interval_seconds}s (Ctrl+C to stop)")

    while True:
        try:
            report_once(app)
        except Exception as e:
            # Keep reporting after a failed cycle
            log.error("Report failed", exception=e)
        time.sleep(interval_seconds)


def seed_species(db: Database, log) -> int:
    """Write the built-in catalog without loading what is stored (it may be corrupt)."""
    count = seed_species_profiles(db, builtin_profiles())
    log.info(f"✓ Seeded {count} species profile(s)")
    return count


def main():
    """Main entry point"""
    if '--seed-species' in sys.argv:
        log = get_logger()
        try:
            seed_species(connect_database(log), log)
        finally:
            MongoDBConnection.reset()
        return

    app = create_app()

    try:
        if '--once' in sys.argv:
            report_once(app)
        else:
            interval = int(os.getenv("REPORT_INTERVAL_SECONDS", DEFAULT_REPORT_INTERVAL_SECONDS))
            run_report_loop(app, interval)
    except KeyboardInterrupt:
        app['logger'].info("👋 Stopped")
    finally:
        MongoDBConnection.reset()


if __name__ == '__main__':
    main()
