# adapters/memory/species_catalog.py

"""
Built-in optimal conditions for the supported gecko species.
Temperatures in °C, humidity in % relative humidity.
"""

from typing import List

from domain.models import (
    ConditionRange,
    HumidityProfile,
    SpeciesProfile,
    TemperatureProfile
)


def _r(min_value: float, max_value: float, ideal: float) -> ConditionRange:
    return ConditionRange(min_value=min_value, max_value=max_value, ideal=ideal)


def builtin_profiles() -> List[SpeciesProfile]:
    """Profiles of the built-in catalog, in display order."""
    return [
        SpeciesProfile(
            species="Leopard Gecko",
            temperature=TemperatureProfile(
                day=_r(24, 29, 27),
                night=_r(18, 23, 21),
                basking=_r(30, 35, 32)
            ),
            humidity=HumidityProfile(
                day=_r(30, 40, 35),
                night=_r(40, 50, 45)
            ),
            description="Desert species that requires low humidity and a warm basking spot."
        ),
        SpeciesProfile(
            species="Crested Gecko",
            temperature=TemperatureProfile(
                day=_r(22, 26, 24),
                night=_r(18, 22, 20)
            ),
            humidity=HumidityProfile(
                day=_r(50, 70, 60),
                night=_r(60, 80, 70)
            ),
            description="Tropical species that prefers moderate temperatures and higher humidity."
        ),
        SpeciesProfile(
            species="Day Gecko",
            temperature=TemperatureProfile(
                day=_r(25, 30, 28),
                night=_r(20, 24, 22),
                basking=_r(32, 38, 35)
            ),
            humidity=HumidityProfile(
                day=_r(50, 70, 60),
                night=_r(60, 80, 70)
            ),
            description=(
                "Active diurnal species that needs UVB lighting, warm temperatures, "
                "and moderate to high humidity."
            )
        ),
        SpeciesProfile(
            species="Gargoyle Gecko",
            temperature=TemperatureProfile(
                day=_r(22, 26, 24),
                night=_r(18, 22, 20)
            ),
            humidity=HumidityProfile(
                day=_r(50, 70, 60),
                night=_r(60, 80, 70)
            ),
            description="Similar to Crested Geckos, they prefer moderate temperatures and higher humidity."
        ),
        SpeciesProfile(
            species="African Fat-Tailed Gecko",
            temperature=TemperatureProfile(
                day=_r(25, 29, 27),
                night=_r(21, 24, 22),
                basking=_r(30, 33, 31)
            ),
            humidity=HumidityProfile(
                day=_r(40, 60, 50),
                night=_r(50, 70, 60)
            ),
            description="Similar to Leopard Geckos but prefer slightly higher humidity levels."
        ),
    ]
