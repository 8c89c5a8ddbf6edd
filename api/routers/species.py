# api/routers/species.py

"""
Species profile endpoints for the Geckowatch API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_species_repository
from api.models.schemas import (
    ConditionRangeResponse,
    HumidityRangesResponse,
    SpeciesProfileResponse,
    TemperatureRangesResponse
)
from domain.models import ConditionRange, SpeciesProfile
from domain.ports import SpeciesProfileRepository

router = APIRouter(prefix="/species", tags=["Species"])


@router.get("", response_model=list[SpeciesProfileResponse])
def list_species(species_repo: SpeciesProfileRepository = Depends(get_species_repository)):
    """List all supported species and their optimal conditions."""
    return [profile_to_response(p) for p in species_repo.list_profiles()]


@router.get("/{species}", response_model=SpeciesProfileResponse)
def get_species_profile(
    species: str,
    species_repo: SpeciesProfileRepository = Depends(get_species_repository)
):
    """Get optimal conditions for a specific species."""
    profile = species_repo.get_profile(species)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Species {species} not found")
    return profile_to_response(profile)


def _range_to_response(condition_range: Optional[ConditionRange]) -> Optional[ConditionRangeResponse]:
    if condition_range is None:
        return None
    return ConditionRangeResponse(
        min=condition_range.min_value,
        max=condition_range.max_value,
        ideal=condition_range.ideal
    )


def profile_to_response(profile: SpeciesProfile) -> SpeciesProfileResponse:
    """Convert domain profile to response model."""
    return SpeciesProfileResponse(
        species=profile.species,
        temperature=TemperatureRangesResponse(
            day=_range_to_response(profile.temperature.day),
            night=_range_to_response(profile.temperature.night),
            basking=_range_to_response(profile.temperature.basking)
        ),
        humidity=HumidityRangesResponse(
            day=_range_to_response(profile.humidity.day),
            night=_range_to_response(profile.humidity.night)
        ),
        description=profile.description
    )
