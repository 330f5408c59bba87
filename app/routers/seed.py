"""
Seeding endpoints for demo data.
"""

from fastapi import APIRouter, Depends, status, Query

from app.models.user import User
from app.seed import SEED_CITY
from app.seed.reference_data import CITIES
from app.services.seed import SeedService
from app.schemas.seed import SeedResponse, SeededProperty
from app.schemas.error import get_error_responses
from app.utils.dependencies import get_listing_manager, get_seed_service


router = APIRouter(prefix="/seed", tags=["Seed"])


@router.post(
    "",
    response_model=SeedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Seed curated listings",
    description="Insert the curated Ottawa listings as active listings owned by the caller",
    responses=get_error_responses(401, 403, 500)
)
async def seed_curated(
    current_user: User = Depends(get_listing_manager),
    seed_service: SeedService = Depends(get_seed_service)
) -> SeedResponse:
    properties = await seed_service.seed_curated(current_user)
    return SeedResponse(
        message=f"Seeded {len(properties)} properties in {SEED_CITY}",
        data=[SeededProperty.model_validate(p) for p in properties]
    )


@router.post(
    "/generated",
    response_model=SeedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Seed generated listings",
    description="Insert 20 generated listings for each of the first N North American cities",
    responses=get_error_responses(400, 401, 403, 422, 500)
)
async def seed_generated(
    cities: int = Query(1, ge=1, le=len(CITIES), description="Number of cities to generate"),
    current_user: User = Depends(get_listing_manager),
    seed_service: SeedService = Depends(get_seed_service)
) -> SeedResponse:
    properties = await seed_service.seed_generated(current_user, cities)
    return SeedResponse(
        message=f"Seeded {len(properties)} properties across {cities} cities",
        data=[SeededProperty.model_validate(p) for p in properties]
    )
