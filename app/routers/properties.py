"""
Property API endpoints: public search, map and featured queries,
owner listings, and listing CRUD with ownership checks.
"""

from fastapi import APIRouter, Depends, status, Query, Path, Response
from typing import Optional, List, Union
from decimal import Decimal
from uuid import UUID

from app.config import settings
from app.models.user import User
from app.models.property import PropertyType, ListingType, AMENITIES
from app.services.property import PropertyService
from app.schemas.property import (
    SortOption,
    PropertyCreate,
    PropertyUpdate,
    PropertyResponse,
    PropertyDetailResponse,
    PropertyListResponse,
    PropertyCollectionResponse,
    PropertySearchParams,
    MapSearchParams,
    AmenitiesResponse,
)
from app.schemas.error import get_crud_error_responses, get_error_responses
from app.utils.dependencies import (
    get_current_active_user,
    get_optional_current_user,
    get_listing_manager,
    get_property_service,
)
from app.utils.pagination import clamp_page, total_pages


router = APIRouter(prefix="/properties", tags=["Properties"])


async def search_query_params(
    # Search parameters
    query: Optional[str] = Query(None, description="Matches title, description, address or city"),
    listing_type: Optional[ListingType] = Query(None, description="sale or rent"),
    property_type: Optional[PropertyType] = Query(None, description="Property type"),

    # Price filters
    min_price: Optional[Decimal] = Query(None, description="Minimum price"),
    max_price: Optional[Decimal] = Query(None, description="Maximum price"),

    # Size and room filters
    bedrooms: Optional[int] = Query(None, description="Minimum number of bedrooms"),
    bathrooms: Optional[int] = Query(None, description="Minimum number of bathrooms"),
    min_sqft: Optional[int] = Query(None, description="Minimum area in square feet"),
    max_sqft: Optional[int] = Query(None, description="Maximum area in square feet"),

    # Location filters
    city: Optional[str] = Query(None, description="City, case-insensitive substring"),
    state: Optional[str] = Query(None, description="State or province, case-insensitive substring"),
    amenities: Optional[List[str]] = Query(None, description="Required amenities; repeat for several"),

    # Map viewport
    north: Optional[float] = Query(None, description="Northern latitude of the viewport"),
    south: Optional[float] = Query(None, description="Southern latitude of the viewport"),
    east: Optional[float] = Query(None, description="Eastern longitude of the viewport"),
    west: Optional[float] = Query(None, description="Western longitude of the viewport"),

    # Sorting and pagination
    sort: SortOption = Query(SortOption.NEWEST, description="newest, oldest, price_asc or price_desc"),
    page: int = Query(1, description="Page number, values below 1 mean the first page"),
    limit: int = Query(settings.default_page_size, description="Results per page (1-100)"),
    featured: Optional[int] = Query(None, description="Return only the N newest active listings")
) -> dict:
    return dict(
        query=query,
        listing_type=listing_type,
        property_type=property_type,
        min_price=min_price,
        max_price=max_price,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        min_sqft=min_sqft,
        max_sqft=max_sqft,
        city=city,
        state=state,
        amenities=amenities or [],
        north=north,
        south=south,
        east=east,
        west=west,
        sort=sort,
        page=page,
        limit=limit,
        featured=featured,
    )


@router.get(
    "",
    response_model=Union[PropertyListResponse, PropertyCollectionResponse],
    status_code=status.HTTP_200_OK,
    summary="Search properties",
    description="Paginated search over active listings. With `featured=N` returns the N newest instead.",
    responses=get_error_responses(422, 500)
)
async def list_properties(
    raw_params: dict = Depends(search_query_params),
    property_service: PropertyService = Depends(get_property_service)
) -> Union[PropertyListResponse, PropertyCollectionResponse]:
    """
    Search active listings.

    Returns:
        A page of results with totals, or the flat featured collection

    Raises:
        ValidationError: For malformed or inconsistent criteria (422)
    """
    params = PropertySearchParams(**raw_params)

    if params.featured is not None:
        featured = await property_service.get_featured(params.featured)
        return PropertyCollectionResponse(
            data=[PropertyResponse.model_validate(p) for p in featured],
            total=len(featured)
        )

    properties, total = await property_service.search_properties(params)
    return PropertyListResponse(
        data=[PropertyResponse.model_validate(p) for p in properties],
        total=total,
        page=params.page,
        limit=params.limit,
        total_pages=total_pages(total, params.limit)
    )


@router.get(
    "/map",
    response_model=PropertyCollectionResponse,
    status_code=status.HTTP_200_OK,
    summary="Properties in a map viewport",
    description="Active listings with coordinates inside north/south/east/west, at most 100",
    responses=get_error_responses(422, 500)
)
async def map_properties(
    raw_params: dict = Depends(search_query_params),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyCollectionResponse:
    params = MapSearchParams(**raw_params)
    properties, total = await property_service.map_search(params)
    return PropertyCollectionResponse(
        data=[PropertyResponse.model_validate(p) for p in properties],
        total=total
    )


@router.get(
    "/amenities",
    response_model=AmenitiesResponse,
    summary="Amenity vocabulary"
)
async def list_amenities() -> AmenitiesResponse:
    return AmenitiesResponse(amenities=list(AMENITIES))


@router.get(
    "/mine",
    response_model=PropertyListResponse,
    status_code=status.HTTP_200_OK,
    summary="Listings I manage",
    description="Owners get their own listings in every status, admins get all, buyers get none",
    responses=get_error_responses(401, 403, 422)
)
async def list_my_properties(
    page: int = Query(1, description="Page number"),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user: User = Depends(get_current_active_user),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyListResponse:
    page = clamp_page(page)
    properties, total = await property_service.list_mine(current_user, page, limit)
    return PropertyListResponse(
        data=[PropertyResponse.model_validate(p) for p in properties],
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit)
    )


@router.post(
    "",
    response_model=PropertyDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new property",
    description="Create a new listing owned by the caller. Requires owner or admin role.",
    responses=get_crud_error_responses()
)
async def create_property(
    property_data: PropertyCreate,
    current_user: User = Depends(get_listing_manager),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyDetailResponse:
    """
    Create a new property listing.

    Raises:
        InsufficientPermissionsError: If user is not an owner or admin
    """
    property_obj = await property_service.create_property(property_data, current_user)
    return PropertyDetailResponse.model_validate(property_obj)


@router.get(
    "/{property_id}",
    response_model=PropertyDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get property by ID",
    description="Drafts and closed listings are only visible to their owner and admins",
    responses=get_error_responses(404, 422)
)
async def get_property(
    property_id: UUID = Path(..., description="Property ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyDetailResponse:
    property_obj = await property_service.get_property(property_id, current_user)
    return PropertyDetailResponse.model_validate(property_obj)


@router.patch(
    "/{property_id}",
    response_model=PropertyDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Update property",
    description="Partial update by the listing owner or an admin. Unknown fields are ignored.",
    responses=get_crud_error_responses()
)
async def update_property(
    property_data: PropertyUpdate,
    property_id: UUID = Path(..., description="Property ID"),
    current_user: User = Depends(get_current_active_user),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyDetailResponse:
    """
    Update a listing.

    Raises:
        NotFoundError: If property doesn't exist
        InsufficientPermissionsError: If caller is neither owner nor admin
    """
    property_obj = await property_service.update_property(property_id, property_data, current_user)
    return PropertyDetailResponse.model_validate(property_obj)


@router.delete(
    "/{property_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete property",
    description="Deletes the listing, its images, enquiries and saves",
    responses=get_crud_error_responses()
)
async def delete_property(
    property_id: UUID = Path(..., description="Property ID"),
    current_user: User = Depends(get_current_active_user),
    property_service: PropertyService = Depends(get_property_service)
) -> Response:
    await property_service.delete_property(property_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
