"""
Property listing API endpoints for CRUD operations and filtering.
"""

from fastapi import APIRouter, Depends, status, Path
from fastapi.responses import Response
from typing import List, Optional

from estate_api.models.property import PropertyType
from estate_api.services.property import PropertyService
from estate_api.schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from estate_api.schemas.error import (
    get_read_error_responses,
    get_write_error_responses,
    get_list_error_responses
)
from estate_api.utils.dependencies import get_property_service
from estate_api.utils.validators import parse_positive_int, parse_limit, parse_enum


router = APIRouter(prefix="/properties", tags=["Properties"])


def _to_response(property_obj) -> PropertyResponse:
    return PropertyResponse.model_validate(property_obj.to_dict())


@router.get(
    "",
    response_model=List[PropertyResponse],
    status_code=status.HTTP_200_OK,
    summary="List properties",
    description="Get every listing in insertion order",
    responses={500: get_list_error_responses()[500]}
)
async def list_properties(
    property_service: PropertyService = Depends(get_property_service)
) -> List[PropertyResponse]:
    properties = await property_service.list_properties()
    return [_to_response(prop) for prop in properties]


async def _featured(property_service: PropertyService, limit: Optional[str]) -> List[PropertyResponse]:
    parsed_limit = parse_limit(limit) if limit is not None else None
    properties = await property_service.get_featured_properties(parsed_limit)
    return [_to_response(prop) for prop in properties]


@router.get(
    "/featured",
    response_model=List[PropertyResponse],
    summary="Featured properties",
    description="Get featured listings, newest first, using the default limit",
    responses=get_list_error_responses()
)
async def get_featured_properties(
    property_service: PropertyService = Depends(get_property_service)
) -> List[PropertyResponse]:
    return await _featured(property_service, None)


@router.get(
    "/featured/{limit}",
    response_model=List[PropertyResponse],
    summary="Featured properties with limit",
    description="Get at most `limit` featured listings, newest first",
    responses=get_list_error_responses()
)
async def get_featured_properties_with_limit(
    limit: str = Path(..., description="Maximum number of listings"),
    property_service: PropertyService = Depends(get_property_service)
) -> List[PropertyResponse]:
    return await _featured(property_service, limit)


@router.get(
    "/type/{property_type}",
    response_model=List[PropertyResponse],
    summary="Properties by type",
    description="Get listings of one property type: residential, commercial, land or industrial",
    responses=get_list_error_responses()
)
async def list_properties_by_type(
    property_type: str = Path(..., description="Property type"),
    property_service: PropertyService = Depends(get_property_service)
) -> List[PropertyResponse]:
    """
    Get listings of a single type.

    Raises:
        InvalidFilterError: If the type is not a known property type
    """
    parsed_type = parse_enum(PropertyType, property_type, "property type")
    properties = await property_service.list_properties_by_type(parsed_type)
    return [_to_response(prop) for prop in properties]


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Get property details",
    responses=get_read_error_responses()
)
async def get_property(
    property_id: str = Path(..., description="Property ID"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    """
    Get a single listing.

    Raises:
        InvalidIdentifierError: If the ID is not a positive integer
        PropertyNotFoundError: If no listing has this ID
    """
    property_obj = await property_service.get_property(parse_positive_int(property_id, "property ID"))
    return _to_response(property_obj)


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new property",
    responses=get_write_error_responses()
)
async def create_property(
    property_data: PropertyCreate,
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    """
    Create a new listing.

    Args:
        property_data: Validated property fields

    Returns:
        Created listing with `id` and `createdAt` populated
    """
    property_obj = await property_service.create_property(property_data)
    return _to_response(property_obj)


@router.put(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Update property",
    description="Partially update a listing; fields left out keep their value",
    responses=get_write_error_responses()
)
async def update_property(
    property_data: PropertyUpdate,
    property_id: str = Path(..., description="Property ID"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    updated_property = await property_service.update_property(
        parse_positive_int(property_id, "property ID"), property_data
    )
    return _to_response(updated_property)


@router.delete(
    "/{property_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete property",
    responses=get_read_error_responses()
)
async def delete_property(
    property_id: str = Path(..., description="Property ID"),
    property_service: PropertyService = Depends(get_property_service)
) -> Response:
    await property_service.delete_property(parse_positive_int(property_id, "property ID"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
