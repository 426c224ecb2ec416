"""
BeerBarBrewery Backend - Brewery Route Handlers
=================================================

What:  /api/brewery endpoints: CRUD, breweries with their beers, and
       assigning a beer to a brewery.
How:   Same shape as the beer router. Assignment outcomes map as:
           SUCCESS, ALREADY_EXISTS → 200 with a message
           NOT_FOUND               → 404
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from app.dependencies import get_brewery_service
from app.domain.models import AssignmentResult
from app.exceptions import NotFoundError, ValidationError
from app.mapping import (
    brewery_beer_request_to_model,
    brewery_request_to_model,
    brewery_to_response,
    brewery_to_with_beer_response,
)
from app.routes.common import ensure_valid_id
from app.schemas.brewery import (
    BreweryBeerRequest,
    BreweryResponse,
    BreweryWithBeerResponse,
    CreateBreweryRequest,
)
from app.schemas.common import BAD_REQUEST, NOT_FOUND, SERVER_ERROR, MessageResponse
from app.services.brewery_service import BreweryService

router = APIRouter(prefix="/api/brewery", tags=["Brewery"], responses={**SERVER_ERROR})

INVALID_ID = "Invalid brewery ID."


def _not_found(brewery_id: int) -> NotFoundError:
    return NotFoundError(
        f"Brewery with ID {brewery_id} not found.", resource="brewery", resource_id=brewery_id
    )


@router.get(
    "",
    response_model=List[BreweryResponse],
    responses={**NOT_FOUND},
    summary="List all breweries",
)
async def get_all_breweries(
    service: BreweryService = Depends(get_brewery_service),
) -> List[BreweryResponse]:
    breweries = await service.get_all()
    if not breweries:
        raise NotFoundError("Breweries data not found.", resource="brewery")
    return [brewery_to_response(brewery) for brewery in breweries]


@router.get(
    "/beer",
    response_model=List[BreweryWithBeerResponse],
    responses={**NOT_FOUND},
    summary="List all breweries with their beers",
)
async def get_all_breweries_with_beers(
    service: BreweryService = Depends(get_brewery_service),
) -> List[BreweryWithBeerResponse]:
    breweries = await service.get_all_with_beers()
    if not breweries:
        raise NotFoundError("Breweries data not found.", resource="brewery")
    return [brewery_to_with_beer_response(brewery) for brewery in breweries]


@router.post(
    "/beer",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Assign a beer to a brewery",
    description="Idempotent: assigning a beer to the brewery it already belongs to is reported, not an error.",
)
async def assign_beer_to_brewery(
    body: BreweryBeerRequest,
    service: BreweryService = Depends(get_brewery_service),
) -> MessageResponse:
    if body.brewery_id <= 0 or body.beer_id <= 0:
        raise ValidationError("Invalid BreweryId or BeerId.")

    result = await service.assign_beer(brewery_beer_request_to_model(body))

    if result is AssignmentResult.NOT_FOUND:
        raise NotFoundError(
            f"Brewery with ID {body.brewery_id} or Beer with ID {body.beer_id} not found.",
            resource="brewery",
            context={"beer_id": body.beer_id},
        )
    if result is AssignmentResult.ALREADY_EXISTS:
        return MessageResponse(message="Beer already assigned to brewery.")
    return MessageResponse(message="Beer assigned to brewery successfully.")


@router.get(
    "/{brewery_id}",
    response_model=BreweryResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a single brewery by ID",
)
async def get_brewery_by_id(
    brewery_id: int,
    service: BreweryService = Depends(get_brewery_service),
) -> BreweryResponse:
    ensure_valid_id(brewery_id, INVALID_ID)

    brewery = await service.get_by_id(brewery_id)
    if brewery is None:
        raise _not_found(brewery_id)
    return brewery_to_response(brewery)


@router.get(
    "/{brewery_id}/beer",
    response_model=BreweryWithBeerResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a brewery with its beers",
)
async def get_brewery_with_beers(
    brewery_id: int,
    service: BreweryService = Depends(get_brewery_service),
) -> BreweryWithBeerResponse:
    ensure_valid_id(brewery_id, INVALID_ID)

    brewery = await service.get_by_id(brewery_id)
    if brewery is None:
        raise _not_found(brewery_id)
    return brewery_to_with_beer_response(brewery)


@router.post(
    "",
    response_model=BreweryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST},
    summary="Create a brewery",
)
async def create_brewery(
    body: CreateBreweryRequest,
    request: Request,
    response: Response,
    service: BreweryService = Depends(get_brewery_service),
) -> BreweryResponse:
    brewery = await service.create(brewery_request_to_model(body))

    response.headers["Location"] = str(
        request.url_for("get_brewery_by_id", brewery_id=brewery.id)
    )
    return brewery_to_response(brewery)


@router.put(
    "/{brewery_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Rename a brewery",
)
async def update_brewery(
    brewery_id: int,
    body: CreateBreweryRequest,
    service: BreweryService = Depends(get_brewery_service),
) -> MessageResponse:
    ensure_valid_id(brewery_id, INVALID_ID)

    if not await service.update(brewery_id, brewery_request_to_model(body)):
        raise _not_found(brewery_id)
    return MessageResponse(message="Brewery updated successfully.")


@router.delete(
    "/{brewery_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a brewery",
    description="The brewery's beers are kept; their breweryId becomes null.",
)
async def delete_brewery(
    brewery_id: int,
    service: BreweryService = Depends(get_brewery_service),
) -> MessageResponse:
    ensure_valid_id(brewery_id, INVALID_ID)

    if not await service.delete(brewery_id):
        raise _not_found(brewery_id)
    return MessageResponse(message="Brewery deleted successfully.")
