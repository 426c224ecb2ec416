"""
BeerBarBrewery Backend - Bar Route Handlers
=============================================

What:  /api/bar endpoints: CRUD, bars with the beers they serve, beers
       served at one bar, and assigning a beer to a bar.
How:   Same shape as the beer router. Assignment outcomes map as:
           SUCCESS, ALREADY_EXISTS → 200 with a message
           NOT_FOUND               → 404
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from app.dependencies import get_bar_service
from app.domain.models import AssignmentResult
from app.exceptions import NotFoundError, ValidationError
from app.mapping import (
    bar_beer_request_to_model,
    bar_request_to_model,
    bar_to_response,
    bar_to_with_beer_response,
    beer_to_response,
)
from app.routes.common import ensure_valid_id
from app.schemas.bar import BarBeerRequest, BarResponse, BarWithBeerResponse, CreateBarRequest
from app.schemas.beer import BeerResponse
from app.schemas.common import BAD_REQUEST, NOT_FOUND, SERVER_ERROR, MessageResponse
from app.services.bar_service import BarService

router = APIRouter(prefix="/api/bar", tags=["Bar"], responses={**SERVER_ERROR})

INVALID_ID = "Invalid bar ID."


def _not_found(bar_id: int) -> NotFoundError:
    return NotFoundError(f"Bar with ID {bar_id} not found.", resource="bar", resource_id=bar_id)


@router.get(
    "",
    response_model=List[BarResponse],
    responses={**NOT_FOUND},
    summary="List all bars",
)
async def get_all_bars(service: BarService = Depends(get_bar_service)) -> List[BarResponse]:
    bars = await service.get_all()
    if not bars:
        raise NotFoundError("Bar data not found.", resource="bar")
    return [bar_to_response(bar) for bar in bars]


@router.get(
    "/beer",
    response_model=List[BarWithBeerResponse],
    responses={**NOT_FOUND},
    summary="List all bars with the beers they serve",
)
async def get_all_bars_with_beers(
    service: BarService = Depends(get_bar_service),
) -> List[BarWithBeerResponse]:
    bars = await service.get_all_with_beers()
    if not bars:
        raise NotFoundError("No bars with associated beers found.", resource="bar")
    return [bar_to_with_beer_response(bar) for bar in bars]


@router.post(
    "/beer",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Assign a beer to a bar",
    description="Idempotent: assigning a pair that already exists is reported, not an error.",
)
async def assign_beer_to_bar(
    body: BarBeerRequest,
    service: BarService = Depends(get_bar_service),
) -> MessageResponse:
    if body.bar_id <= 0 or body.beer_id <= 0:
        raise ValidationError("Invalid BarId or BeerId.")

    result = await service.assign_beer(bar_beer_request_to_model(body))

    if result is AssignmentResult.NOT_FOUND:
        raise NotFoundError(
            f"Bar with ID {body.bar_id} or Beer with ID {body.beer_id} not found.",
            resource="bar",
            context={"beer_id": body.beer_id},
        )
    if result is AssignmentResult.ALREADY_EXISTS:
        return MessageResponse(message="Beer already assigned to bar.")
    return MessageResponse(message="Beer assigned to bar successfully.")


@router.get(
    "/{bar_id}",
    response_model=BarResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a single bar by ID",
)
async def get_bar_by_id(
    bar_id: int,
    service: BarService = Depends(get_bar_service),
) -> BarResponse:
    ensure_valid_id(bar_id, INVALID_ID)

    bar = await service.get_by_id(bar_id)
    if bar is None:
        raise _not_found(bar_id)
    return bar_to_response(bar)


@router.get(
    "/{bar_id}/beer",
    response_model=List[BeerResponse],
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="List the beers served at a bar",
)
async def get_beers_served_at_bar(
    bar_id: int,
    service: BarService = Depends(get_bar_service),
) -> List[BeerResponse]:
    ensure_valid_id(bar_id, INVALID_ID)

    beers = await service.get_beers_served_at(bar_id)
    if not beers:
        raise NotFoundError(f"No beers found for bar ID {bar_id}.", resource="bar", resource_id=bar_id)
    return [beer_to_response(beer) for beer in beers]


@router.post(
    "",
    response_model=BarResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST},
    summary="Create a bar",
)
async def create_bar(
    body: CreateBarRequest,
    request: Request,
    response: Response,
    service: BarService = Depends(get_bar_service),
) -> BarResponse:
    bar = await service.create(bar_request_to_model(body))

    response.headers["Location"] = str(request.url_for("get_bar_by_id", bar_id=bar.id))
    return bar_to_response(bar)


@router.put(
    "/{bar_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Replace a bar's fields",
)
async def update_bar(
    bar_id: int,
    body: CreateBarRequest,
    service: BarService = Depends(get_bar_service),
) -> MessageResponse:
    ensure_valid_id(bar_id, INVALID_ID)

    if not await service.update(bar_id, bar_request_to_model(body)):
        raise _not_found(bar_id)
    return MessageResponse(message="Bar updated successfully.")


@router.delete(
    "/{bar_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a bar",
    description="Removes the bar and its beer assignments.",
)
async def delete_bar(
    bar_id: int,
    service: BarService = Depends(get_bar_service),
) -> MessageResponse:
    ensure_valid_id(bar_id, INVALID_ID)

    if not await service.delete(bar_id):
        raise _not_found(bar_id)
    return MessageResponse(message="Bar record deleted successfully.")
