"""
BeerBarBrewery Backend - Beer Route Handlers
==============================================

What:  /api/beer endpoints: CRUD and search by alcohol-by-volume range.
How:   Validates ids and range bounds, maps request schemas to domain models,
       delegates to BeerService, and raises NotFoundError for None / False /
       empty results. Error bodies are shaped by the handlers in main.py.

Route order matters: the static paths (/all) are declared before /{beer_id}.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.dependencies import get_beer_service
from app.exceptions import NotFoundError, ValidationError
from app.mapping import beer_request_to_model, beer_to_response
from app.routes.common import ensure_valid_id
from app.schemas.beer import BeerResponse, CreateBeerRequest
from app.schemas.common import BAD_REQUEST, NOT_FOUND, SERVER_ERROR, MessageResponse
from app.services.beer_service import BeerService

router = APIRouter(prefix="/api/beer", tags=["Beer"], responses={**SERVER_ERROR})

INVALID_ID = "Invalid beer ID."


def _not_found(beer_id: int) -> NotFoundError:
    return NotFoundError(f"Beer with ID {beer_id} not found.", resource="beer", resource_id=beer_id)


@router.get(
    "",
    response_model=List[BeerResponse],
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Search beers by alcohol-by-volume range",
    description=(
        "Returns beers whose ABV is strictly greater than gtAlcoholByVolume and strictly "
        "less than ltAlcoholByVolume. At least one bound is required."
    ),
)
async def get_beers_by_alcohol_range(
    gt_alcohol_by_volume: Optional[float] = Query(
        default=None, alias="gtAlcoholByVolume", description="Exclusive lower bound"
    ),
    lt_alcohol_by_volume: Optional[float] = Query(
        default=None, alias="ltAlcoholByVolume", description="Exclusive upper bound"
    ),
    service: BeerService = Depends(get_beer_service),
) -> List[BeerResponse]:
    if gt_alcohol_by_volume is None and lt_alcohol_by_volume is None:
        raise ValidationError(
            "At least one of gtAlcoholByVolume or ltAlcoholByVolume must be provided."
        )

    if (gt_alcohol_by_volume is not None and gt_alcohol_by_volume < 0) or (
        lt_alcohol_by_volume is not None and lt_alcohol_by_volume < 0
    ):
        raise ValidationError("Alcohol content values must be greater than or equal to 0.")

    if (
        gt_alcohol_by_volume is not None
        and lt_alcohol_by_volume is not None
        and gt_alcohol_by_volume >= lt_alcohol_by_volume
    ):
        raise ValidationError("Minimum alcohol volume must be less than maximum.")

    beers = await service.get_by_alcohol_range(gt_alcohol_by_volume, lt_alcohol_by_volume)
    if not beers:
        raise NotFoundError(
            "No beer records found with the above range of alcohol by volume.", resource="beer"
        )
    return [beer_to_response(beer) for beer in beers]


@router.get(
    "/all",
    response_model=List[BeerResponse],
    responses={**NOT_FOUND},
    summary="List all beers",
)
async def get_all_beers(service: BeerService = Depends(get_beer_service)) -> List[BeerResponse]:
    beers = await service.get_all()
    if not beers:
        raise NotFoundError("Beer data not found.", resource="beer")
    return [beer_to_response(beer) for beer in beers]


@router.get(
    "/{beer_id}",
    response_model=BeerResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a single beer by ID",
)
async def get_beer_by_id(
    beer_id: int,
    service: BeerService = Depends(get_beer_service),
) -> BeerResponse:
    ensure_valid_id(beer_id, INVALID_ID)

    beer = await service.get_by_id(beer_id)
    if beer is None:
        raise _not_found(beer_id)
    return beer_to_response(beer)


@router.post(
    "",
    response_model=BeerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST},
    summary="Create a beer",
)
async def create_beer(
    body: CreateBeerRequest,
    request: Request,
    response: Response,
    service: BeerService = Depends(get_beer_service),
) -> BeerResponse:
    beer = await service.create(beer_request_to_model(body))

    response.headers["Location"] = str(request.url_for("get_beer_by_id", beer_id=beer.id))
    return beer_to_response(beer)


@router.put(
    "/{beer_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Replace a beer's fields",
)
async def update_beer(
    beer_id: int,
    body: CreateBeerRequest,
    service: BeerService = Depends(get_beer_service),
) -> MessageResponse:
    ensure_valid_id(beer_id, INVALID_ID)

    if not await service.update(beer_id, beer_request_to_model(body)):
        raise _not_found(beer_id)
    return MessageResponse(message="Beer updated successfully.")


@router.delete(
    "/{beer_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a beer",
)
async def delete_beer(
    beer_id: int,
    service: BeerService = Depends(get_beer_service),
) -> MessageResponse:
    ensure_valid_id(beer_id, INVALID_ID)

    if not await service.delete(beer_id):
        raise _not_found(beer_id)
    return MessageResponse(message="Beer deleted successfully.")
