"""
BeerBarBrewery Backend - Object Mapping
=========================================

What:  Explicit conversions between the three shapes each concept has:
           wire schema  ↔  domain model  ↔  ORM entity
How:   One small function per direction and pair. Nothing is copied by
       reflection, so every field that crosses a boundary is visible here.
Who:   Routes use the schema ↔ model functions; services use the
       model ↔ entity functions.

Async note:
    Relationship collections are only read when the caller asks for them
    (include_beers=True) and has eagerly loaded them. Touching an unloaded
    relationship on an AsyncSession would trigger implicit IO and fail.
"""

from decimal import Decimal
from typing import List

from app.domain.models import (
    BarBeerModel,
    BarModel,
    BeerModel,
    BreweryBeerModel,
    BreweryModel,
    CreateBarModel,
    CreateBeerModel,
    CreateBreweryModel,
)
from app.models.bar import Bar
from app.models.beer import Beer
from app.models.brewery import Brewery
from app.schemas.bar import (
    BarBeerRequest,
    BarResponse,
    BarWithBeerResponse,
    CreateBarRequest,
)
from app.schemas.beer import BeerResponse, CreateBeerRequest
from app.schemas.brewery import (
    BreweryBeerRequest,
    BreweryResponse,
    BreweryWithBeerResponse,
    CreateBreweryRequest,
)


def _to_decimal(value: float) -> Decimal:
    # str() keeps the literal the client sent (5.2 stays 5.2, not 5.2000000000000001776...)
    return Decimal(str(value))


# ══════════════════════════════════════════════════════════════════════════
# Entity ↔ Model (used by services)
# ══════════════════════════════════════════════════════════════════════════


def beer_to_model(beer: Beer) -> BeerModel:
    return BeerModel(
        id=beer.id,
        name=beer.name,
        percentage_alcohol_by_volume=float(beer.percentage_alcohol_by_volume),
        brewery_id=beer.brewery_id,
    )


def beers_to_models(beers: List[Beer]) -> List[BeerModel]:
    return [beer_to_model(beer) for beer in beers]


def create_beer_to_entity(model: CreateBeerModel) -> Beer:
    return Beer(
        name=model.name,
        percentage_alcohol_by_volume=_to_decimal(model.percentage_alcohol_by_volume),
        brewery_id=model.brewery_id,
    )


def apply_beer_update(model: CreateBeerModel, beer: Beer) -> None:
    """Overwrites the tracked fields of a loaded beer."""
    beer.name = model.name
    beer.percentage_alcohol_by_volume = _to_decimal(model.percentage_alcohol_by_volume)
    beer.brewery_id = model.brewery_id


def brewery_to_model(brewery: Brewery, include_beers: bool = False) -> BreweryModel:
    beers = beers_to_models(brewery.beers) if include_beers else None
    return BreweryModel(id=brewery.id, name=brewery.name, beers=beers)


def create_brewery_to_entity(model: CreateBreweryModel) -> Brewery:
    return Brewery(name=model.name)


def apply_brewery_update(model: CreateBreweryModel, brewery: Brewery) -> None:
    brewery.name = model.name


def bar_to_model(bar: Bar, include_beers: bool = False) -> BarModel:
    beers = None
    if include_beers:
        beers = [beer_to_model(bar_beer.beer) for bar_beer in bar.bar_beers]
    return BarModel(id=bar.id, name=bar.name, address=bar.address, beers=beers)


def create_bar_to_entity(model: CreateBarModel) -> Bar:
    return Bar(name=model.name, address=model.address)


def apply_bar_update(model: CreateBarModel, bar: Bar) -> None:
    bar.name = model.name
    bar.address = model.address


# ══════════════════════════════════════════════════════════════════════════
# Request → Model (used by routes)
# ══════════════════════════════════════════════════════════════════════════


def beer_request_to_model(request: CreateBeerRequest) -> CreateBeerModel:
    return CreateBeerModel(
        name=request.name,
        percentage_alcohol_by_volume=request.percentage_alcohol_by_volume,
        brewery_id=request.brewery_id,
    )


def brewery_request_to_model(request: CreateBreweryRequest) -> CreateBreweryModel:
    return CreateBreweryModel(name=request.name)


def bar_request_to_model(request: CreateBarRequest) -> CreateBarModel:
    return CreateBarModel(name=request.name, address=request.address)


def bar_beer_request_to_model(request: BarBeerRequest) -> BarBeerModel:
    return BarBeerModel(bar_id=request.bar_id, beer_id=request.beer_id)


def brewery_beer_request_to_model(request: BreweryBeerRequest) -> BreweryBeerModel:
    return BreweryBeerModel(brewery_id=request.brewery_id, beer_id=request.beer_id)


# ══════════════════════════════════════════════════════════════════════════
# Model → Response (used by routes)
# ══════════════════════════════════════════════════════════════════════════


def beer_to_response(model: BeerModel) -> BeerResponse:
    return BeerResponse(
        id=model.id,
        name=model.name,
        percentage_alcohol_by_volume=model.percentage_alcohol_by_volume,
        brewery_id=model.brewery_id,
    )


def brewery_to_response(model: BreweryModel) -> BreweryResponse:
    return BreweryResponse(id=model.id, name=model.name)


def brewery_to_with_beer_response(model: BreweryModel) -> BreweryWithBeerResponse:
    return BreweryWithBeerResponse(
        id=model.id,
        name=model.name,
        beers=[beer_to_response(beer) for beer in model.beers or []],
    )


def bar_to_response(model: BarModel) -> BarResponse:
    return BarResponse(id=model.id, name=model.name, address=model.address)


def bar_to_with_beer_response(model: BarModel) -> BarWithBeerResponse:
    return BarWithBeerResponse(
        id=model.id,
        name=model.name,
        address=model.address,
        beers=[beer_to_response(beer) for beer in model.beers or []],
    )
