"""
BeerBarBrewery Backend - Brewery Schemas
==========================================

What:  Request/response contracts for /api/brewery, including the
       brewery ↔ beer assignment body.
"""

from typing import List

from pydantic import Field, field_validator

from app.schemas.beer import BeerResponse
from app.schemas.common import CamelModel


class CreateBreweryRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, description="Brewery name")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class BreweryResponse(CamelModel):
    id: int
    name: str


class BreweryWithBeerResponse(CamelModel):
    """A brewery together with every beer it produces."""
    id: int
    name: str
    beers: List[BeerResponse] = Field(default_factory=list)


class BreweryBeerRequest(CamelModel):
    """
    Body for POST /api/brewery/beer.

    Ids are not range-checked here so that non-positive values produce the
    route's "Invalid BreweryId or BeerId." message instead of a generic 400.
    """
    brewery_id: int
    beer_id: int
