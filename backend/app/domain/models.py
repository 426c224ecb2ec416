"""
Domain Models
=============

Business-layer representations of beers, bars and breweries. Services accept
and return these; they never leak ORM entities or wire schemas.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class AssignmentResult(str, Enum):
    """Outcome of linking a beer to a bar or a brewery."""

    SUCCESS = "success"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


class BeerModel(BaseModel):
    """A stored beer"""

    id: int = Field(..., description="Beer identifier")
    name: str = Field(..., description="Beer name")
    percentage_alcohol_by_volume: float = Field(..., description="Alcohol by volume in percent")
    brewery_id: Optional[int] = Field(None, description="Producing brewery, if any")


class CreateBeerModel(BaseModel):
    """Input for creating or overwriting a beer"""

    name: str
    percentage_alcohol_by_volume: float
    brewery_id: Optional[int] = None


class BreweryModel(BaseModel):
    """A stored brewery. beers is None when the beers were not requested."""

    id: int
    name: str
    beers: Optional[List[BeerModel]] = None


class CreateBreweryModel(BaseModel):
    name: str


class BarModel(BaseModel):
    """A stored bar. beers is None when the beers were not requested."""

    id: int
    name: str
    address: str
    beers: Optional[List[BeerModel]] = None


class CreateBarModel(BaseModel):
    name: str
    address: str


class BarBeerModel(BaseModel):
    bar_id: int
    beer_id: int


class BreweryBeerModel(BaseModel):
    brewery_id: int
    beer_id: int
