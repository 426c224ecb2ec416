"""
BeerBarBrewery Backend - Bar Schemas
======================================

What:  Request/response contracts for /api/bar, including the bar ↔ beer
       assignment body.
"""

from typing import List

from pydantic import Field, field_validator

from app.schemas.beer import BeerResponse
from app.schemas.common import CamelModel


class CreateBarRequest(CamelModel):
    """
    Example:
        {"name": "The Crown", "address": "1 High Street"}
    """
    name: str = Field(..., min_length=1, max_length=100, description="Bar name")
    address: str = Field(..., min_length=1, max_length=200, description="Street address")

    @field_validator("name", "address")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must not be blank")
        return v


class BarResponse(CamelModel):
    id: int
    name: str
    address: str


class BarWithBeerResponse(CamelModel):
    """A bar together with every beer it serves."""
    id: int
    name: str
    address: str
    beers: List[BeerResponse] = Field(default_factory=list)


class BarBeerRequest(CamelModel):
    bar_id: int
    beer_id: int
