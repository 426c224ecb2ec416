"""
BeerBarBrewery Backend - Beer Schemas
=======================================

What:  Request/response contracts for /api/beer.
How:   Field constraints are enforced by FastAPI before the route body runs;
       failures surface as 400 through the RequestValidationError handler.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel


class CreateBeerRequest(CamelModel):
    """
    Body for POST /api/beer and PUT /api/beer/{id}.

    Example:
        {"name": "Pale Ale", "percentageAlcoholByVolume": 5.2, "breweryId": 1}
    """
    name: str = Field(..., min_length=1, max_length=100, description="Beer name")
    percentage_alcohol_by_volume: float = Field(
        ...,
        ge=0.1,
        le=100,
        description="Alcohol by volume, between 0.1 and 100 percent, at most 2 decimals",
    )
    brewery_id: Optional[int] = Field(
        default=None,
        gt=0,
        description="Brewery producing the beer (optional)",
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("percentage_alcohol_by_volume")
    @classmethod
    def at_most_two_decimals(cls, v: float) -> float:
        # Stored as NUMERIC(5, 2); anything finer would not survive a read back
        if Decimal(str(v)).as_tuple().exponent < -2:
            raise ValueError("percentageAlcoholByVolume allows at most 2 decimal places")
        return v


class BeerResponse(CamelModel):
    id: int
    name: str
    percentage_alcohol_by_volume: float
    brewery_id: Optional[int] = None
