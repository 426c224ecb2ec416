"""
BeerBarBrewery Backend - Shared Schema Pieces
===============================================

What:  Base model with the camelCase wire convention, plus the message and
       error bodies every router returns.
How:   alias_generator=to_camel makes `percentage_alcohol_by_volume` travel as
       `percentageAlcoholByVolume`. populate_by_name=True lets Python code
       (and clients) use either spelling on input.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request/response schema."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(CamelModel):
    """
    What:  Plain confirmation body.
    Who:   Returned by PUT and DELETE routes on success.
    """
    message: str = Field(description="Human-readable outcome", examples=["Beer updated successfully."])


class ErrorDetails(CamelModel):
    """
    What:  Standardized error body returned for every 4xx/5xx.
    Who:   Built by the global exception handlers in main.py.

    Example:
        {"message": "Beer with ID 7 not found.", "statusCode": 404}
    """
    message: str = Field(description="User-facing error message")
    status_code: int = Field(description="HTTP status code, repeated in the body")


# Shared OpenAPI `responses=` fragments for route decorators
BAD_REQUEST = {400: {"description": "Invalid input", "model": ErrorDetails}}
NOT_FOUND = {404: {"description": "Resource not found", "model": ErrorDetails}}
SERVER_ERROR = {500: {"description": "Server error", "model": ErrorDetails}}


class HealthResponse(CamelModel):
    """
    What:  Health probe result.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float = Field(description="Seconds since the process started")
