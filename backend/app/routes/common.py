"""Helpers shared by the resource routers."""

from app.exceptions import ValidationError


def ensure_valid_id(value: int, message: str, field: str = "id") -> None:
    """Rejects non-positive identifiers with a 400 before any service call."""
    if value <= 0:
        raise ValidationError(message, field=field, context={field: value})
