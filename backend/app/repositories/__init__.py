"""
Data access layer.

One repository per aggregate, each bound to the request's AsyncSession.
Repositories stage work on the session; only save_changes() commits.
"""

from app.repositories.bar_repository import BarRepository
from app.repositories.base import BaseRepository
from app.repositories.beer_repository import BeerRepository
from app.repositories.brewery_repository import BreweryRepository

__all__ = ["BarRepository", "BaseRepository", "BeerRepository", "BreweryRepository"]
