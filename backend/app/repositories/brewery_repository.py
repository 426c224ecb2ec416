"""
BeerBarBrewery Backend - Brewery Repository
=============================================

What:  Brewery persistence. Breweries are always read together with their
       beers, and beers are assigned to a brewery by setting beers.brewery_id.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.beer import Beer
from app.models.brewery import Brewery
from app.repositories.base import BaseRepository


class BreweryRepository(BaseRepository[Brewery]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Brewery)

    async def get_by_id(self, entity_id: int) -> Optional[Brewery]:
        """Brewery with its beers eagerly loaded, or None."""
        query = (
            select(Brewery)
            .options(selectinload(Brewery.beers))
            .where(Brewery.id == entity_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_all_with_beers(self) -> List[Brewery]:
        query = select(Brewery).options(selectinload(Brewery.beers)).order_by(Brewery.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def assign_beer(self, brewery_id: int, beer_id: int) -> bool:
        """
        Points the beer at the brewery.

        Returns:
            True if the FK change was staged (including a move away from a
            different brewery), False if the beer is missing or already
            belongs to this brewery.
        """
        beer = await self.session.get(Beer, beer_id)
        if beer is None or beer.brewery_id == brewery_id:
            return False

        beer.brewery_id = brewery_id
        return True
