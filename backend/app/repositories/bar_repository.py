"""
BeerBarBrewery Backend - Bar Repository
=========================================

What:  Bar persistence plus management of the bar ↔ beer join rows.
How:   Assignments are staged as BarBeer inserts after an existence check.
       The (bar_id, beer_id) primary key rejects a concurrent duplicate at
       commit time; the service turns that IntegrityError into ALREADY_EXISTS.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.bar import Bar
from app.models.bar_beer import BarBeer
from app.models.beer import Beer
from app.repositories.base import BaseRepository


class BarRepository(BaseRepository[Bar]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Bar)

    async def assign_beer(self, bar_id: int, beer_id: int) -> bool:
        """
        Stages a BarBeer row for the pair unless it already exists.

        Returns:
            True if a new join row was staged, False if the pair was
            already present (nothing staged).
        """
        existing = await self.session.get(BarBeer, (bar_id, beer_id))
        if existing is not None:
            return False

        self.session.add(BarBeer(bar_id=bar_id, beer_id=beer_id))
        return True

    async def get_beers_served_at(self, bar_id: int) -> List[Beer]:
        """Beers joined to the bar through bar_beers. Empty for unknown bars."""
        query = (
            select(Beer)
            .join(BarBeer, BarBeer.beer_id == Beer.id)
            .where(BarBeer.bar_id == bar_id)
            .order_by(Beer.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_all_with_beers(self) -> List[Bar]:
        """All bars with bar_beers and each join row's beer eagerly loaded."""
        query = (
            select(Bar)
            .options(selectinload(Bar.bar_beers).selectinload(BarBeer.beer))
            .order_by(Bar.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
