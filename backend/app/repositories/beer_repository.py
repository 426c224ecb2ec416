"""
BeerBarBrewery Backend - Beer Repository
==========================================

What:  Beer persistence plus the alcohol-by-volume range query.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.beer import Beer
from app.repositories.base import BaseRepository


class BeerRepository(BaseRepository[Beer]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Beer)

    async def get_by_alcohol_range(
        self,
        min_abv: Optional[float] = None,
        max_abv: Optional[float] = None,
    ) -> List[Beer]:
        """
        Beers whose ABV lies strictly between the given bounds.

        Either bound may be omitted. Callers are responsible for rejecting
        the case where both are missing.

        Example:
            min_abv=4.0, max_abv=6.0 over {3.5, 5.0, 8.0} → [5.0 beer]
        """
        query = select(Beer)
        if min_abv is not None:
            query = query.where(Beer.percentage_alcohol_by_volume > min_abv)
        if max_abv is not None:
            query = query.where(Beer.percentage_alcohol_by_volume < max_abv)

        result = await self.session.execute(query.order_by(Beer.id))
        return list(result.scalars().all())
