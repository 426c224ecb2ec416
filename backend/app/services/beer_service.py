"""
BeerBarBrewery Backend - Beer Service
=======================================

What:  Business operations on beers: CRUD and the alcohol-by-volume search.
How:   Maps domain models to entities, stages work through BeerRepository,
       commits via commit_changes(), and maps the results back.
       Store faults on commit surface as DatabaseError.
Who:   Constructed per request by app.dependencies; called by routes/beer.py.

"Not found" is reported as None / False / [], never raised.
"""

import logging
from typing import List, Optional

from app.domain.models import BeerModel, CreateBeerModel
from app.mapping import apply_beer_update, beer_to_model, beers_to_models, create_beer_to_entity
from app.repositories.beer_repository import BeerRepository
from app.services.common import commit_changes

logger = logging.getLogger(__name__)


class BeerService:
    def __init__(self, beer_repository: BeerRepository):
        self.beer_repository = beer_repository

    async def get_all(self) -> List[BeerModel]:
        beers = await self.beer_repository.get_all()
        if beers is None:
            return []
        return beers_to_models(beers)

    async def get_by_id(self, beer_id: int) -> Optional[BeerModel]:
        beer = await self.beer_repository.get_by_id(beer_id)
        if beer is None:
            return None
        return beer_to_model(beer)

    async def get_by_alcohol_range(
        self,
        min_abv: Optional[float] = None,
        max_abv: Optional[float] = None,
    ) -> List[BeerModel]:
        beers = await self.beer_repository.get_by_alcohol_range(min_abv, max_abv)
        if beers is None:
            return []
        return beers_to_models(beers)

    async def create(self, model: CreateBeerModel) -> BeerModel:
        beer = create_beer_to_entity(model)
        await self.beer_repository.add(beer)
        await commit_changes(self.beer_repository, "creating beer")

        logger.info("Beer created: id=%s name=%r", beer.id, beer.name)
        return beer_to_model(beer)

    async def update(self, beer_id: int, model: CreateBeerModel) -> bool:
        beer = await self.beer_repository.get_by_id(beer_id)
        if beer is None:
            return False

        apply_beer_update(model, beer)
        await self.beer_repository.update(beer)
        await commit_changes(self.beer_repository, "updating beer", beer_id=beer_id)

        logger.info("Beer updated: id=%s", beer_id)
        return True

    async def delete(self, beer_id: int) -> bool:
        beer = await self.beer_repository.get_by_id(beer_id)
        if beer is None:
            return False

        await self.beer_repository.delete(beer)
        await commit_changes(self.beer_repository, "deleting beer", beer_id=beer_id)

        logger.info("Beer deleted: id=%s", beer_id)
        return True
