"""
BeerBarBrewery Backend - Brewery Service
==========================================

What:  Business operations on breweries and the brewery ↔ beer assignment.
How:   A brewery owns many beers through beers.brewery_id. Assigning a beer
       sets that FK; the outcome is reported as an AssignmentResult:

           brewery or beer missing           → NOT_FOUND
           beer already in this brewery      → ALREADY_EXISTS
           FK staged and committed           → SUCCESS

       Any other store fault on commit surfaces as DatabaseError.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.domain.models import (
    AssignmentResult,
    BreweryBeerModel,
    BreweryModel,
    CreateBreweryModel,
)
from app.mapping import apply_brewery_update, brewery_to_model, create_brewery_to_entity
from app.repositories.beer_repository import BeerRepository
from app.repositories.brewery_repository import BreweryRepository
from app.services.common import commit_changes, store_fault

logger = logging.getLogger(__name__)


class BreweryService:
    def __init__(
        self,
        brewery_repository: BreweryRepository,
        beer_repository: BeerRepository,
    ):
        self.brewery_repository = brewery_repository
        self.beer_repository = beer_repository

    async def get_all(self) -> List[BreweryModel]:
        breweries = await self.brewery_repository.get_all()
        if breweries is None:
            return []
        return [brewery_to_model(brewery) for brewery in breweries]

    async def get_all_with_beers(self) -> List[BreweryModel]:
        breweries = await self.brewery_repository.get_all_with_beers()
        if breweries is None:
            return []
        return [brewery_to_model(brewery, include_beers=True) for brewery in breweries]

    async def get_by_id(self, brewery_id: int) -> Optional[BreweryModel]:
        """Brewery with its beers, or None."""
        brewery = await self.brewery_repository.get_by_id(brewery_id)
        if brewery is None:
            return None
        return brewery_to_model(brewery, include_beers=True)

    async def create(self, model: CreateBreweryModel) -> BreweryModel:
        brewery = create_brewery_to_entity(model)
        await self.brewery_repository.add(brewery)
        await commit_changes(self.brewery_repository, "creating brewery")

        logger.info("Brewery created: id=%s name=%r", brewery.id, brewery.name)
        return brewery_to_model(brewery)

    async def update(self, brewery_id: int, model: CreateBreweryModel) -> bool:
        brewery = await self.brewery_repository.get_by_id(brewery_id)
        if brewery is None:
            return False

        apply_brewery_update(model, brewery)
        await self.brewery_repository.update(brewery)
        await commit_changes(self.brewery_repository, "updating brewery", brewery_id=brewery_id)

        logger.info("Brewery updated: id=%s", brewery_id)
        return True

    async def delete(self, brewery_id: int) -> bool:
        """Removes the brewery; its beers remain with brewery_id cleared."""
        brewery = await self.brewery_repository.get_by_id(brewery_id)
        if brewery is None:
            return False

        await self.brewery_repository.delete(brewery)
        await commit_changes(self.brewery_repository, "deleting brewery", brewery_id=brewery_id)

        logger.info("Brewery deleted: id=%s", brewery_id)
        return True

    async def assign_beer(self, link: BreweryBeerModel) -> AssignmentResult:
        brewery = await self.brewery_repository.get_by_id(link.brewery_id)
        beer = await self.beer_repository.get_by_id(link.beer_id)
        if brewery is None or beer is None:
            return AssignmentResult.NOT_FOUND

        staged = await self.brewery_repository.assign_beer(link.brewery_id, link.beer_id)
        if not staged:
            return AssignmentResult.ALREADY_EXISTS

        try:
            await self.brewery_repository.save_changes()
        except IntegrityError:
            # The brewery or beer disappeared between the reads and the commit
            await self.brewery_repository.rollback()
            logger.warning(
                "Brewery assignment rejected by the store: brewery=%s beer=%s",
                link.brewery_id, link.beer_id,
            )
            return AssignmentResult.NOT_FOUND
        except SQLAlchemyError as e:
            await self.brewery_repository.rollback()
            raise store_fault(
                "assigning beer to brewery", e,
                brewery_id=link.brewery_id, beer_id=link.beer_id,
            ) from e

        logger.info("Beer %s assigned to brewery %s", link.beer_id, link.brewery_id)
        return AssignmentResult.SUCCESS
