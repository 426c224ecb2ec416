"""
BeerBarBrewery Backend - Bar Service
======================================

What:  Business operations on bars and the bar ↔ beer assignment.
How:   Bars serve many beers through bar_beers join rows. Assignment is a
       check-then-insert; constraints on bar_beers catch what changed between
       the reads and the commit:

           bar or beer missing                          → NOT_FOUND
           pair already present                         → ALREADY_EXISTS
           commit rejected, bar or beer since deleted   → NOT_FOUND
           commit rejected, both still present (dup PK) → ALREADY_EXISTS
           join row committed                           → SUCCESS

       Any other store fault on commit surfaces as DatabaseError.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.domain.models import (
    AssignmentResult,
    BarBeerModel,
    BarModel,
    BeerModel,
    CreateBarModel,
)
from app.mapping import apply_bar_update, bar_to_model, beers_to_models, create_bar_to_entity
from app.repositories.bar_repository import BarRepository
from app.repositories.beer_repository import BeerRepository
from app.services.common import commit_changes, store_fault

logger = logging.getLogger(__name__)


class BarService:
    def __init__(self, bar_repository: BarRepository, beer_repository: BeerRepository):
        self.bar_repository = bar_repository
        self.beer_repository = beer_repository

    async def get_all(self) -> List[BarModel]:
        bars = await self.bar_repository.get_all()
        if bars is None:
            return []
        return [bar_to_model(bar) for bar in bars]

    async def get_all_with_beers(self) -> List[BarModel]:
        bars = await self.bar_repository.get_all_with_beers()
        if bars is None:
            return []
        return [bar_to_model(bar, include_beers=True) for bar in bars]

    async def get_by_id(self, bar_id: int) -> Optional[BarModel]:
        bar = await self.bar_repository.get_by_id(bar_id)
        if bar is None:
            return None
        return bar_to_model(bar)

    async def get_beers_served_at(self, bar_id: int) -> List[BeerModel]:
        beers = await self.bar_repository.get_beers_served_at(bar_id)
        if beers is None:
            return []
        return beers_to_models(beers)

    async def create(self, model: CreateBarModel) -> BarModel:
        bar = create_bar_to_entity(model)
        await self.bar_repository.add(bar)
        await commit_changes(self.bar_repository, "creating bar")

        logger.info("Bar created: id=%s name=%r", bar.id, bar.name)
        return bar_to_model(bar)

    async def update(self, bar_id: int, model: CreateBarModel) -> bool:
        bar = await self.bar_repository.get_by_id(bar_id)
        if bar is None:
            return False

        apply_bar_update(model, bar)
        await self.bar_repository.update(bar)
        await commit_changes(self.bar_repository, "updating bar", bar_id=bar_id)

        logger.info("Bar updated: id=%s", bar_id)
        return True

    async def delete(self, bar_id: int) -> bool:
        bar = await self.bar_repository.get_by_id(bar_id)
        if bar is None:
            return False

        await self.bar_repository.delete(bar)
        await commit_changes(self.bar_repository, "deleting bar", bar_id=bar_id)

        logger.info("Bar deleted: id=%s", bar_id)
        return True

    async def assign_beer(self, link: BarBeerModel) -> AssignmentResult:
        bar = await self.bar_repository.get_by_id(link.bar_id)
        beer = await self.beer_repository.get_by_id(link.beer_id)
        if bar is None or beer is None:
            return AssignmentResult.NOT_FOUND

        staged = await self.bar_repository.assign_beer(link.bar_id, link.beer_id)
        if not staged:
            return AssignmentResult.ALREADY_EXISTS

        try:
            await self.bar_repository.save_changes()
        except IntegrityError:
            await self.bar_repository.rollback()
            logger.warning(
                "Bar/beer pair rejected on commit: bar=%s beer=%s",
                link.bar_id, link.beer_id,
            )
            return await self._conflict_result(link)
        except SQLAlchemyError as e:
            await self.bar_repository.rollback()
            raise store_fault(
                "assigning beer to bar", e, bar_id=link.bar_id, beer_id=link.beer_id,
            ) from e

        logger.info("Beer %s assigned to bar %s", link.beer_id, link.bar_id)
        return AssignmentResult.SUCCESS

    async def _conflict_result(self, link: BarBeerModel) -> AssignmentResult:
        """Tells a missing parent (FK violation) apart from a duplicate pair (PK violation)."""
        bar = await self.bar_repository.get_by_id(link.bar_id)
        beer = await self.beer_repository.get_by_id(link.beer_id)
        if bar is None or beer is None:
            return AssignmentResult.NOT_FOUND
        return AssignmentResult.ALREADY_EXISTS
