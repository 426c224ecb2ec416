"""
BeerBarBrewery Backend - Generic Repository
=============================================

What:  Uniform CRUD contract shared by the Beer, Brewery and Bar repositories.
How:   Wraps one AsyncSession. add/update/delete only stage changes on the
       session; save_changes() is the single place a commit happens.
Who:   Subclassed by the entity repositories; driven by the services.

Failure semantics:
    "Not found" is a None / empty result, never an exception. Store faults
    (sqlalchemy.exc.SQLAlchemyError) propagate unchanged; the services wrap
    commit failures in DatabaseError.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Generic async repository.

    Args:
        session: Request-scoped SQLAlchemy session
        model:   ORM class this repository manages
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def get_all(self) -> List[T]:
        """Returns every row of the table, ordered by primary key."""
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Primary-key lookup. None means the row does not exist."""
        return await self.session.get(self.model, entity_id)

    async def add(self, entity: T) -> None:
        """Stages an insert. Nothing is written until save_changes()."""
        self.session.add(entity)

    async def update(self, entity: T) -> None:
        """
        Stages a full-row overwrite of an entity.

        Loaded entities are already tracked, so their attribute changes are
        picked up on commit. Detached instances are attached here.
        """
        self.session.add(entity)

    async def delete(self, entity: T) -> None:
        """Stages a row removal. Dependent join rows go with it (FK cascade)."""
        await self.session.delete(entity)

    async def save_changes(self) -> bool:
        """
        Commits all staged operations.

        Returns:
            True if at least one row was inserted, modified or deleted,
            False if nothing was staged.
        """
        session = self.session
        changed = (
            len(session.new)
            + len(session.deleted)
            + sum(1 for obj in session.dirty if session.is_modified(obj))
        )
        await session.commit()
        logger.debug("Committed %d staged change(s) for %s", changed, self.model.__name__)
        return changed > 0

    async def rollback(self) -> None:
        """Discards staged changes, e.g. after a failed commit."""
        await self.session.rollback()
