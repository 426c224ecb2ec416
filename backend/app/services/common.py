"""
BeerBarBrewery Backend - Service Helpers
==========================================

What:  Commit handling shared by the services.
How:   Store faults raised while committing (sqlalchemy.exc.SQLAlchemyError)
       roll the session back and are re-raised as DatabaseError, which the
       handler in main.py turns into a generic 500. The original error is
       logged and kept as __cause__, never returned to the client.
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import DatabaseError
from app.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def store_fault(action: str, error: SQLAlchemyError, **context: Any) -> DatabaseError:
    """Builds the DatabaseError for a failed store operation and logs the cause."""
    logger.error("Database error while %s: %s", action, str(error))
    return DatabaseError(
        context={"action": action, "original_error": type(error).__name__, **context},
    )


async def commit_changes(repository: BaseRepository, action: str, **context: Any) -> bool:
    """
    Saves the repository's staged work.

    Returns:
        The save_changes() result

    Raises:
        DatabaseError: The commit failed; the session has been rolled back
    """
    try:
        return await repository.save_changes()
    except SQLAlchemyError as e:
        await repository.rollback()
        raise store_fault(action, e, **context) from e
