"""
BeerBarBrewery Backend - Dependency Wiring
============================================

What:  FastAPI dependencies that build repositories and services per request.
How:   Every provider depends on get_db_session, so all repositories used by
       one request share a single AsyncSession (and a single transaction).
Who:   Route handlers declare `service: BeerService = Depends(get_beer_service)`.
       Tests replace get_db_session via app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.repositories.bar_repository import BarRepository
from app.repositories.beer_repository import BeerRepository
from app.repositories.brewery_repository import BreweryRepository
from app.services.bar_service import BarService
from app.services.beer_service import BeerService
from app.services.brewery_service import BreweryService


def get_beer_repository(session: AsyncSession = Depends(get_db_session)) -> BeerRepository:
    return BeerRepository(session)


def get_bar_repository(session: AsyncSession = Depends(get_db_session)) -> BarRepository:
    return BarRepository(session)


def get_brewery_repository(session: AsyncSession = Depends(get_db_session)) -> BreweryRepository:
    return BreweryRepository(session)


def get_beer_service(
    beer_repository: BeerRepository = Depends(get_beer_repository),
) -> BeerService:
    return BeerService(beer_repository)


def get_bar_service(
    bar_repository: BarRepository = Depends(get_bar_repository),
    beer_repository: BeerRepository = Depends(get_beer_repository),
) -> BarService:
    return BarService(bar_repository, beer_repository)


def get_brewery_service(
    brewery_repository: BreweryRepository = Depends(get_brewery_repository),
    beer_repository: BeerRepository = Depends(get_beer_repository),
) -> BreweryService:
    return BreweryService(brewery_repository, beer_repository)
