"""
BeerBarBrewery Backend - Service Unit Tests
=============================================

What:  Tests for BeerService, BreweryService and BarService business logic.
How:   Repositories are MagicMock(spec=...) objects (see conftest), so no
       database is involved.

What we test:
    ✅ None / empty repository results become None / False / []
    ✅ Create returns the model with the store-assigned id
    ✅ Update and delete only save when the entity exists
    ✅ Assignment outcomes: NOT_FOUND, ALREADY_EXISTS, SUCCESS
    ✅ A bar assignment rejected at commit time is ALREADY_EXISTS or NOT_FOUND
       depending on whether the bar and beer still exist
    ✅ Other commit failures roll back and raise DatabaseError
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.domain.models import (
    AssignmentResult,
    BarBeerModel,
    BreweryBeerModel,
    CreateBarModel,
    CreateBeerModel,
    CreateBreweryModel,
)
from app.exceptions import DatabaseError
from app.services.bar_service import BarService
from app.services.beer_service import BeerService
from app.services.brewery_service import BreweryService


def _assign_id(new_id):
    """side_effect for repository.add that mimics the store assigning a key."""
    async def _add(entity):
        entity.id = new_id
    return _add


def _integrity_error():
    return IntegrityError("INSERT INTO bar_beers ...", {}, Exception("UNIQUE constraint failed"))


def _operational_error():
    return OperationalError("COMMIT", {}, Exception("database is locked"))


class TestBeerService:

    @pytest.fixture(autouse=True)
    def _service(self, beer_repository):
        self.repo = beer_repository
        self.service = BeerService(beer_repository)

    @pytest.mark.asyncio
    async def test_get_all_maps_entities(self, make_beer):
        self.repo.get_all.return_value = [make_beer(id=1), make_beer(id=2, name="Stout")]

        result = await self.service.get_all()

        assert [b.id for b in result] == [1, 2]
        assert result[1].name == "Stout"
        assert result[0].percentage_alcohol_by_volume == 5.2

    @pytest.mark.asyncio
    async def test_get_all_none_becomes_empty_list(self):
        self.repo.get_all.return_value = None

        assert await self.service.get_all() == []

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self):
        self.repo.get_by_id.return_value = None

        assert await self.service.get_by_id(5) is None

    @pytest.mark.asyncio
    async def test_get_by_alcohol_range_passes_bounds(self, make_beer):
        self.repo.get_by_alcohol_range.return_value = [make_beer(abv="5.0")]

        result = await self.service.get_by_alcohol_range(4.0, 6.0)

        self.repo.get_by_alcohol_range.assert_awaited_once_with(4.0, 6.0)
        assert result[0].percentage_alcohol_by_volume == 5.0

    @pytest.mark.asyncio
    async def test_get_by_alcohol_range_none_becomes_empty_list(self):
        self.repo.get_by_alcohol_range.return_value = None

        assert await self.service.get_by_alcohol_range(max_abv=3.0) == []

    @pytest.mark.asyncio
    async def test_create_returns_model_with_assigned_id(self):
        self.repo.add.side_effect = _assign_id(11)

        result = await self.service.create(
            CreateBeerModel(name="Porter", percentage_alcohol_by_volume=5.5, brewery_id=3)
        )

        assert result.id == 11
        assert result.name == "Porter"
        assert result.brewery_id == 3
        added = self.repo.add.await_args.args[0]
        assert added.percentage_alcohol_by_volume == Decimal("5.5")
        self.repo.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_returns_false_without_saving(self):
        self.repo.get_by_id.return_value = None

        result = await self.service.update(
            9, CreateBeerModel(name="X", percentage_alcohol_by_volume=1.0)
        )

        assert result is False
        self.repo.update.assert_not_awaited()
        self.repo.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, make_beer):
        beer = make_beer(id=4, brewery_id=2)
        self.repo.get_by_id.return_value = beer

        result = await self.service.update(
            4, CreateBeerModel(name="Renamed", percentage_alcohol_by_volume=7.25)
        )

        assert result is True
        assert beer.name == "Renamed"
        assert beer.percentage_alcohol_by_volume == Decimal("7.25")
        assert beer.brewery_id is None
        self.repo.update.assert_awaited_once_with(beer)
        self.repo.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(self):
        self.repo.get_by_id.return_value = None

        assert await self.service.delete(3) is False
        self.repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_existing(self, make_beer):
        beer = make_beer(id=3)
        self.repo.get_by_id.return_value = beer

        assert await self.service.delete(3) is True
        self.repo.delete.assert_awaited_once_with(beer)
        self.repo.save_changes.assert_awaited_once()


class TestBreweryService:

    @pytest.fixture(autouse=True)
    def _service(self, brewery_repository, beer_repository):
        self.repo = brewery_repository
        self.beer_repo = beer_repository
        self.service = BreweryService(brewery_repository, beer_repository)

    @pytest.mark.asyncio
    async def test_get_all_does_not_include_beers(self, make_brewery):
        self.repo.get_all.return_value = [make_brewery()]

        result = await self.service.get_all()

        assert result[0].name == "Hop House"
        assert result[0].beers is None

    @pytest.mark.asyncio
    async def test_get_all_with_beers(self, make_brewery, make_beer):
        self.repo.get_all_with_beers.return_value = [
            make_brewery(beers=[make_beer(id=8, brewery_id=1)])
        ]

        result = await self.service.get_all_with_beers()

        assert [b.id for b in result[0].beers] == [8]

    @pytest.mark.asyncio
    async def test_get_all_with_beers_none_becomes_empty_list(self):
        self.repo.get_all_with_beers.return_value = None

        assert await self.service.get_all_with_beers() == []

    @pytest.mark.asyncio
    async def test_get_by_id_includes_beers(self, make_brewery, make_beer):
        self.repo.get_by_id.return_value = make_brewery(beers=[make_beer(brewery_id=1)])

        result = await self.service.get_by_id(1)

        assert result.beers[0].name == "Pale Ale"

    @pytest.mark.asyncio
    async def test_create(self):
        self.repo.add.side_effect = _assign_id(5)

        result = await self.service.create(CreateBreweryModel(name="Malt Works"))

        assert result.id == 5
        assert result.name == "Malt Works"
        self.repo.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_and_delete_missing(self):
        self.repo.get_by_id.return_value = None

        assert await self.service.update(1, CreateBreweryModel(name="X")) is False
        assert await self.service.delete(1) is False
        self.repo.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_renames(self, make_brewery):
        brewery = make_brewery()
        self.repo.get_by_id.return_value = brewery

        assert await self.service.update(1, CreateBreweryModel(name="New Name")) is True
        assert brewery.name == "New Name"

    @pytest.mark.asyncio
    async def test_assign_missing_brewery_is_not_found(self, make_beer):
        self.repo.get_by_id.return_value = None
        self.beer_repo.get_by_id.return_value = make_beer()

        result = await self.service.assign_beer(BreweryBeerModel(brewery_id=1, beer_id=1))

        assert result is AssignmentResult.NOT_FOUND
        self.repo.assign_beer.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_assign_missing_beer_is_not_found(self, make_brewery):
        self.repo.get_by_id.return_value = make_brewery()
        self.beer_repo.get_by_id.return_value = None

        result = await self.service.assign_beer(BreweryBeerModel(brewery_id=1, beer_id=1))

        assert result is AssignmentResult.NOT_FOUND

    @pytest.mark.asyncio
    async def test_assign_already_owned(self, make_brewery, make_beer):
        self.repo.get_by_id.return_value = make_brewery()
        self.beer_repo.get_by_id.return_value = make_beer(brewery_id=1)
        self.repo.assign_beer.return_value = False

        result = await self.service.assign_beer(BreweryBeerModel(brewery_id=1, beer_id=1))

        assert result is AssignmentResult.ALREADY_EXISTS
        self.repo.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_assign_success(self, make_brewery, make_beer):
        self.repo.get_by_id.return_value = make_brewery()
        self.beer_repo.get_by_id.return_value = make_beer()
        self.repo.assign_beer.return_value = True

        result = await self.service.assign_beer(BreweryBeerModel(brewery_id=1, beer_id=2))

        assert result is AssignmentResult.SUCCESS
        self.repo.assign_beer.assert_awaited_once_with(1, 2)
        self.repo.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_assign_rejected_on_commit_rolls_back(self, make_brewery, make_beer):
        self.repo.get_by_id.return_value = make_brewery()
        self.beer_repo.get_by_id.return_value = make_beer()
        self.repo.assign_beer.return_value = True
        self.repo.save_changes.side_effect = _integrity_error()

        result = await self.service.assign_beer(BreweryBeerModel(brewery_id=1, beer_id=2))

        assert result is AssignmentResult.NOT_FOUND
        self.repo.rollback.assert_awaited_once()


class TestBarService:

    @pytest.fixture(autouse=True)
    def _service(self, bar_repository, beer_repository):
        self.repo = bar_repository
        self.beer_repo = beer_repository
        self.service = BarService(bar_repository, beer_repository)

    @pytest.mark.asyncio
    async def test_get_all_none_becomes_empty_list(self):
        self.repo.get_all.return_value = None

        assert await self.service.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_with_beers_flattens_join_rows(self, make_bar, make_beer):
        self.repo.get_all_with_beers.return_value = [
            make_bar(beers=[make_beer(id=1), make_beer(id=2, name="Stout")]),
            make_bar(id=2, name="Empty"),
        ]

        result = await self.service.get_all_with_beers()

        assert [b.name for b in result[0].beers] == ["Pale Ale", "Stout"]
        assert result[1].beers == []

    @pytest.mark.asyncio
    async def test_get_by_id(self, make_bar):
        self.repo.get_by_id.return_value = make_bar(id=3)

        result = await self.service.get_by_id(3)

        assert result.id == 3
        assert result.address == "1 High Street"
        assert result.beers is None

    @pytest.mark.asyncio
    async def test_get_beers_served_at(self, make_beer):
        self.repo.get_beers_served_at.return_value = [make_beer(id=6)]

        result = await self.service.get_beers_served_at(2)

        self.repo.get_beers_served_at.assert_awaited_once_with(2)
        assert [b.id for b in result] == [6]

    @pytest.mark.asyncio
    async def test_create(self):
        self.repo.add.side_effect = _assign_id(12)

        result = await self.service.create(CreateBarModel(name="Tap Room", address="3 Mill Lane"))

        assert result.id == 12
        assert result.address == "3 Mill Lane"

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, make_bar):
        bar = make_bar()
        self.repo.get_by_id.return_value = bar

        assert await self.service.update(1, CreateBarModel(name="New", address="New St")) is True
        assert (bar.name, bar.address) == ("New", "New St")
        self.repo.update.assert_awaited_once_with(bar)

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(self):
        self.repo.get_by_id.return_value = None

        assert await self.service.delete(1) is False

    @pytest.mark.asyncio
    async def test_assign_not_found(self, make_bar):
        self.repo.get_by_id.return_value = make_bar()
        self.beer_repo.get_by_id.return_value = None

        result = await self.service.assign_beer(BarBeerModel(bar_id=1, beer_id=99))

        assert result is AssignmentResult.NOT_FOUND
        self.repo.assign_beer.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_assign_success_then_already_exists(self, make_bar, make_beer):
        self.repo.get_by_id.return_value = make_bar()
        self.beer_repo.get_by_id.return_value = make_beer()
        self.repo.assign_beer.side_effect = [True, False]
        link = BarBeerModel(bar_id=1, beer_id=1)

        assert await self.service.assign_beer(link) is AssignmentResult.SUCCESS
        assert await self.service.assign_beer(link) is AssignmentResult.ALREADY_EXISTS
        self.repo.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_is_already_exists(self, make_bar, make_beer):
        self.repo.get_by_id.return_value = make_bar()
        self.beer_repo.get_by_id.return_value = make_beer()
        self.repo.assign_beer.return_value = True
        self.repo.save_changes.side_effect = _integrity_error()

        result = await self.service.assign_beer(BarBeerModel(bar_id=1, beer_id=1))

        assert result is AssignmentResult.ALREADY_EXISTS
        self.repo.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_commit_rejected_after_beer_deleted_is_not_found(self, make_bar, make_beer):
        self.repo.get_by_id.return_value = make_bar()
        self.beer_repo.get_by_id.side_effect = [make_beer(), None]
        self.repo.assign_beer.return_value = True
        self.repo.save_changes.side_effect = _integrity_error()

        result = await self.service.assign_beer(BarBeerModel(bar_id=1, beer_id=1))

        assert result is AssignmentResult.NOT_FOUND
        self.repo.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_assign_store_fault_raises_database_error(self, make_bar, make_beer):
        self.repo.get_by_id.return_value = make_bar()
        self.beer_repo.get_by_id.return_value = make_beer()
        self.repo.assign_beer.return_value = True
        self.repo.save_changes.side_effect = _operational_error()

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.assign_beer(BarBeerModel(bar_id=1, beer_id=2))

        assert exc_info.value.context["bar_id"] == 1
        self.repo.rollback.assert_awaited_once()


class TestCommitFailures:
    """Store faults while saving become DatabaseError after a rollback."""

    @pytest.mark.asyncio
    async def test_beer_create(self, beer_repository):
        beer_repository.save_changes.side_effect = _operational_error()
        service = BeerService(beer_repository)

        with pytest.raises(DatabaseError) as exc_info:
            await service.create(CreateBeerModel(name="Lager", percentage_alcohol_by_volume=4.5))

        assert exc_info.value.context["original_error"] == "OperationalError"
        assert isinstance(exc_info.value.__cause__, OperationalError)
        beer_repository.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_brewery_delete(self, brewery_repository, beer_repository, make_brewery):
        brewery_repository.get_by_id.return_value = make_brewery()
        brewery_repository.save_changes.side_effect = _operational_error()
        service = BreweryService(brewery_repository, beer_repository)

        with pytest.raises(DatabaseError):
            await service.delete(1)

        brewery_repository.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_bar_update(self, bar_repository, beer_repository, make_bar):
        bar_repository.get_by_id.return_value = make_bar()
        bar_repository.save_changes.side_effect = _operational_error()
        service = BarService(bar_repository, beer_repository)

        with pytest.raises(DatabaseError) as exc_info:
            await service.update(1, CreateBarModel(name="New", address="New St"))

        assert exc_info.value.context == {
            "action": "updating bar",
            "original_error": "OperationalError",
            "bar_id": 1,
        }
