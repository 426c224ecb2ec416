"""
BeerBarBrewery Backend - Beer SQLAlchemy Model
================================================

What:  ORM model representing the `beers` table.
How:   Declarative mapping on the shared Base; Alembic reads it for migrations.
Who:   Used by BeerRepository, BreweryRepository (FK assignment) and
       BarRepository (join projection).

Table Design:
    - id: store-assigned integer key
    - percentage_alcohol_by_volume: NUMERIC(5,2). The 0.1..100 range is checked
      by the request schema, not by the database.
    - brewery_id: nullable FK. Deleting a brewery leaves its beers in place
      with brewery_id set to NULL.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.bar_beer import BarBeer
    from app.models.brewery import Brewery


class Beer(Base):
    """A beer, optionally produced by one brewery and served at many bars."""

    __tablename__ = "beers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    percentage_alcohol_by_volume: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        nullable=False,
        comment="Alcohol by volume in percent",
    )

    brewery_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("breweries.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # ── Relationships ─────────────────────────────────────────────────────
    brewery: Mapped[Optional["Brewery"]] = relationship(back_populates="beers")

    bar_beers: Mapped[List["BarBeer"]] = relationship(
        back_populates="beer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return (
            f"<Beer(id={self.id}, name={self.name!r}, "
            f"abv={self.percentage_alcohol_by_volume}, brewery_id={self.brewery_id})>"
        )
