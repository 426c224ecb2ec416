"""
BeerBarBrewery Backend - Brewery SQLAlchemy Model
===================================================

What:  ORM model representing the `breweries` table.
How:   One-to-many with Beer through beers.brewery_id.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.beer import Beer


class Brewery(Base):
    __tablename__ = "breweries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    # passive_deletes: the database nulls beers.brewery_id on delete,
    # so the ORM must not try to load and detach the children itself.
    beers: Mapped[List["Beer"]] = relationship(
        back_populates="brewery",
        passive_deletes=True,
        order_by="Beer.id",
    )

    def __repr__(self) -> str:
        return f"<Brewery(id={self.id}, name={self.name!r})>"
