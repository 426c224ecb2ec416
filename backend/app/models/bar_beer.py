"""
BeerBarBrewery Backend - BarBeer Join Model
=============================================

What:  Join row recording that a bar serves a beer.
How:   Composite primary key (bar_id, beer_id). The key is the uniqueness
       guarantee for assignments; both FKs cascade on delete so removing a bar
       or a beer removes its join rows.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.bar import Bar
    from app.models.beer import Beer


class BarBeer(Base):
    __tablename__ = "bar_beers"

    bar_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("bars.id", ondelete="CASCADE"),
        primary_key=True,
    )
    beer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("beers.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    bar: Mapped["Bar"] = relationship(back_populates="bar_beers")
    beer: Mapped["Beer"] = relationship(back_populates="bar_beers")

    def __repr__(self) -> str:
        return f"<BarBeer(bar_id={self.bar_id}, beer_id={self.beer_id})>"
