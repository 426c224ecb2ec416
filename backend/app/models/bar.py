"""
BeerBarBrewery Backend - Bar SQLAlchemy Model
===============================================

What:  ORM model representing the `bars` table.
How:   Many-to-many with Beer through the explicit BarBeer join entity.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.bar_beer import BarBeer


class Bar(Base):
    __tablename__ = "bars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False)

    bar_beers: Mapped[List["BarBeer"]] = relationship(
        back_populates="bar",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Bar(id={self.id}, name={self.name!r})>"
