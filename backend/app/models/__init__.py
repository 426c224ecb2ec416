"""
ORM models package.

Importing this package registers every table on Base.metadata, which is what
Alembic autogenerate and database.create_schema() read.
"""

from app.models.bar import Bar
from app.models.bar_beer import BarBeer
from app.models.beer import Beer
from app.models.brewery import Brewery

__all__ = ["Bar", "BarBeer", "Beer", "Brewery"]
