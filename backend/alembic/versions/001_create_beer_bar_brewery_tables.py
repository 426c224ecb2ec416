"""Create breweries, beers, bars and bar_beers tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial schema for the beer / bar / brewery API.
How:   breweries and bars first, then beers (FK to breweries, SET NULL on
       delete), then the bar_beers join table (composite PK, CASCADE on both
       FKs).

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "breweries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_breweries"),
    )

    op.create_table(
        "bars",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("address", sa.String(200), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_bars"),
    )

    op.create_table(
        "beers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "percentage_alcohol_by_volume",
            sa.Numeric(5, 2),
            nullable=False,
            comment="Alcohol by volume in percent",
        ),
        sa.Column("brewery_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_beers"),
        sa.ForeignKeyConstraint(
            ["brewery_id"],
            ["breweries.id"],
            name="fk_beers_brewery_id",
            ondelete="SET NULL",
        ),
    )
    op.create_index("ix_beers_brewery_id", "beers", ["brewery_id"])

    op.create_table(
        "bar_beers",
        sa.Column("bar_id", sa.Integer(), nullable=False),
        sa.Column("beer_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("bar_id", "beer_id", name="pk_bar_beers"),
        sa.ForeignKeyConstraint(
            ["bar_id"], ["bars.id"], name="fk_bar_beers_bar_id", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["beer_id"], ["beers.id"], name="fk_bar_beers_beer_id", ondelete="CASCADE"
        ),
    )
    op.create_index("ix_bar_beers_beer_id", "bar_beers", ["beer_id"])


def downgrade() -> None:
    op.drop_index("ix_bar_beers_beer_id", table_name="bar_beers")
    op.drop_table("bar_beers")
    op.drop_index("ix_beers_brewery_id", table_name="beers")
    op.drop_table("beers")
    op.drop_table("bars")
    op.drop_table("breweries")
