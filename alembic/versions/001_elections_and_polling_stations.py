"""Create elections and polling_stations tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "elections",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(500), nullable=False),
        sa.Column("location", sa.String(200), nullable=False),
        sa.Column("number_of_voters", sa.Integer(), server_default="0", nullable=False),
        sa.Column("category", sa.String(20), server_default="Municipal", nullable=False),
        sa.Column("election_date", sa.Date(), nullable=False),
        sa.Column("nomination_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("category IN ('Municipal')", name="ck_election_category"),
        sa.CheckConstraint("number_of_voters >= 0", name="ck_election_number_of_voters"),
    )

    op.create_table(
        "polling_stations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "election_id",
            sa.Integer(),
            sa.ForeignKey("elections.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(500), nullable=False),
        sa.Column("number", sa.Integer(), nullable=False),
        sa.Column("number_of_voters", sa.Integer(), nullable=True),
        sa.Column("polling_station_type", sa.String(20), nullable=False),
        sa.Column("street", sa.String(200), nullable=False),
        sa.Column("house_number", sa.String(20), nullable=False),
        sa.Column("house_number_addition", sa.String(20), nullable=True),
        sa.Column("postal_code", sa.String(10), nullable=False),
        sa.Column("locality", sa.String(200), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("election_id", "number", name="uq_polling_station_election_number"),
        sa.CheckConstraint(
            "polling_station_type IN ('FixedLocation', 'Special', 'Mobile')",
            name="ck_polling_station_type",
        ),
        sa.CheckConstraint("number > 0", name="ck_polling_station_number"),
    )
    op.create_index("idx_polling_stations_election_id", "polling_stations", ["election_id"])


def downgrade() -> None:
    op.drop_index("idx_polling_stations_election_id", table_name="polling_stations")
    op.drop_table("polling_stations")
    op.drop_table("elections")
