"""Initial schema for the PGAdapter sample

Revision ID: 20240101_000000
Revises: None
Create Date: 2024-01-01 00:00:00.000000

Creates the sample data model on a Cloud Spanner PostgreSQL database:
- singers, with a stored generated full_name column
- albums of a singer
- tracks, interleaved in albums
- venues with a jsonb description
- concerts of a singer at a venue
- ticket_sales, keyed by a bit-reversed sequence

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20240101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables of the sample data model."""

    op.create_table(
        "singers",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("first_name", sa.String(200), nullable=True),
        sa.Column("last_name", sa.String(200), nullable=False),
        sa.Column(
            "full_name",
            sa.String(400),
            sa.Computed(
                "CASE WHEN first_name IS NULL THEN last_name "
                "WHEN last_name IS NULL THEN first_name "
                "ELSE first_name || ' ' || last_name END",
                persisted=True,
            ),
        ),
        sa.Column("active", sa.Boolean(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_singers_last_name", "last_name"),
    )

    op.create_table(
        "albums",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("marketing_budget", sa.Numeric(), nullable=True),
        sa.Column("release_date", sa.Date(), nullable=True),
        sa.Column("cover_picture", sa.LargeBinary(), nullable=True),
        sa.Column("singer_id", sa.String(36), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["singer_id"], ["singers.id"], name="fk_albums_singers"),
    )

    # Interleaving stores the tracks of an album physically together with the album.
    op.execute(
        """
        create table tracks (
            id           varchar(36) not null,
            track_number bigint not null,
            title        varchar(200) not null,
            sample_rate  float8,
            created_at   timestamptz not null,
            updated_at   timestamptz not null,
            primary key (id, track_number)
        ) interleave in parent albums on delete cascade
        """
    )

    op.create_table(
        "venues",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", JSONB(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "concerts",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("venue_id", sa.String(36), nullable=False),
        sa.Column("singer_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["venue_id"], ["venues.id"], name="fk_concerts_venues"),
        sa.ForeignKeyConstraint(["singer_id"], ["singers.id"], name="fk_concerts_singers"),
        sa.CheckConstraint("end_time > start_time", name="chk_end_time_after_start_time"),
    )

    # Bit-reversed sequences generate primary keys without write hotspots.
    op.execute("create sequence if not exists ticket_sale_seq bit_reversed_positive")

    op.create_table(
        "ticket_sales",
        sa.Column("id", sa.BigInteger(), server_default=sa.text("nextval('ticket_sale_seq')"), nullable=False),
        sa.Column("concert_id", sa.String(36), nullable=False),
        sa.Column("customer_name", sa.String(200), nullable=False),
        sa.Column("price", sa.Numeric(), nullable=False),
        sa.Column("seats", ARRAY(sa.Text()), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["concert_id"], ["concerts.id"], name="fk_ticket_sales_concerts"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("ticket_sales")
    op.execute("drop sequence if exists ticket_sale_seq")
    op.drop_table("concerts")
    op.drop_table("venues")
    op.drop_table("tracks")
    op.drop_table("albums")
    op.drop_index("ix_singers_last_name", table_name="singers")
    op.drop_table("singers")
