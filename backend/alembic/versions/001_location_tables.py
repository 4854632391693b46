"""Location tables: location_details, location_coordinates, favorites, search_history

Revision ID: 001
Revises:
Create Date: (run alembic upgrade head)

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "location_details",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("address_key", sa.String(512), nullable=False),
        sa.Column("formatted_address", sa.Text(), nullable=True),
        sa.Column("display_name", sa.Text(), nullable=True),
        sa.Column("place_type", sa.String(64), nullable=True),
        sa.Column("country", sa.String(128), nullable=True),
        sa.Column("state", sa.String(128), nullable=True),
        sa.Column("city", sa.String(128), nullable=True),
        sa.Column("postal_code", sa.String(32), nullable=True),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_location_details_address_key", "location_details", ["address_key"])
    op.create_index("ix_location_details_user_id", "location_details", ["user_id"])

    op.create_table(
        "location_coordinates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "location_detail_id",
            sa.Integer(),
            sa.ForeignKey("location_details.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("accuracy", sa.Float(), nullable=True),
        sa.Column("elevation", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("latitude >= -90 AND latitude <= 90", name="ck_location_coordinates_latitude"),
        sa.CheckConstraint("longitude >= -180 AND longitude <= 180", name="ck_location_coordinates_longitude"),
    )
    op.create_index(
        "ix_location_coordinates_location_detail_id", "location_coordinates", ["location_detail_id"]
    )

    op.create_table(
        "favorites",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column(
            "location_detail_id",
            sa.Integer(),
            sa.ForeignKey("location_details.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_favorites_user_id", "favorites", ["user_id"])
    op.create_index("ix_favorites_location_detail_id", "favorites", ["location_detail_id"])

    op.create_table(
        "search_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column(
            "location_detail_id",
            sa.Integer(),
            sa.ForeignKey("location_details.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("search_query", sa.Text(), nullable=False),
        sa.Column("searched_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_search_history_user_searched_at", "search_history", ["user_id", "searched_at"])
    op.create_index("ix_search_history_location_detail_id", "search_history", ["location_detail_id"])


def downgrade() -> None:
    op.drop_index("ix_search_history_location_detail_id", table_name="search_history")
    op.drop_index("ix_search_history_user_searched_at", table_name="search_history")
    op.drop_table("search_history")
    op.drop_index("ix_favorites_location_detail_id", table_name="favorites")
    op.drop_index("ix_favorites_user_id", table_name="favorites")
    op.drop_table("favorites")
    op.drop_index("ix_location_coordinates_location_detail_id", table_name="location_coordinates")
    op.drop_table("location_coordinates")
    op.drop_index("ix_location_details_user_id", table_name="location_details")
    op.drop_index("ix_location_details_address_key", table_name="location_details")
    op.drop_table("location_details")
