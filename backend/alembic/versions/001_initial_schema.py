"""Initial schema - the six catalog resource tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _surrogate_id() -> sa.Column:
    return sa.Column(
        "id", sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
        primary_key=True, autoincrement=True,
    )


def upgrade() -> None:
    op.create_table(
        "articles",
        _surrogate_id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("url", sa.String(2000), nullable=False),
        sa.Column("explanation", sa.Text, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("date_added", sa.DateTime, nullable=False),
    )

    op.create_table(
        "menu_item_reviews",
        _surrogate_id(),
        sa.Column("item_id", sa.BigInteger, nullable=False),
        sa.Column("reviewer_email", sa.String(255), nullable=False),
        sa.Column("stars", sa.Integer, nullable=False),
        sa.Column("date_reviewed", sa.DateTime, nullable=False),
        sa.Column("comments", sa.Text, nullable=False),
    )

    op.create_table(
        "recommendation_requests",
        _surrogate_id(),
        sa.Column("requester_email", sa.String(255), nullable=False),
        sa.Column("professor_email", sa.String(255), nullable=False),
        sa.Column("date_requested", sa.DateTime, nullable=False),
        sa.Column("date_needed", sa.DateTime, nullable=False),
        sa.Column("done", sa.Boolean, nullable=False),
    )

    op.create_table(
        "ucsb_dining_commons_menu_items",
        _surrogate_id(),
        sa.Column("dining_commons_code", sa.String(50), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("station", sa.String(255), nullable=False),
    )

    op.create_table(
        "help_requests",
        _surrogate_id(),
        sa.Column("requester_email", sa.String(255), nullable=False),
        sa.Column("team_name", sa.String(100), nullable=False),
        sa.Column("request_text", sa.Text, nullable=False),
        sa.Column("explanation", sa.Text, nullable=False),
        sa.Column("solved", sa.Boolean, nullable=False),
        sa.Column("request_time", sa.DateTime, nullable=False),
    )

    op.create_table(
        "ucsb_organizations",
        sa.Column("org_code", sa.String(50), primary_key=True),
        sa.Column("org_translation_short", sa.String(255), nullable=False),
        sa.Column("org_translation", sa.String(500), nullable=False),
        sa.Column("inactive", sa.Boolean, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("ucsb_organizations")
    op.drop_table("help_requests")
    op.drop_table("ucsb_dining_commons_menu_items")
    op.drop_table("recommendation_requests")
    op.drop_table("menu_item_reviews")
    op.drop_table("articles")
