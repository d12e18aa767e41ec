"""create chat catalog tables

Revision ID: 3c7e1a9d2b40
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c7e1a9d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

json_type = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "categories",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(length=32), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("popular", sa.Boolean(), nullable=False),
        sa.Column("keywords", json_type, nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_categories_slug"),
    )
    op.create_index("ix_categories_active", "categories", ["active"], unique=False)
    op.create_index("ix_categories_order", "categories", ["order"], unique=False)

    op.create_table(
        "services",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=24), nullable=True),
        sa.Column("provider", sa.String(length=64), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("keywords", json_type, nullable=False),
        sa.Column("tags", json_type, nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("price >= 0", name="ck_services_price_non_negative"),
        sa.ForeignKeyConstraint(["category"], ["categories.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_services_category", "services", ["category"], unique=False)
    op.create_index("ix_services_provider", "services", ["provider"], unique=False)
    op.create_index("ix_services_active", "services", ["active"], unique=False)

    op.create_table(
        "chat_responses",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("keywords", json_type, nullable=False),
        sa.Column("text", sa.String(length=1000), nullable=False),
        sa.Column("suggestions", json_type, nullable=True),
        sa.Column("service_ids", json_type, nullable=False),
        sa.Column("category_ids", json_type, nullable=False),
        sa.Column("priority", sa.Float(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("priority >= 0", name="ck_chat_responses_priority_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_chat_responses_active", "chat_responses", ["active"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_chat_responses_active", table_name="chat_responses")
    op.drop_table("chat_responses")
    op.drop_index("ix_services_active", table_name="services")
    op.drop_index("ix_services_provider", table_name="services")
    op.drop_index("ix_services_category", table_name="services")
    op.drop_table("services")
    op.drop_index("ix_categories_order", table_name="categories")
    op.drop_index("ix_categories_active", table_name="categories")
    op.drop_table("categories")
