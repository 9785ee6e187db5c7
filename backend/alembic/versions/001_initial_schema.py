"""Initial schema — users, products, carts.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(100), nullable=False),
        sa.Column("wallet_money", sa.Integer, nullable=False, server_default="500"),
        sa.Column("address", sa.Text, nullable=False, server_default="ADDRESS_NOT_SET"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("version", sa.Integer, nullable=False, server_default="1"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "products",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("cost", sa.Integer, nullable=False),
        sa.Column("rating", sa.Integer, nullable=False, server_default="0"),
        sa.Column("image", sa.String(500), nullable=False, server_default=""),
        sa.CheckConstraint("cost >= 0", name="ck_products_cost_non_negative"),
    )

    op.create_table(
        "carts",
        sa.Column("email", sa.String(255), primary_key=True),
        sa.Column("cart_items", sa.JSON, nullable=False),
        sa.Column("payment_option", sa.String(50), nullable=False, server_default="PAYMENT_OPTION_DEFAULT"),
        sa.Column("version", sa.Integer, nullable=False, server_default="1"),
    )


def downgrade() -> None:
    op.drop_table("carts")
    op.drop_table("products")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
