"""create_crm_tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:12:44.218305
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


sale_status = sa.Enum("Pending", "Completed", "Cancelled", name="sale_status")
interaction_type = sa.Enum("Call", "Email", "Meeting", name="interaction_type")


def upgrade() -> None:
    """Upgrade schema."""

    # CUSTOMERS
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("company", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_customers_id", "customers", ["id"], unique=False)

    # SALES
    op.create_table(
        "sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("product_service", sa.String(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sale_status, nullable=False, server_default="Pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("amount >= 0", name="ck_sale_amount_non_negative"),
    )
    op.create_index("ix_sales_id", "sales", ["id"], unique=False)
    op.create_index("ix_sales_customer_id", "sales", ["customer_id"], unique=False)
    op.create_index("ix_sales_status", "sales", ["status"], unique=False)
    op.create_index("ix_sales_customer_date", "sales", ["customer_id", "date"], unique=False)

    # INTERACTIONS
    op.create_table(
        "interactions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("type", interaction_type, nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_interactions_id", "interactions", ["id"], unique=False)
    op.create_index("ix_interactions_customer_id", "interactions", ["customer_id"], unique=False)
    op.create_index("ix_interactions_date", "interactions", ["date"], unique=False)
    op.create_index(
        "ix_interactions_customer_date",
        "interactions",
        ["customer_id", "date"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_interactions_customer_date", table_name="interactions")
    op.drop_index("ix_interactions_date", table_name="interactions")
    op.drop_index("ix_interactions_customer_id", table_name="interactions")
    op.drop_index("ix_interactions_id", table_name="interactions")
    op.drop_table("interactions")

    op.drop_index("ix_sales_customer_date", table_name="sales")
    op.drop_index("ix_sales_status", table_name="sales")
    op.drop_index("ix_sales_customer_id", table_name="sales")
    op.drop_index("ix_sales_id", table_name="sales")
    op.drop_table("sales")

    op.drop_index("ix_customers_id", table_name="customers")
    op.drop_table("customers")

    interaction_type.drop(op.get_bind(), checkfirst=True)
    sale_status.drop(op.get_bind(), checkfirst=True)
