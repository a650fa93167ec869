"""field metadata tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:01
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019_0001"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "source_tables",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=254), nullable=False),
        sa.Column("schema", sa.String(length=254), nullable=True),
        sa.Column("display_name", sa.String(length=254), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("schema", "name", name="uq_source_tables_schema_name"),
    )

    op.create_table(
        "fields",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("table_id", sa.Integer(), nullable=False),
        sa.Column("raw_column_id", sa.Integer(), nullable=True),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(length=254), nullable=False),
        sa.Column("display_name", sa.String(length=254), nullable=True),
        sa.Column("base_type", sa.String(length=64), nullable=False),
        sa.Column("special_type", sa.String(length=64), nullable=True),
        sa.Column("visibility_type", sa.String(length=32), nullable=False, server_default="normal"),
        sa.Column("fk_target_field_id", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["table_id"], ["source_tables.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["fields.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["fk_target_field_id"], ["fields.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("table_id", "name", "parent_id", name="uq_fields_table_name_parent"),
    )
    op.create_index("ix_fields_table_id", "fields", ["table_id"], unique=False)
    op.create_index("ix_fields_parent_id", "fields", ["parent_id"], unique=False)

    op.create_table(
        "field_values",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("field_id", sa.Integer(), nullable=False),
        sa.Column("values", sa.JSON(), nullable=False),
        sa.Column("human_readable_values", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["field_id"], ["fields.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_field_values_field_id", "field_values", ["field_id"], unique=False)

    op.create_table(
        "metric_important_fields",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("metric_id", sa.Integer(), nullable=False),
        sa.Column("field_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["field_id"], ["fields.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_metric_important_fields_metric_id", "metric_important_fields", ["metric_id"], unique=False)
    op.create_index("ix_metric_important_fields_field_id", "metric_important_fields", ["field_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_metric_important_fields_field_id", table_name="metric_important_fields")
    op.drop_index("ix_metric_important_fields_metric_id", table_name="metric_important_fields")
    op.drop_table("metric_important_fields")
    op.drop_index("ix_field_values_field_id", table_name="field_values")
    op.drop_table("field_values")
    op.drop_index("ix_fields_parent_id", table_name="fields")
    op.drop_index("ix_fields_table_id", table_name="fields")
    op.drop_table("fields")
    op.drop_table("source_tables")
