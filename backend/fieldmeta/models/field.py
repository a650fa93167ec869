"""Field ORM model."""

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from fieldmeta.models.base import Base, IdMixin, TimestampMixin


class Field(Base, IdMixin, TimestampMixin):
    """Column (or nested sub-key of a column) belonging to a source table."""

    __tablename__ = "fields"
    __table_args__ = (
        UniqueConstraint("table_id", "name", "parent_id", name="uq_fields_table_name_parent"),
    )

    table_id: Mapped[int] = mapped_column(
        ForeignKey("source_tables.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    raw_column_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("fields.id", ondelete="CASCADE"),
        index=True,
        nullable=True,
    )
    name: Mapped[str] = mapped_column(String(254), nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(254), nullable=True)
    base_type: Mapped[str] = mapped_column(String(64), nullable=False)
    special_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    visibility_type: Mapped[str] = mapped_column(String(32), default="normal", nullable=False)
    fk_target_field_id: Mapped[int | None] = mapped_column(
        ForeignKey("fields.id", ondelete="SET NULL"),
        nullable=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
