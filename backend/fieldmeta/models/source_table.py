"""Source table ORM model."""

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from fieldmeta.models.base import Base, IdMixin, TimestampMixin


class SourceTable(Base, IdMixin, TimestampMixin):
    """Physical table discovered in a connected data source."""

    __tablename__ = "source_tables"
    __table_args__ = (UniqueConstraint("schema", "name", name="uq_source_tables_schema_name"),)

    name: Mapped[str] = mapped_column(String(254), nullable=False)
    schema: Mapped[str | None] = mapped_column(String(254), nullable=True)
    display_name: Mapped[str | None] = mapped_column(String(254), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
