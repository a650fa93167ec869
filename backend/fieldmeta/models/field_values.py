"""Field values ORM model."""

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fieldmeta.models.base import Base, IdMixin, TimestampMixin


class FieldValues(Base, IdMixin, TimestampMixin):
    """Distinct values observed for a field, used for value pickers and remapping."""

    __tablename__ = "field_values"

    field_id: Mapped[int] = mapped_column(
        ForeignKey("fields.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    values: Mapped[list[object]] = mapped_column(JSON, default=list, nullable=False)
    human_readable_values: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
