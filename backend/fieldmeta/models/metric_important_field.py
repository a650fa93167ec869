"""Metric important field ORM model."""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from fieldmeta.models.base import Base, IdMixin


class MetricImportantField(Base, IdMixin):
    """Cross-reference marking a field as important to a metric definition."""

    __tablename__ = "metric_important_fields"

    metric_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    field_id: Mapped[int] = mapped_column(
        ForeignKey("fields.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
