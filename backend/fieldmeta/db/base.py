"""SQLAlchemy metadata registry import for Alembic."""

from fieldmeta.models import Field, FieldValues, MetricImportantField, SourceTable
from fieldmeta.models.base import Base

__all__ = ["Base", "SourceTable", "Field", "FieldValues", "MetricImportantField"]
