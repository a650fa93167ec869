"""ORM models package exports."""

from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues
from fieldmeta.models.metric_important_field import MetricImportantField
from fieldmeta.models.source_table import SourceTable

__all__ = [
    "SourceTable",
    "Field",
    "FieldValues",
    "MetricImportantField",
]
