"""Field type taxonomy and classification utilities."""

from fieldmeta.schema.field_types import (
    BASE_TYPE_VALUES,
    SPECIAL_TYPE_VALUES,
    VISIBILITY_TYPE_VALUES,
    is_valid_special_type_for_base_type,
)
from fieldmeta.schema.humanization import humanize
from fieldmeta.schema.special_type_inference import check_pattern_table, infer_special_type

__all__ = [
    "BASE_TYPE_VALUES",
    "SPECIAL_TYPE_VALUES",
    "VISIBILITY_TYPE_VALUES",
    "check_pattern_table",
    "humanize",
    "infer_special_type",
    "is_valid_special_type_for_base_type",
]
