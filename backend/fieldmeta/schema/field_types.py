"""Controlled type taxonomy for field classification."""

from __future__ import annotations

from typing import Literal

BaseType = Literal[
    "ArrayField",
    "BigIntegerField",
    "BooleanField",
    "CharField",
    "DateField",
    "DateTimeField",
    "DecimalField",
    "DictionaryField",
    "FloatField",
    "IntegerField",
    "TextField",
    "TimeField",
    "UUIDField",
    "UnknownField",
]

SpecialType = Literal[
    "avatar",
    "category",
    "city",
    "country",
    "desc",
    "fk",
    "id",
    "image",
    "json",
    "latitude",
    "longitude",
    "name",
    "number",
    "state",
    "timestamp_milliseconds",
    "timestamp_seconds",
    "url",
    "zip_code",
]

# normal:       no visibility restrictions.
# details-only: long blob columns such as JSON; hidden from summary views.
# hidden:       removed from most pickers, still returned in queries.
# sensitive:    only listed in the data model; queries touching it must fail.
# retired:      no longer in the physical source; set by sync only.
VisibilityType = Literal["normal", "details-only", "hidden", "sensitive", "retired"]
UserVisibilityType = Literal["normal", "details-only", "hidden", "sensitive"]

BASE_TYPE_VALUES: tuple[str, ...] = (
    "ArrayField",
    "BigIntegerField",
    "BooleanField",
    "CharField",
    "DateField",
    "DateTimeField",
    "DecimalField",
    "DictionaryField",
    "FloatField",
    "IntegerField",
    "TextField",
    "TimeField",
    "UUIDField",
    "UnknownField",
)
BASE_TYPE_SET = frozenset(BASE_TYPE_VALUES)

SPECIAL_TYPE_VALUES: tuple[str, ...] = (
    "avatar",
    "category",
    "city",
    "country",
    "desc",
    "fk",
    "id",
    "image",
    "json",
    "latitude",
    "longitude",
    "name",
    "number",
    "state",
    "timestamp_milliseconds",
    "timestamp_seconds",
    "url",
    "zip_code",
)
SPECIAL_TYPE_SET = frozenset(SPECIAL_TYPE_VALUES)

DEFAULT_VISIBILITY_TYPE = "normal"
RETIRED_VISIBILITY_TYPE = "retired"
VISIBILITY_TYPE_VALUES: tuple[str, ...] = ("normal", "details-only", "hidden", "sensitive", "retired")
VISIBILITY_TYPE_SET = frozenset(VISIBILITY_TYPE_VALUES)
USER_VISIBILITY_TYPE_SET = VISIBILITY_TYPE_SET - {RETIRED_VISIBILITY_TYPE}

NUMERIC_BASE_TYPES = frozenset({"BigIntegerField", "DecimalField", "FloatField", "IntegerField"})

# Special types missing from this map can be applied to any base type.
SPECIAL_TYPE_VALID_BASE_TYPES: dict[str, frozenset[str]] = {
    "timestamp_seconds": NUMERIC_BASE_TYPES,
    "timestamp_milliseconds": NUMERIC_BASE_TYPES,
}


def is_valid_special_type_for_base_type(special_type: str | None, base_type: str | None) -> bool:
    """Return whether ``special_type`` may be assigned to a field of ``base_type``."""

    valid_base_types = SPECIAL_TYPE_VALID_BASE_TYPES.get(special_type) if special_type else None
    if valid_base_types is None:
        return True
    return base_type in valid_base_types
