"""Name-pattern based special type inference used during schema sync."""

from __future__ import annotations

import re
from collections.abc import Iterable

from fieldmeta.config import get_settings
from fieldmeta.errors import PatternTableError
from fieldmeta.schema.field_types import BASE_TYPE_SET, SPECIAL_TYPE_SET

PatternRule = tuple[re.Pattern[str], frozenset[str] | None, str]

_BOOL_OR_INT = frozenset({"BooleanField", "BigIntegerField", "IntegerField"})
_FLOAT = frozenset({"DecimalField", "FloatField"})
_INT_OR_TEXT = frozenset({"BigIntegerField", "IntegerField", "CharField", "TextField"})
_TEXT = frozenset({"CharField", "TextField"})


def _rule(pattern: str, base_types: frozenset[str] | None, special_type: str) -> PatternRule:
    return (re.compile(pattern, re.IGNORECASE), base_types, special_type)


# Matched against the lower-cased field name with fullmatch; first matching rule wins.
# A base type set of None accepts any base type.
_PATTERN_RULES: tuple[PatternRule, ...] = (
    _rule(r".*_lat", _FLOAT, "latitude"),
    _rule(r".*_lon", _FLOAT, "longitude"),
    _rule(r".*_lng", _FLOAT, "longitude"),
    _rule(r".*_long", _FLOAT, "longitude"),
    _rule(r".*_longitude", _FLOAT, "longitude"),
    _rule(r".*_rating", _INT_OR_TEXT, "category"),
    _rule(r".*_type", _INT_OR_TEXT, "category"),
    _rule(r".*_url", _TEXT, "url"),
    _rule(r"_latitude", _FLOAT, "latitude"),
    _rule(r"active", _BOOL_OR_INT, "category"),
    _rule(r"city", _TEXT, "city"),
    _rule(r"country", _TEXT, "country"),
    _rule(r"countryCode", _TEXT, "country"),
    _rule(r"currency", _INT_OR_TEXT, "category"),
    _rule(r"first_name", _TEXT, "name"),
    _rule(r"full_name", _TEXT, "name"),
    _rule(r"gender", _INT_OR_TEXT, "category"),
    _rule(r"last_name", _TEXT, "name"),
    _rule(r"lat", _FLOAT, "latitude"),
    _rule(r"latitude", _FLOAT, "latitude"),
    _rule(r"lon", _FLOAT, "longitude"),
    _rule(r"lng", _FLOAT, "longitude"),
    _rule(r"long", _FLOAT, "longitude"),
    _rule(r"longitude", _FLOAT, "longitude"),
    _rule(r"name", _TEXT, "name"),
    _rule(r"postalCode", _INT_OR_TEXT, "zip_code"),
    _rule(r"postal_code", _INT_OR_TEXT, "zip_code"),
    _rule(r"rating", _INT_OR_TEXT, "category"),
    _rule(r"role", _INT_OR_TEXT, "category"),
    _rule(r"sex", _INT_OR_TEXT, "category"),
    _rule(r"state", _TEXT, "state"),
    _rule(r"status", _INT_OR_TEXT, "category"),
    _rule(r"type", _INT_OR_TEXT, "category"),
    _rule(r"url", _TEXT, "url"),
    _rule(r"zip_code", _INT_OR_TEXT, "zip_code"),
    _rule(r"zipcode", _INT_OR_TEXT, "zip_code"),
)


def infer_special_type(field_name: object, base_type: object) -> str | None:
    """Return the special type implied by a field's name and base type, if any.

    Non-string names and base types outside the taxonomy yield ``None``.
    """

    if not isinstance(field_name, str) or not isinstance(base_type, str):
        return None
    lowered = field_name.lower()
    if lowered == "id":
        return "id"
    if base_type not in BASE_TYPE_SET:
        return None
    for name_pattern, valid_base_types, special_type in _PATTERN_RULES:
        if valid_base_types is not None and base_type not in valid_base_types:
            continue
        if name_pattern.fullmatch(lowered):
            return special_type
    return None


def check_pattern_table(rules: Iterable[PatternRule] | None = None) -> None:
    """Raise ``PatternTableError`` if any inference rule references unknown types."""

    for index, rule in enumerate(_PATTERN_RULES if rules is None else rules):
        name_pattern, valid_base_types, special_type = rule
        if not isinstance(name_pattern, re.Pattern):
            raise PatternTableError(f"Rule {index}: {name_pattern!r} is not a compiled pattern")
        if valid_base_types is not None:
            unknown = set(valid_base_types) - BASE_TYPE_SET
            if unknown:
                raise PatternTableError(f"Rule {index}: unknown base types {sorted(unknown)}")
        if special_type not in SPECIAL_TYPE_SET:
            raise PatternTableError(f"Rule {index}: unknown special type {special_type!r}")


if get_settings().environment != "prod":
    check_pattern_table()
