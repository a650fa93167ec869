"""Validation and cascade hooks run around field persistence."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fieldmeta.errors import (
    InvalidSpecialTypeError,
    InvalidVisibilityTypeError,
    SelfParentError,
    SelfReferencingTargetError,
)
from fieldmeta.schema.field_types import (
    DEFAULT_VISIBILITY_TYPE,
    SPECIAL_TYPE_SET,
    VISIBILITY_TYPE_SET,
    is_valid_special_type_for_base_type,
)
from fieldmeta.schema.humanization import humanize
from fieldmeta.services.metadata_store import MetadataStore

logger = logging.getLogger(__name__)


def assert_valid_special_type(special_type: str | None, base_type: str | None) -> None:
    """Reject special types outside the taxonomy or incompatible with ``base_type``."""

    if special_type is None:
        return
    if special_type not in SPECIAL_TYPE_SET:
        raise InvalidSpecialTypeError(special_type)
    if not is_valid_special_type_for_base_type(special_type, base_type):
        raise InvalidSpecialTypeError(special_type, base_type)


def pre_insert(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a new field row and fill in defaults."""

    assert_valid_special_type(attributes.get("special_type"), attributes.get("base_type"))
    _assert_valid_visibility_type(attributes.get("visibility_type"))
    row = dict(attributes)
    if not row.get("display_name"):
        row["display_name"] = humanize(row.get("name"))
    if row.get("visibility_type") is None:
        row["visibility_type"] = DEFAULT_VISIBILITY_TYPE
    return row


def pre_update(store: MetadataStore, field_id: int, attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial update of an existing field row."""

    special_type = attributes.get("special_type")
    if special_type is not None:
        base_type = attributes.get("base_type")
        if base_type is None:
            existing = store.select_field(field_id)
            base_type = existing.base_type if existing is not None else None
        assert_valid_special_type(special_type, base_type)
    if "visibility_type" in attributes:
        _assert_valid_visibility_type(attributes["visibility_type"])
    if attributes.get("fk_target_field_id") is not None and attributes["fk_target_field_id"] == field_id:
        raise SelfReferencingTargetError(field_id)
    if attributes.get("parent_id") is not None and attributes["parent_id"] == field_id:
        raise SelfParentError(field_id)
    return dict(attributes)


def pre_cascade_delete(store: MetadataStore, field_id: int) -> None:
    """Remove everything that depends on a field: children, values, then cross-references."""

    _cascade_delete(store, field_id, visited=set())


def delete_field_cascade(store: MetadataStore, field_id: int) -> bool:
    """Delete a field and its dependents. Returns ``False`` if the field does not exist."""

    field = store.select_field(field_id)
    if field is None:
        return False
    pre_cascade_delete(store, field_id)
    store.delete_field_row(field)
    logger.info("field_lifecycle.field_deleted field_id=%s table_id=%s", field_id, field.table_id)
    return True


def _cascade_delete(store: MetadataStore, field_id: int, *, visited: set[int]) -> None:
    visited.add(field_id)
    for child_id in store.select_child_field_ids(field_id):
        if child_id in visited:
            logger.warning(
                "field_lifecycle.cyclic_child_skipped field_id=%s child_id=%s",
                field_id,
                child_id,
            )
            continue
        _cascade_delete(store, child_id, visited=visited)
    store.cascade_delete_children(field_id)
    store.cascade_delete_values(field_id)
    store.cascade_delete_cross_refs(field_id)


def _assert_valid_visibility_type(visibility_type: str | None) -> None:
    if visibility_type is not None and visibility_type not in VISIBILITY_TYPE_SET:
        raise InvalidVisibilityTypeError(visibility_type)
