"""Reconcile discovered columns against stored field metadata."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from time import perf_counter
from typing import Any

from fieldmeta.errors import FieldValidationError, InvalidBaseTypeError
from fieldmeta.models.field import Field
from fieldmeta.schema.field_types import (
    BASE_TYPE_SET,
    DEFAULT_VISIBILITY_TYPE,
    RETIRED_VISIBILITY_TYPE,
)
from fieldmeta.schema.humanization import humanize
from fieldmeta.schema.special_type_inference import infer_special_type
from fieldmeta.services.field_lifecycle import pre_insert, pre_update
from fieldmeta.services.metadata_store import MetadataStore

logger = logging.getLogger(__name__)

SYNCED_ATTRIBUTES: tuple[str, ...] = ("display_name", "base_type", "special_type", "parent_id")


@dataclass(slots=True)
class FieldDescriptor:
    """Column as reported by schema discovery."""

    name: str
    base_type: str
    special_type: str | None = None
    pk: bool = False
    parent_id: int | None = None
    raw_column_id: int | None = None


@dataclass(slots=True)
class FieldSyncResult:
    """Summary of one table sync."""

    table_id: int
    created: int = 0
    updated: int = 0
    unchanged: int = 0
    restored: int = 0
    retired: int = 0


def create_field(store: MetadataStore, table_id: int, descriptor: FieldDescriptor) -> Field:
    """Insert a new field for a column that has no stored counterpart."""

    if isinstance(table_id, bool) or not isinstance(table_id, int) or table_id < 1:
        raise FieldValidationError(f"Invalid table id: {table_id!r}")
    if not isinstance(descriptor.name, str) or not descriptor.name:
        raise FieldValidationError("Field name must be a non-empty string")
    _assert_valid_base_type(descriptor.base_type)

    special_type = (
        descriptor.special_type
        or ("id" if descriptor.pk else None)
        or infer_special_type(descriptor.name, descriptor.base_type)
    )
    attributes = pre_insert(
        {
            "table_id": table_id,
            "raw_column_id": descriptor.raw_column_id,
            "name": descriptor.name,
            "display_name": humanize(descriptor.name),
            "base_type": descriptor.base_type,
            "special_type": special_type,
            "parent_id": descriptor.parent_id,
        }
    )
    return store.insert_field(attributes)


def update_field(store: MetadataStore, existing: Field, descriptor: FieldDescriptor) -> Field:
    """Bring ``existing`` in line with ``descriptor``, writing only if something changed.

    A special type that is already set is never replaced by a hint or inference.
    """

    field, _changed = _reconcile_existing(store, existing, descriptor)
    return field


def retire_missing_fields(
    store: MetadataStore,
    table_id: int,
    present: Iterable[tuple[str, int | None]],
) -> list[Field]:
    """Mark active fields whose ``(name, parent_id)`` was not discovered as retired."""

    present_keys = set(present)
    retired: list[Field] = []
    for field in store.select_fields_by_table(table_id):
        if field.visibility_type == RETIRED_VISIBILITY_TYPE:
            continue
        if (field.name, field.parent_id) in present_keys:
            continue
        updated = store.update_field(
            field.id,
            pre_update(store, field.id, {"visibility_type": RETIRED_VISIBILITY_TYPE}),
        )
        if updated is not None:
            retired.append(updated)
    return retired


def sync_table_fields(
    store: MetadataStore,
    table_id: int,
    descriptors: Sequence[FieldDescriptor],
) -> FieldSyncResult:
    """Create, update, restore and retire fields so the table matches ``descriptors``."""

    total_started = perf_counter()
    result = FieldSyncResult(table_id=table_id)
    try:
        existing_by_key = {
            (field.name, field.parent_id): field for field in store.select_fields_by_table(table_id)
        }
        for descriptor in descriptors:
            existing = existing_by_key.get((descriptor.name, descriptor.parent_id))
            if existing is None:
                created = create_field(store, table_id, descriptor)
                existing_by_key[(created.name, created.parent_id)] = created
                result.created += 1
                continue

            restore = existing.visibility_type == RETIRED_VISIBILITY_TYPE
            _field, changed = _reconcile_existing(store, existing, descriptor, restore=restore)
            if restore:
                result.restored += 1
            elif changed:
                result.updated += 1
            else:
                result.unchanged += 1

        present = [(descriptor.name, descriptor.parent_id) for descriptor in descriptors]
        result.retired = len(retire_missing_fields(store, table_id, present))
    except Exception:
        logger.exception(
            "field_sync.table_failed table_id=%s descriptors=%d elapsed_ms=%.2f",
            table_id,
            len(descriptors),
            (perf_counter() - total_started) * 1000.0,
        )
        raise

    logger.info(
        (
            "field_sync.table_timing table_id=%s descriptors=%d created=%d updated=%d "
            "unchanged=%d restored=%d retired=%d total_ms=%.2f"
        ),
        table_id,
        len(descriptors),
        result.created,
        result.updated,
        result.unchanged,
        result.restored,
        result.retired,
        (perf_counter() - total_started) * 1000.0,
    )
    return result


def _reconcile_existing(
    store: MetadataStore,
    existing: Field,
    descriptor: FieldDescriptor,
    *,
    restore: bool = False,
) -> tuple[Field, bool]:
    _assert_valid_base_type(descriptor.base_type)
    candidate: dict[str, Any] = {
        "display_name": existing.display_name or humanize(descriptor.name),
        "base_type": descriptor.base_type,
        "special_type": (
            existing.special_type
            or descriptor.special_type
            or ("id" if descriptor.pk else None)
            or infer_special_type(descriptor.name, descriptor.base_type)
        ),
        "parent_id": descriptor.parent_id,
    }
    changed = [key for key in SYNCED_ATTRIBUTES if getattr(existing, key) != candidate[key]]
    if restore:
        candidate["visibility_type"] = DEFAULT_VISIBILITY_TYPE
        changed.append("visibility_type")
    if not changed:
        return existing, False

    logger.debug(
        "field_sync.field_changed field_id=%s attributes=%s",
        existing.id,
        ",".join(changed),
    )
    updated = store.update_field(existing.id, pre_update(store, existing.id, candidate))
    return (updated if updated is not None else existing), True


def _assert_valid_base_type(base_type: object) -> None:
    if not isinstance(base_type, str) or base_type not in BASE_TYPE_SET:
        raise InvalidBaseTypeError(base_type)
