"""Batched hydration of values and FK targets onto field collections."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from fieldmeta.models.field import Field
from fieldmeta.models.source_table import SourceTable
from fieldmeta.schemas.field import FieldRead, FieldValuesRead
from fieldmeta.services.metadata_store import MetadataStore


def attach_values(store: MetadataStore, fields: Sequence[Field | FieldRead]) -> list[FieldRead]:
    """Attach each field's ``FieldValues`` rows using a single lookup for the whole batch."""

    rows = [FieldRead.model_validate(field) for field in fields]
    if not rows:
        return []

    field_ids = {row.id for row in rows}
    values_by_field_id: dict[int, list[FieldValuesRead]] = defaultdict(list)
    for record in store.select_field_values_by_field_ids(field_ids):
        values_by_field_id[record.field_id].append(FieldValuesRead.model_validate(record))

    return [row.model_copy(update={"values": list(values_by_field_id.get(row.id, []))}) for row in rows]


def attach_targets(store: MetadataStore, fields: Sequence[Field | FieldRead]) -> list[FieldRead]:
    """Attach the FK target field of every ``fk`` field using at most one lookup."""

    rows = [FieldRead.model_validate(field) for field in fields]
    target_ids = {
        row.fk_target_field_id
        for row in rows
        if row.special_type == "fk" and row.fk_target_field_id is not None
    }
    targets_by_id: dict[int, FieldRead] = {}
    if target_ids:
        targets_by_id = {
            target.id: FieldRead.model_validate(target)
            for target in store.select_fields_by_ids(target_ids)
        }

    return [
        row.model_copy(
            update={"target": targets_by_id.get(row.fk_target_field_id) if row.special_type == "fk" else None}
        )
        for row in rows
    ]


def field_values(store: MetadataStore, field: Field | FieldRead) -> list[FieldValuesRead]:
    return [
        FieldValuesRead.model_validate(record)
        for record in store.select_field_values_by_field_ids({field.id})
    ]


def field_target(store: MetadataStore, field: Field | FieldRead) -> Field | None:
    """Return the field an ``fk`` field points to, if it is set and still exists."""

    if field.special_type != "fk" or field.fk_target_field_id is None:
        return None
    return store.select_field(field.fk_target_field_id)


def field_table(store: MetadataStore, field: Field | FieldRead) -> SourceTable | None:
    return store.select_table(field.table_id)
