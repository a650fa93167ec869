"""Field metadata services backing the HTTP routes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from fieldmeta.errors import CyclicParentChainError, UnknownTargetFieldError
from fieldmeta.schemas.field import (
    FieldDetailRead,
    FieldRead,
    FieldSyncResultRead,
    FieldUpdateRequest,
    SourceTableRead,
)
from fieldmeta.services.field_lifecycle import delete_field_cascade, pre_update
from fieldmeta.services.field_sync import FieldDescriptor, sync_table_fields
from fieldmeta.services.hydration import attach_targets, attach_values, field_table
from fieldmeta.services.metadata_store import MetadataStore
from fieldmeta.services.qualified_name import qualified_name

logger = logging.getLogger(__name__)


def list_table_fields(db: Session, table_id: int) -> list[FieldRead] | None:
    """List a table's fields hydrated with values and FK targets."""

    store = MetadataStore(db)
    if store.select_table(table_id) is None:
        return None
    fields = store.select_fields_by_table(table_id)
    return attach_targets(store, attach_values(store, fields))


def get_field_detail(db: Session, field_id: int) -> FieldDetailRead | None:
    """Return one hydrated field with its table and dotted path."""

    store = MetadataStore(db)
    field = store.select_field(field_id)
    if field is None:
        return None
    [hydrated] = attach_targets(store, attach_values(store, [field]))

    try:
        path = qualified_name(store, field)
    except CyclicParentChainError:
        logger.warning("fields.qualified_name_cycle field_id=%s", field_id, exc_info=True)
        path = None

    table = field_table(store, field)
    return FieldDetailRead(
        **hydrated.model_dump(exclude={"values", "target"}),
        values=hydrated.values,
        target=hydrated.target,
        qualified_name=path,
        table=SourceTableRead.model_validate(table) if table is not None else None,
    )


def update_field_metadata(db: Session, field_id: int, payload: FieldUpdateRequest) -> FieldRead | None:
    """Apply an operator edit to one field row."""

    store = MetadataStore(db)
    field = store.select_field(field_id)
    if field is None:
        return None
    if payload.fk_target_field_id is not None and payload.fk_target_field_id != field_id:
        if store.select_field(payload.fk_target_field_id) is None:
            raise UnknownTargetFieldError(payload.fk_target_field_id)

    attributes = payload.model_dump(exclude_none=True)
    if "display_name" in attributes:
        attributes["display_name"] = attributes["display_name"].strip()
    if "description" in attributes:
        attributes["description"] = attributes["description"].strip() or None

    store.update_field(field_id, pre_update(store, field_id, attributes))
    db.commit()
    db.refresh(field)
    return FieldRead.model_validate(field)


def delete_field(db: Session, field_id: int) -> bool:
    """Delete one field together with its children, values and cross-references."""

    deleted = delete_field_cascade(MetadataStore(db), field_id)
    if deleted:
        db.commit()
    return deleted


def sync_table(
    db: Session,
    table_id: int,
    descriptors: Sequence[FieldDescriptor],
) -> FieldSyncResultRead | None:
    """Reconcile one table's fields against a discovery listing and commit."""

    store = MetadataStore(db)
    if store.select_table(table_id) is None:
        return None
    try:
        result = sync_table_fields(store, table_id, descriptors)
    except Exception:
        db.rollback()
        raise
    db.commit()
    return FieldSyncResultRead.model_validate(result)
