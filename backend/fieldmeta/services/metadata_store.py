"""Session-backed CRUD primitives for field metadata."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues
from fieldmeta.models.metric_important_field import MetricImportantField
from fieldmeta.models.source_table import SourceTable


class MetadataStore:
    """Thin adapter over a SQLAlchemy session.

    Every method flushes but never commits; the caller owns the transaction.
    SQLAlchemy errors propagate unchanged.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def insert_field(self, attributes: Mapping[str, Any]) -> Field:
        field = Field(**attributes)
        self.db.add(field)
        self.db.flush()
        return field

    def update_field(self, field_id: int, attributes: Mapping[str, Any]) -> Field | None:
        field = self.db.get(Field, field_id)
        if field is None:
            return None
        for key, value in attributes.items():
            setattr(field, key, value)
        self.db.flush()
        return field

    def select_field(self, field_id: int | None) -> Field | None:
        if field_id is None:
            return None
        return self.db.get(Field, field_id)

    def select_fields_by_ids(self, field_ids: Collection[int]) -> list[Field]:
        if not field_ids:
            return []
        stmt = select(Field).where(Field.id.in_(sorted(field_ids))).order_by(Field.id.asc())
        return list(self.db.scalars(stmt).all())

    def select_fields_by_table(self, table_id: int) -> list[Field]:
        stmt = select(Field).where(Field.table_id == table_id).order_by(Field.id.asc())
        return list(self.db.scalars(stmt).all())

    def select_child_field_ids(self, field_id: int) -> list[int]:
        stmt = select(Field.id).where(Field.parent_id == field_id).order_by(Field.id.asc())
        return list(self.db.scalars(stmt).all())

    def select_field_values_by_field_ids(self, field_ids: Collection[int]) -> list[FieldValues]:
        if not field_ids:
            return []
        stmt = (
            select(FieldValues)
            .where(FieldValues.field_id.in_(sorted(field_ids)))
            .order_by(FieldValues.field_id.asc(), FieldValues.id.asc())
        )
        return list(self.db.scalars(stmt).all())

    def select_table(self, table_id: int | None) -> SourceTable | None:
        if table_id is None:
            return None
        return self.db.get(SourceTable, table_id)

    def cascade_delete_children(self, field_id: int) -> None:
        self.db.execute(delete(Field).where(Field.parent_id == field_id))

    def cascade_delete_values(self, field_id: int) -> None:
        self.db.execute(delete(FieldValues).where(FieldValues.field_id == field_id))

    def cascade_delete_cross_refs(self, field_id: int) -> None:
        self.db.execute(delete(MetricImportantField).where(MetricImportantField.field_id == field_id))

    def delete_field_row(self, field: Field) -> None:
        self.db.delete(field)
        self.db.flush()
