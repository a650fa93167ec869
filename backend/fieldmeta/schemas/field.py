"""Field metadata response and request schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fieldmeta.schema.field_types import BaseType, SpecialType, UserVisibilityType


class SourceTableRead(BaseModel):
    """Serialized source table."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    schema_name: str | None = Field(default=None, validation_alias="schema")
    display_name: str | None
    active: bool


class FieldValuesRead(BaseModel):
    """Serialized distinct values for one field."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    field_id: int
    values: list[object]
    human_readable_values: list[str] | None = None


class FieldRead(BaseModel):
    """Serialized field, optionally hydrated with values and FK target."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    table_id: int
    raw_column_id: int | None = None
    parent_id: int | None = None
    name: str
    display_name: str | None = None
    base_type: str
    special_type: str | None = None
    visibility_type: str
    fk_target_field_id: int | None = None
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    values: list[FieldValuesRead] = Field(default_factory=list)
    target: FieldRead | None = None


class FieldDetailRead(FieldRead):
    """Hydrated field with its dotted path."""

    qualified_name: str | None = None
    table: SourceTableRead | None = None


class FieldUpdateRequest(BaseModel):
    """Fields an operator may edit on a field row. ``retired`` is reserved for sync."""

    display_name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    special_type: SpecialType | None = None
    visibility_type: UserVisibilityType | None = None
    fk_target_field_id: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def validate_non_empty_update(self) -> "FieldUpdateRequest":
        if not any(
            value is not None
            for value in (
                self.display_name,
                self.description,
                self.special_type,
                self.visibility_type,
                self.fk_target_field_id,
            )
        ):
            raise ValueError("At least one field must be provided.")
        return self


class FieldDescriptorPayload(BaseModel):
    """One column reported by schema discovery."""

    name: str = Field(min_length=1)
    base_type: BaseType
    special_type: SpecialType | None = None
    pk: bool = False
    parent_id: int | None = Field(default=None, ge=1)
    raw_column_id: int | None = None


class FieldSyncRequest(BaseModel):
    """Full column listing for one table as seen by discovery."""

    fields: list[FieldDescriptorPayload]


class FieldSyncResultRead(BaseModel):
    """Counts of what a table sync changed."""

    model_config = ConfigDict(from_attributes=True)

    table_id: int
    created: int
    updated: int
    unchanged: int
    restored: int
    retired: int
