"""Domain errors raised by the field metadata services."""

from __future__ import annotations

from collections.abc import Sequence


class FieldValidationError(ValueError):
    """A field write was rejected before anything was persisted."""


class InvalidBaseTypeError(FieldValidationError):
    def __init__(self, base_type: object) -> None:
        super().__init__(f"Invalid base type: {base_type!r}")
        self.base_type = base_type


class InvalidSpecialTypeError(FieldValidationError):
    def __init__(self, special_type: object, base_type: object | None = None) -> None:
        if base_type is None:
            message = f"Invalid special type: {special_type!r}"
        else:
            message = f"Special type {special_type!r} is not allowed for base type {base_type!r}"
        super().__init__(message)
        self.special_type = special_type
        self.base_type = base_type


class InvalidVisibilityTypeError(FieldValidationError):
    def __init__(self, visibility_type: object) -> None:
        super().__init__(f"Invalid visibility type: {visibility_type!r}")
        self.visibility_type = visibility_type


class SelfReferencingTargetError(FieldValidationError):
    def __init__(self, field_id: int) -> None:
        super().__init__(f"Field {field_id} cannot be its own foreign key target")
        self.field_id = field_id


class SelfParentError(FieldValidationError):
    def __init__(self, field_id: int) -> None:
        super().__init__(f"Field {field_id} cannot be its own parent")
        self.field_id = field_id


class UnknownTargetFieldError(FieldValidationError):
    def __init__(self, target_field_id: int) -> None:
        super().__init__(f"Foreign key target field {target_field_id} does not exist")
        self.target_field_id = target_field_id


class CyclicParentChainError(RuntimeError):
    """The parent_id chain of a field loops back on itself."""

    def __init__(self, field_ids: Sequence[int | None]) -> None:
        chain = " -> ".join(str(field_id) for field_id in field_ids)
        super().__init__(f"Cyclic parent chain: {chain}")
        self.field_ids = list(field_ids)


class PatternTableError(RuntimeError):
    """The special type inference rules are internally inconsistent."""
