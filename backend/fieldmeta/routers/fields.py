"""Field metadata routes."""

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from fieldmeta.db.dependencies import get_db
from fieldmeta.errors import FieldValidationError
from fieldmeta.schemas.common import ApiResponse, DeleteResult
from fieldmeta.schemas.field import (
    FieldDetailRead,
    FieldRead,
    FieldSyncRequest,
    FieldSyncResultRead,
    FieldUpdateRequest,
)
from fieldmeta.services.field_sync import FieldDescriptor
from fieldmeta.services.fields import (
    delete_field,
    get_field_detail,
    list_table_fields,
    sync_table,
    update_field_metadata,
)

router = APIRouter()


@router.get("/tables/{table_id}/fields", response_model=ApiResponse[list[FieldRead]])
def get_table_fields(
    table_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[list[FieldRead]]:
    """List a table's fields with values and FK targets attached."""

    fields = list_table_fields(db, table_id)
    if fields is None:
        raise HTTPException(status_code=404, detail="Table not found")
    return ApiResponse(data=fields)


@router.post("/tables/{table_id}/fields/sync", response_model=ApiResponse[FieldSyncResultRead])
def post_table_field_sync(
    payload: FieldSyncRequest,
    table_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[FieldSyncResultRead]:
    """Reconcile stored fields against a discovery listing."""

    descriptors = [FieldDescriptor(**descriptor.model_dump()) for descriptor in payload.fields]
    try:
        result = sync_table(db, table_id, descriptors)
    except FieldValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if result is None:
        raise HTTPException(status_code=404, detail="Table not found")
    return ApiResponse(data=result)


@router.get("/fields/{field_id}", response_model=ApiResponse[FieldDetailRead])
def get_field(
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[FieldDetailRead]:
    """Return one field with values, FK target, table and qualified name."""

    detail = get_field_detail(db, field_id)
    if detail is None:
        raise HTTPException(status_code=404, detail="Field not found")
    return ApiResponse(data=detail)


@router.patch("/fields/{field_id}", response_model=ApiResponse[FieldRead])
def patch_field(
    payload: FieldUpdateRequest,
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[FieldRead]:
    """Edit one field row."""

    try:
        updated = update_field_metadata(db, field_id, payload)
    except FieldValidationError as exc:
        db.rollback()
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if updated is None:
        raise HTTPException(status_code=404, detail="Field not found")
    return ApiResponse(data=updated)


@router.delete("/fields/{field_id}", response_model=ApiResponse[DeleteResult])
def remove_field(
    field_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[DeleteResult]:
    """Delete one field and everything that depends on it."""

    deleted = delete_field(db, field_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Field not found")
    return ApiResponse(data=DeleteResult(id=field_id, deleted=True))
