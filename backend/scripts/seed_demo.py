"""Seed a demo source table and run field sync against it.

Usage (from repository root):
    python backend/scripts/seed_demo.py

Usage (from backend directory):
    python scripts/seed_demo.py
    # or
    python -m scripts.seed_demo
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy import select

# Make `fieldmeta` imports work whether the script is run from repo root or backend/.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from fieldmeta.db.session import SessionLocal
from fieldmeta.models.source_table import SourceTable
from fieldmeta.services.field_sync import FieldDescriptor
from fieldmeta.services.fields import list_table_fields, sync_table
from fieldmeta.services.metadata_store import MetadataStore
from fieldmeta.services.qualified_name import qualified_name


DEFAULT_SCHEMA = "public"
DEFAULT_TABLE = "people"


def build_demo_descriptors() -> list[FieldDescriptor]:
    """Return a deterministic column listing for the demo table."""

    return [
        FieldDescriptor(name="id", base_type="IntegerField", pk=True),
        FieldDescriptor(name="first_name", base_type="CharField"),
        FieldDescriptor(name="last_name", base_type="CharField"),
        FieldDescriptor(name="status", base_type="CharField"),
        FieldDescriptor(name="home_lat", base_type="FloatField"),
        FieldDescriptor(name="home_lng", base_type="FloatField"),
        FieldDescriptor(name="signup_ts", base_type="BigIntegerField", special_type="timestamp_seconds"),
        FieldDescriptor(name="address", base_type="DictionaryField"),
    ]


def get_or_create_table(db, schema: str, name: str) -> SourceTable:
    """Return the demo table row, inserting it if missing."""

    table = db.scalar(select(SourceTable).where(SourceTable.schema == schema, SourceTable.name == name))
    if table is None:
        table = SourceTable(schema=schema, name=name, display_name=name.title())
        db.add(table)
        db.commit()
        db.refresh(table)
    return table


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed a demo table and sync its fields.")
    parser.add_argument("--schema", default=DEFAULT_SCHEMA)
    parser.add_argument("--table", default=DEFAULT_TABLE)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    with SessionLocal() as db:
        table = get_or_create_table(db, args.schema, args.table)
        result = sync_table(db, table.id, build_demo_descriptors())
        print(f"Synced table {table.id}: {result.model_dump() if result else None}")

        store = MetadataStore(db)
        for field in list_table_fields(db, table.id) or []:
            print(
                f"  {qualified_name(store, field):<32} base={field.base_type:<16} "
                f"special={field.special_type or '-':<18} visibility={field.visibility_type}"
            )


if __name__ == "__main__":
    main()
