"""Integration tests for qualified field name resolution."""

from __future__ import annotations

import unittest

from sqlalchemy import create_engine, delete
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fieldmeta.errors import CyclicParentChainError
from fieldmeta.models.base import Base
from fieldmeta.models.field import Field
from fieldmeta.models.field_values import FieldValues
from fieldmeta.models.metric_important_field import MetricImportantField
from fieldmeta.models.source_table import SourceTable
from fieldmeta.services.metadata_store import MetadataStore
from fieldmeta.services.qualified_name import qualified_name, qualified_name_components


class QualifiedNameTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)
        Base.metadata.create_all(cls.engine)

    @classmethod
    def tearDownClass(cls) -> None:
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        self.db: Session = self.SessionLocal()
        self.db.execute(delete(MetricImportantField))
        self.db.execute(delete(FieldValues))
        self.db.execute(delete(Field))
        self.db.execute(delete(SourceTable))
        self.db.commit()
        self.store = MetadataStore(self.db)

    def tearDown(self) -> None:
        self.db.close()

    def _table(self, name: str, schema: str | None = None) -> SourceTable:
        table = SourceTable(name=name, schema=schema)
        self.db.add(table)
        self.db.flush()
        return table

    def _field(self, table: SourceTable, name: str, parent: Field | None = None) -> Field:
        field = Field(
            table_id=table.id,
            name=name,
            base_type="CharField",
            parent_id=parent.id if parent is not None else None,
        )
        self.db.add(field)
        self.db.flush()
        return field

    def test_root_field_without_schema(self) -> None:
        age = self._field(self._table("people"), "age")
        self.assertEqual(qualified_name(self.store, age), "people.age")

    def test_root_field_with_schema(self) -> None:
        age = self._field(self._table("people", schema="public"), "age")
        self.assertEqual(qualified_name_components(self.store, age), ["public", "people", "age"])
        self.assertEqual(qualified_name(self.store, age), "public.people.age")

    def test_nested_field_includes_parent_path(self) -> None:
        people = self._table("people")
        address = self._field(people, "address")
        zip_field = self._field(people, "zip", parent=address)
        plus_four = self._field(people, "plus_four", parent=zip_field)

        self.assertEqual(qualified_name(self.store, zip_field), "people.address.zip")
        self.assertEqual(qualified_name(self.store, plus_four), "people.address.zip.plus_four")

    def test_unresolvable_parent_is_treated_as_root(self) -> None:
        people = self._table("people")
        orphan = Field(table_id=people.id, name="orphan", base_type="CharField", parent_id=424242)
        self.db.add(orphan)
        self.db.flush()

        self.assertEqual(qualified_name(self.store, orphan), "people.orphan")

    def test_missing_table_contributes_no_segments(self) -> None:
        stray = Field(table_id=31337, name="stray", base_type="CharField")
        self.db.add(stray)
        self.db.flush()

        self.assertEqual(qualified_name(self.store, stray), "stray")

    def test_cyclic_parent_chain_raises_structural_error(self) -> None:
        people = self._table("people")
        left = self._field(people, "left")
        right = self._field(people, "right", parent=left)
        left.parent_id = right.id
        self.db.flush()

        with self.assertRaises(CyclicParentChainError) as ctx:
            qualified_name(self.store, right)
        self.assertEqual(ctx.exception.field_ids, [right.id, left.id, right.id])


if __name__ == "__main__":
    unittest.main()
