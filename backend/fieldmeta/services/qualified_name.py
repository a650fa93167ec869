"""Dotted path resolution across schema, table and nested parent fields."""

from __future__ import annotations

from fieldmeta.errors import CyclicParentChainError
from fieldmeta.models.field import Field
from fieldmeta.schemas.field import FieldRead
from fieldmeta.services.metadata_store import MetadataStore


def qualified_name_components(store: MetadataStore, field: Field | FieldRead) -> list[str]:
    """Return ``[schema?, table, parent*, field]`` for ``field``.

    Unresolvable parents end the chain and a missing table contributes no
    segments. A parent chain that revisits a field raises ``CyclicParentChainError``.
    """

    chain: list[Field | FieldRead] = [field]
    seen_ids: list[int | None] = [field.id]
    current = field
    while current.parent_id is not None:
        parent = store.select_field(current.parent_id)
        if parent is None:
            break
        if parent.id in seen_ids:
            raise CyclicParentChainError([*seen_ids, parent.id])
        chain.append(parent)
        seen_ids.append(parent.id)
        current = parent

    components: list[str] = []
    table = store.select_table(chain[-1].table_id)
    if table is not None:
        if table.schema:
            components.append(table.schema)
        components.append(table.name)
    components.extend(node.name for node in reversed(chain))
    return components


def qualified_name(store: MetadataStore, field: Field | FieldRead) -> str:
    """Return e.g. ``schema.table_name.parent_field_name.field_name``."""

    return ".".join(qualified_name_components(store, field))
