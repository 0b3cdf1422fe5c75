"""Assembles header comments, Table blocks and Ref lines into one DBML document."""
from typing import Sequence

from mssql_dbml.core.dbml_renderer import group_tables, render_relationships, render_table_block
from mssql_dbml.models.dbml import DocumentCounts, RenderedDocument
from mssql_dbml.models.metadata import ColumnRecord, ForeignKeyRecord

RELATIONSHIP_HEADER = "// Foreign Key Relationships"
RELATIONSHIP_SEPARATOR = "// " + "-" * 60


def build_header(database: str, server: str, generated_at: str) -> list[str]:
    return [
        f"// Generated from database: {database}",
        f"// Server: {server}",
        f"// Generated at: {generated_at}",
        "",
    ]


def build_document(
    columns: Sequence[ColumnRecord],
    foreign_keys: Sequence[ForeignKeyRecord],
    header: Sequence[str] = (),
) -> RenderedDocument:
    """Header lines are prepended verbatim; the relationship section only appears when FKs exist."""
    blocks = group_tables(columns)

    lines = list(header)
    for block in blocks:
        lines.extend(render_table_block(block))
    if foreign_keys:
        lines.append(RELATIONSHIP_HEADER)
        lines.append(RELATIONSHIP_SEPARATOR)
        lines.extend(render_relationships(foreign_keys))

    return RenderedDocument(
        text="\n".join(lines),
        counts=DocumentCounts(
            tables=len(blocks),
            columns=len(columns),
            foreign_keys=len(foreign_keys),
        ),
    )
