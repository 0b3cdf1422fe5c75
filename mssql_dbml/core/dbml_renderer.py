"""
DBML renderer — turns flat metadata streams into DBML text lines.
Columns are folded into Table blocks; foreign keys become Ref lines.
Every function here is pure: same input, same output, no I/O.
"""
import re
from functools import reduce
from typing import Iterable, Optional

from mssql_dbml.models.dbml import TableBlock
from mssql_dbml.models.metadata import ColumnRecord, ForeignKeyRecord

CHAR_TYPES = ("varchar", "nvarchar", "char", "nchar")
NUMERIC_TYPES = ("decimal", "numeric")
DEFAULT_ACTION = "NO_ACTION"

_LEADING_PARENS = re.compile(r"^\(+")
_TRAILING_PARENS = re.compile(r"\)+$")


# ── Columns ───────────────────────────────────────────────────────────────────

def render_type(col: ColumnRecord) -> str:
    """`varchar(50)`, `nvarchar(max)`, `decimal(10,2)`, or the bare type name."""
    if col.data_type in CHAR_TYPES and col.char_max_length is not None:
        length = "max" if col.char_max_length == -1 else col.char_max_length
        return f"{col.data_type}({length})"
    if col.data_type in NUMERIC_TYPES and col.numeric_precision is not None:
        # A scale of 0 is treated like no scale: decimal(10,0) -> decimal(10)
        if col.numeric_scale:
            return f"{col.data_type}({col.numeric_precision},{col.numeric_scale})"
        return f"{col.data_type}({col.numeric_precision})"
    return col.data_type


def clean_default(expr: Optional[str]) -> Optional[str]:
    """
    Strip SQL Server's default-expression wrapping: ``(('draft'))`` -> ``draft``.
    Returns None when nothing usable is left (empty or NULL).
    """
    if not expr:
        return None
    value = expr.strip()
    value = _LEADING_PARENS.sub("", value)
    value = _TRAILING_PARENS.sub("", value)
    if value.startswith("'"):
        value = value[1:]
    if value.endswith("'"):
        value = value[:-1]
    if not value or value == "NULL":
        return None
    return value


def column_attributes(col: ColumnRecord) -> list[str]:
    attrs = []
    if col.is_primary_key:
        attrs.append("pk")
    if col.is_identity:
        attrs.append("increment")
    if col.is_unique and not col.is_primary_key:
        attrs.append("unique")
    if col.is_nullable:
        attrs.append("null")
    default = clean_default(col.default_expr)
    if default is not None:
        attrs.append(f"default: '{default}'")
    return attrs


def render_column(col: ColumnRecord) -> str:
    attrs = column_attributes(col)
    attr_str = f" [{', '.join(attrs)}]" if attrs else ""
    return f"  {col.column_name} {render_type(col)}{attr_str}"


def _fold_column(blocks: tuple[TableBlock, ...], col: ColumnRecord) -> tuple[TableBlock, ...]:
    line = render_column(col)
    if blocks:
        last = blocks[-1]
        if (last.schema_name, last.table_name) == (col.schema_name, col.table_name):
            return blocks[:-1] + (last.model_copy(update={"column_lines": last.column_lines + (line,)}),)
    return blocks + (TableBlock(schema_name=col.schema_name, table_name=col.table_name, column_lines=(line,)),)


def group_tables(columns: Iterable[ColumnRecord]) -> tuple[TableBlock, ...]:
    """
    Group a stream ordered by (schema, table, ordinal) into Table blocks.
    A new block starts whenever the (schema, table) pair changes, so
    out-of-order input yields extra blocks rather than an error.
    """
    return reduce(_fold_column, columns, ())


def render_table_block(block: TableBlock) -> list[str]:
    return [f"Table {block.full_name} {{", *block.column_lines, "}", ""]


def render_tables(columns: Iterable[ColumnRecord]) -> list[str]:
    lines: list[str] = []
    for block in group_tables(columns):
        lines.extend(render_table_block(block))
    return lines


# ── Relationships ─────────────────────────────────────────────────────────────

def normalize_action(action: str) -> str:
    """`SET_NULL` -> `set null`."""
    return action.lower().replace("_", " ", 1)


def relationship_actions(fk: ForeignKeyRecord) -> list[str]:
    actions = []
    if fk.delete_action and fk.delete_action != DEFAULT_ACTION:
        actions.append(f"delete: {normalize_action(fk.delete_action)}")
    if fk.update_action and fk.update_action != DEFAULT_ACTION:
        actions.append(f"update: {normalize_action(fk.update_action)}")
    return actions


def render_relationship(fk: ForeignKeyRecord) -> str:
    ref = (
        f"Ref: {fk.fk_schema}.{fk.fk_table}.{fk.fk_column}"
        f" > {fk.pk_schema}.{fk.pk_table}.{fk.pk_column}"
    )
    actions = relationship_actions(fk)
    if actions:
        ref += f" [{', '.join(actions)}]"
    return ref


def render_relationships(fks: Iterable[ForeignKeyRecord]) -> list[str]:
    return [render_relationship(fk) for fk in fks]
