"""
Database connector — SQLAlchemy engine factory and SQL Server metadata fetch.
Produces the ordered column and foreign-key record streams the renderer consumes.
"""
import logging
from typing import Any, Mapping, Optional

from sqlalchemy import bindparam, create_engine, text
from sqlalchemy.exc import DBAPIError, OperationalError

from mssql_dbml.config import settings
from mssql_dbml.core.queries import COLUMNS_QUERY, FOREIGN_KEYS_QUERY
from mssql_dbml.models.connection import ConnectionRequest, SchemaFilter
from mssql_dbml.models.metadata import ColumnRecord, ForeignKeyRecord

logger = logging.getLogger(__name__)


def create_engine_from_request(req: ConnectionRequest):
    """Build and test a SQLAlchemy engine from a ConnectionRequest."""
    engine = create_engine(
        req.get_sqlalchemy_url(),
        pool_pre_ping=True,
        connect_args={"timeout": settings.CONNECT_TIMEOUT_SECONDS},
    )
    # Validate the connection immediately
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except (OperationalError, DBAPIError) as e:
        engine.dispose()
        raise ValueError(f"Could not connect to database: {e}") from e
    return engine


def schema_clause(column_expr: str, schema_filter: SchemaFilter, keyword: str = "AND") -> tuple[str, dict]:
    """
    Build `<keyword> <column_expr> [NOT] IN :schemas` for the active filter.
    Returns ("", {}) when neither an include nor an exclude list is set.
    """
    mode = schema_filter.mode
    if mode is None:
        return "", {}
    op = "IN" if mode == "include" else "NOT IN"
    return f"{keyword} {column_expr} {op} :schemas", {"schemas": list(schema_filter.schemas)}


def _statement(template: str, clause: str, params: dict):
    stmt = text(template.format(schema_filter=clause))
    if params:
        stmt = stmt.bindparams(bindparam("schemas", expanding=True))
    return stmt


def _opt_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _to_column_record(row: Mapping[str, Any]) -> ColumnRecord:
    return ColumnRecord(
        schema_name=row["TABLE_SCHEMA"],
        table_name=row["TABLE_NAME"],
        column_name=row["COLUMN_NAME"],
        data_type=str(row["DATA_TYPE"]).lower(),
        char_max_length=_opt_int(row["CHARACTER_MAXIMUM_LENGTH"]),
        numeric_precision=_opt_int(row["NUMERIC_PRECISION"]),
        numeric_scale=_opt_int(row["NUMERIC_SCALE"]),
        is_nullable=row["IS_NULLABLE"] == "YES",
        default_expr=row["COLUMN_DEFAULT"],
        is_primary_key=bool(row["IS_PK"]),
        is_identity=bool(row["IS_IDENTITY"]),
        is_unique=bool(row["IS_UNIQUE"]),
    )


def _to_foreign_key_record(row: Mapping[str, Any]) -> ForeignKeyRecord:
    return ForeignKeyRecord(
        fk_schema=row["FK_SCHEMA"],
        fk_table=row["FK_TABLE"],
        fk_column=row["FK_COL"],
        pk_schema=row["PK_SCHEMA"],
        pk_table=row["PK_TABLE"],
        pk_column=row["PK_COL"],
        delete_action=row["DELETE_ACTION"],
        update_action=row["UPDATE_ACTION"],
    )


def fetch_columns(conn, schema_filter: SchemaFilter) -> list[ColumnRecord]:
    clause, params = schema_clause("t.TABLE_SCHEMA", schema_filter)
    rows = conn.execute(_statement(COLUMNS_QUERY, clause, params), params).mappings().all()
    return [_to_column_record(r) for r in rows]


def fetch_foreign_keys(conn, schema_filter: SchemaFilter) -> list[ForeignKeyRecord]:
    clause, params = schema_clause("OBJECT_SCHEMA_NAME(fk.parent_object_id)", schema_filter, keyword="WHERE")
    rows = conn.execute(_statement(FOREIGN_KEYS_QUERY, clause, params), params).mappings().all()
    return [_to_foreign_key_record(r) for r in rows]


def fetch_metadata(
    req: ConnectionRequest,
    schema_filter: SchemaFilter,
) -> tuple[list[ColumnRecord], list[ForeignKeyRecord]]:
    """Fetch both metadata streams over a single connection."""
    engine = create_engine_from_request(req)
    try:
        with engine.connect() as conn:
            logger.info("Fetching tables and columns…")
            columns = fetch_columns(conn, schema_filter)
            logger.info("Fetching foreign key relationships…")
            foreign_keys = fetch_foreign_keys(conn, schema_filter)
    finally:
        engine.dispose()
    return columns, foreign_keys
