"""
DBML generator — connects, fetches metadata and renders the document.
Shared by the CLI and the HTTP API.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from mssql_dbml.core.db_connector import fetch_metadata
from mssql_dbml.core.document_builder import build_document, build_header
from mssql_dbml.models.connection import ConnectionRequest, SchemaFilter
from mssql_dbml.models.dbml import RenderedDocument

logger = logging.getLogger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 in UTC with milliseconds and a `Z` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_dbml(
    req: ConnectionRequest,
    schema_filter: SchemaFilter,
    generated_at: Optional[str] = None,
) -> RenderedDocument:
    if not req.database:
        raise ValueError("Database name is required")

    logger.info("Connecting to database…")
    logger.info("   Server: %s", req.server_label)
    logger.info("   Database: %s", req.database)
    if schema_filter.include:
        logger.info("   Include schemas: %s", ", ".join(schema_filter.include))
    if schema_filter.exclude:
        logger.info("   Exclude schemas: %s", ", ".join(schema_filter.exclude))

    columns, foreign_keys = fetch_metadata(req, schema_filter)

    header = build_header(req.database, req.server_label, generated_at or utc_timestamp())
    doc = build_document(columns, foreign_keys, header)
    logger.info("Found %d tables with %d columns", doc.counts.tables, doc.counts.columns)
    logger.info("Found %d foreign key relationships", doc.counts.foreign_keys)
    return doc
