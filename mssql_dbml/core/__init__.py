from mssql_dbml.core.dbml_renderer import render_tables, render_relationships  # noqa: F401
from mssql_dbml.core.document_builder import build_document, build_header  # noqa: F401
from mssql_dbml.core.db_connector import create_engine_from_request, fetch_metadata  # noqa: F401
from mssql_dbml.core.dbml_generator import generate_dbml  # noqa: F401
