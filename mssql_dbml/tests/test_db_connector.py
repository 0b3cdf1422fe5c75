from unittest.mock import MagicMock, patch

import pytest

from mssql_dbml.core.db_connector import (
    _to_column_record,
    _to_foreign_key_record,
    fetch_metadata,
    schema_clause,
)
from mssql_dbml.models.connection import ConnectionRequest, SchemaFilter


def test_schema_clause_include():
    clause, params = schema_clause("t.TABLE_SCHEMA", SchemaFilter(include=["dbo"], exclude=["sys"]))
    assert clause == "AND t.TABLE_SCHEMA IN :schemas"
    assert params == {"schemas": ["dbo"]}


def test_schema_clause_exclude_with_where():
    clause, params = schema_clause("s", SchemaFilter(exclude=["sys", "INFORMATION_SCHEMA"]), keyword="WHERE")
    assert clause == "WHERE s NOT IN :schemas"
    assert params == {"schemas": ["sys", "INFORMATION_SCHEMA"]}


def test_schema_clause_never_interpolates_names():
    clause, _ = schema_clause("s", SchemaFilter(include=["x'); DROP TABLE t; --"]))
    assert "DROP" not in clause


def test_schema_clause_no_filter():
    assert schema_clause("s", SchemaFilter(exclude=[])) == ("", {})


def test_to_column_record(column_row):
    col = _to_column_record(column_row)
    assert col.schema_name == "dbo"
    assert col.table_name == "Orders"
    assert col.char_max_length == 20
    assert col.is_nullable is False
    assert col.is_unique is True
    assert col.is_primary_key is False
    assert col.default_expr == "('draft')"


def test_to_column_record_nullable_and_uppercase_type(column_row):
    column_row.update({"IS_NULLABLE": "YES", "DATA_TYPE": "NVARCHAR", "IS_PK": 1})
    col = _to_column_record(column_row)
    assert col.is_nullable is True
    assert col.data_type == "nvarchar"
    assert col.is_primary_key is True


def test_to_foreign_key_record(fk_row):
    fk = _to_foreign_key_record(fk_row)
    assert fk.fk_column == "CustomerId"
    assert fk.pk_table == "Customers"
    assert fk.delete_action == "SET_NULL"


def _mock_engine(column_rows, fk_rows):
    conn = MagicMock()
    col_result, fk_result = MagicMock(), MagicMock()
    col_result.mappings.return_value.all.return_value = column_rows
    fk_result.mappings.return_value.all.return_value = fk_rows
    conn.execute.side_effect = [col_result, fk_result]
    engine = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    return engine, conn


def test_fetch_metadata(column_row, fk_row):
    engine, conn = _mock_engine([column_row], [fk_row])
    req = ConnectionRequest(database="Shop")
    with patch("mssql_dbml.core.db_connector.create_engine_from_request", return_value=engine):
        columns, fks = fetch_metadata(req, SchemaFilter(include=["dbo", "sales"]))

    assert [c.column_name for c in columns] == ["Status"]
    assert [f.fk_column for f in fks] == ["CustomerId"]
    assert conn.execute.call_count == 2
    for call in conn.execute.call_args_list:
        assert call.args[1] == {"schemas": ["dbo", "sales"]}
    engine.dispose.assert_called_once()


def test_fetch_metadata_disposes_engine_on_failure():
    engine, conn = _mock_engine([], [])
    conn.execute.side_effect = RuntimeError("query failed")
    with patch("mssql_dbml.core.db_connector.create_engine_from_request", return_value=engine):
        with pytest.raises(RuntimeError):
            fetch_metadata(ConnectionRequest(database="Shop"), SchemaFilter())
    engine.dispose.assert_called_once()


def test_create_engine_from_request_connection_failure():
    from sqlalchemy.exc import OperationalError
    from mssql_dbml.core.db_connector import create_engine_from_request

    engine = MagicMock()
    engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("login timeout"))
    with patch("mssql_dbml.core.db_connector.create_engine", return_value=engine):
        with pytest.raises(ValueError, match="Could not connect to database"):
            create_engine_from_request(ConnectionRequest(database="Shop"))
    engine.dispose.assert_called_once()
