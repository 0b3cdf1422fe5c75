from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from mssql_dbml.core.dbml_generator import generate_dbml, utc_timestamp
from mssql_dbml.models.connection import ConnectionRequest, SchemaFilter


def test_utc_timestamp_format():
    ts = datetime(2024, 3, 5, 14, 7, 9, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(ts) == "2024-03-05T14:07:09.123Z"


def test_utc_timestamp_converts_offsets():
    ts = datetime(2024, 3, 5, 16, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert utc_timestamp(ts) == "2024-03-05T14:00:00.000Z"


def test_generate_dbml(users_columns, roles_fk):
    req = ConnectionRequest(host="db", port=5433, database="Shop")
    with patch("mssql_dbml.core.dbml_generator.fetch_metadata", return_value=(users_columns, [roles_fk])) as fetch:
        doc = generate_dbml(req, SchemaFilter(), generated_at="2024-01-01T00:00:00.000Z")

    fetch.assert_called_once()
    lines = doc.text.split("\n")
    assert lines[:5] == [
        "// Generated from database: Shop",
        "// Server: db:5433",
        "// Generated at: 2024-01-01T00:00:00.000Z",
        "",
        "Table dbo.Users {",
    ]
    assert lines[-1] == "Ref: dbo.Users.RoleId > dbo.Roles.Id [delete: cascade]"
    assert doc.counts.tables == 1


def test_generate_dbml_requires_database():
    with patch("mssql_dbml.core.dbml_generator.fetch_metadata") as fetch:
        with pytest.raises(ValueError, match="Database name is required"):
            generate_dbml(ConnectionRequest(), SchemaFilter())
    fetch.assert_not_called()
