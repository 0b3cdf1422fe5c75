import pytest
from fastapi.testclient import TestClient

from mssql_dbml.main import app
from mssql_dbml.models.metadata import ColumnRecord, ForeignKeyRecord


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def users_columns():
    return [
        ColumnRecord(
            schema_name="dbo", table_name="Users", column_name="Id", data_type="int",
            numeric_precision=10, numeric_scale=0, is_primary_key=True, is_identity=True,
        ),
        ColumnRecord(
            schema_name="dbo", table_name="Users", column_name="Name", data_type="nvarchar",
            char_max_length=100, is_nullable=True,
        ),
    ]


@pytest.fixture
def roles_fk():
    return ForeignKeyRecord(
        fk_schema="dbo", fk_table="Users", fk_column="RoleId",
        pk_schema="dbo", pk_table="Roles", pk_column="Id",
        delete_action="CASCADE", update_action="NO_ACTION",
    )


@pytest.fixture
def column_row():
    """A raw row as returned by the columns catalog query."""
    return {
        "TABLE_SCHEMA": "dbo",
        "TABLE_NAME": "Orders",
        "COLUMN_NAME": "Status",
        "DATA_TYPE": "varchar",
        "CHARACTER_MAXIMUM_LENGTH": 20,
        "NUMERIC_PRECISION": None,
        "NUMERIC_SCALE": None,
        "IS_NULLABLE": "NO",
        "COLUMN_DEFAULT": "('draft')",
        "IS_PK": 0,
        "IS_IDENTITY": 0,
        "IS_UNIQUE": 1,
    }


@pytest.fixture
def fk_row():
    return {
        "FK_SCHEMA": "sales",
        "FK_TABLE": "Orders",
        "FK_COL": "CustomerId",
        "PK_SCHEMA": "sales",
        "PK_TABLE": "Customers",
        "PK_COL": "Id",
        "DELETE_ACTION": "SET_NULL",
        "UPDATE_ACTION": "CASCADE",
    }
