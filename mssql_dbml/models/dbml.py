"""Pydantic schemas for rendered DBML documents and the HTTP API."""
from typing import Optional
from pydantic import BaseModel, ConfigDict

from mssql_dbml.models.connection import ConnectionRequest
from mssql_dbml.models.metadata import ColumnRecord, ForeignKeyRecord


class TableBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_name: str
    table_name: str
    column_lines: tuple[str, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.schema_name}.{self.table_name}"


class DocumentCounts(BaseModel):
    tables: int = 0
    columns: int = 0
    foreign_keys: int = 0


class RenderedDocument(BaseModel):
    text: str
    counts: DocumentCounts


class RenderRequest(BaseModel):
    columns: list[ColumnRecord] = []
    foreign_keys: list[ForeignKeyRecord] = []
    header: list[str] = []


class GenerateRequest(BaseModel):
    connection: Optional[ConnectionRequest] = None
    connection_string: Optional[str] = None    # overrides `connection` when set
    include_schemas: list[str] = []
    exclude_schemas: Optional[list[str]] = None


class DBMLResponse(BaseModel):
    dbml: str
    tables: int
    columns: int
    foreign_keys: int

    @classmethod
    def from_document(cls, doc: RenderedDocument) -> "DBMLResponse":
        return cls(
            dbml=doc.text,
            tables=doc.counts.tables,
            columns=doc.counts.columns,
            foreign_keys=doc.counts.foreign_keys,
        )
