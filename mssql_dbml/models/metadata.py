"""Pydantic schemas for the raw column and foreign-key metadata streams."""
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ColumnRecord(BaseModel):
    """One table column, as reported by INFORMATION_SCHEMA.COLUMNS."""
    model_config = ConfigDict(frozen=True)

    schema_name: str
    table_name: str
    column_name: str
    data_type: str                          # lowercase engine type name
    char_max_length: Optional[int] = None   # -1 means max
    numeric_precision: Optional[int] = None
    numeric_scale: Optional[int] = None
    is_nullable: bool = False
    default_expr: Optional[str] = None      # raw engine expression, e.g. "((0))"
    is_primary_key: bool = False
    is_identity: bool = False
    is_unique: bool = False

    @property
    def table_key(self) -> str:
        return f"{self.schema_name}.{self.table_name}"


class ForeignKeyRecord(BaseModel):
    """One column pair of a foreign-key constraint."""
    model_config = ConfigDict(frozen=True)

    fk_schema: str
    fk_table: str
    fk_column: str
    pk_schema: str
    pk_table: str
    pk_column: str
    delete_action: Optional[str] = None     # e.g. "CASCADE", "NO_ACTION", "SET_NULL"
    update_action: Optional[str] = None
