from mssql_dbml.models.connection import ConnectionRequest, SchemaFilter  # noqa: F401
from mssql_dbml.models.metadata import ColumnRecord, ForeignKeyRecord  # noqa: F401
from mssql_dbml.models.dbml import TableBlock, DocumentCounts, RenderedDocument  # noqa: F401
from mssql_dbml.models.dbml import RenderRequest, GenerateRequest, DBMLResponse  # noqa: F401
