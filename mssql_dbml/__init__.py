"""Generate DBML schema documents from Microsoft SQL Server metadata."""

__version__ = "1.0.0"
