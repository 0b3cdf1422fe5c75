"""Pydantic schemas for SQL Server connection requests and schema filters."""
from typing import Optional
from pydantic import BaseModel, Field
from sqlalchemy.engine import URL

from mssql_dbml.config import settings


def _split_csv(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [s.strip() for s in value.split(",") if s.strip()]


class ConnectionRequest(BaseModel):
    host: str = Field(default_factory=lambda: settings.DEFAULT_HOST, description="Server host")
    port: int = Field(default_factory=lambda: settings.DEFAULT_PORT, description="Server port")
    database: Optional[str] = Field(None, description="Database name")
    username: Optional[str] = Field(default_factory=lambda: settings.DEFAULT_USER, description="Username")
    password: Optional[str] = Field(None, description="Password")
    encrypt: bool = Field(default_factory=lambda: settings.ENCRYPT)
    trust_server_certificate: bool = Field(default_factory=lambda: settings.TRUST_SERVER_CERTIFICATE)

    @classmethod
    def from_connection_string(cls, conn_str: str) -> "ConnectionRequest":
        """
        Parse an ADO-style connection string, e.g.
        ``Server=localhost,5433;Database=mydb;User Id=sa;Password=pass``.
        Keys are case-insensitive; unknown keys are ignored.
        """
        values: dict = {}
        for param in conn_str.split(";"):
            if not param.strip():
                continue
            key, _, value = param.partition("=")
            key = key.strip().lower()
            value = value.strip()

            if key in ("server", "data source"):
                host, _, port = value.partition(",")
                values["host"] = host
                if port.strip():
                    values["port"] = port.strip()
            elif key in ("database", "initial catalog"):
                values["database"] = value
            elif key in ("user id", "uid"):
                values["username"] = value
            elif key in ("password", "pwd"):
                values["password"] = value
            elif key == "trustservercertificate":
                values["trust_server_certificate"] = value.lower() == "true"
            elif key == "encrypt":
                values["encrypt"] = value.lower() == "true"
        return cls(**values)

    @property
    def server_label(self) -> str:
        return f"{self.host}:{self.port}"

    def get_sqlalchemy_url(self) -> URL:
        return URL.create(
            "mssql+pyodbc",
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
            query={
                "driver": settings.ODBC_DRIVER,
                "Encrypt": "yes" if self.encrypt else "no",
                "TrustServerCertificate": "yes" if self.trust_server_certificate else "no",
            },
        )


class SchemaFilter(BaseModel):
    """Include-list or exclude-list of schema names. Include takes precedence."""
    include: list[str] = []
    exclude: list[str] = Field(default_factory=lambda: settings.default_exclude_schema_list)

    @classmethod
    def from_csv(cls, include: Optional[str] = None, exclude: Optional[str] = None) -> "SchemaFilter":
        if exclude is None:
            return cls(include=_split_csv(include))
        return cls(include=_split_csv(include), exclude=_split_csv(exclude))

    @property
    def mode(self) -> Optional[str]:
        if self.include:
            return "include"
        if self.exclude:
            return "exclude"
        return None

    @property
    def schemas(self) -> list[str]:
        return self.include or self.exclude
