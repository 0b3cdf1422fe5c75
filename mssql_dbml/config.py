"""Application settings loaded from .env file."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # SQL Server connection defaults
    DEFAULT_HOST: str = "localhost"
    DEFAULT_PORT: int = 1433
    DEFAULT_USER: str = "sa"
    ODBC_DRIVER: str = "ODBC Driver 18 for SQL Server"
    ENCRYPT: bool = True
    TRUST_SERVER_CERTIFICATE: bool = True
    CONNECT_TIMEOUT_SECONDS: int = 30

    # Schema filtering
    DEFAULT_EXCLUDE_SCHEMAS: str = "sys,INFORMATION_SCHEMA"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    CORS_ORIGINS: str = "http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def default_exclude_schema_list(self) -> list[str]:
        return [s.strip() for s in self.DEFAULT_EXCLUDE_SCHEMAS.split(",") if s.strip()]


settings = Settings()
