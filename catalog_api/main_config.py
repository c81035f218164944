"""FastAPI configuration with environment variables and K8s secrets support."""
import os
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# K8s Secrets Config
# =============================================================================
# Secret path: /etc/{SECRETS_FOLDER_NAME}/{PROJECT_KEY}_{secret_name}
# e.g., /etc/secrets/catalog_database-password
SECRETS_FOLDER_NAME: str = os.getenv("SECRETS_FOLDER_NAME", "secrets")
PROJECT_KEY: str = os.getenv("PROJECT_KEY", "catalog")
SECRETS_BASE_PATH: str = f"/etc/{SECRETS_FOLDER_NAME}" if SECRETS_FOLDER_NAME else ""


class Environment(str, Enum):
    LOCAL = "local"
    DEV = "dev"
    UAT = "uat"
    PREPROD = "preprod"
    PROD = "prod"


def read_secret_from_file(secret_name: str, base_path: str | None) -> str | None:
    """Read secret from K8s mounted file."""
    if not base_path:
        return None
    secret_path = Path(base_path) / secret_name
    if not secret_path.exists():
        return None
    try:
        return secret_path.read_text().strip()
    except OSError:
        return None


def get_secret(env_var: str, secret_file_name: str | None = None, default: str | None = None) -> str | None:
    """Get secret: K8s file > env var > {env_var}_FILE > default."""
    if secret_file_name and SECRETS_BASE_PATH:
        if value := read_secret_from_file(f"{PROJECT_KEY}_{secret_file_name}", SECRETS_BASE_PATH):
            return value
    if value := os.getenv(env_var):
        return value
    if file_path := os.getenv(f"{env_var}_FILE"):
        if value := read_secret_from_file(Path(file_path).name, str(Path(file_path).parent)):
            return value
    return default


def get_env_file() -> str:
    return f".env_{os.getenv('ENV', Environment.LOCAL.value)}"


ENV_FILE = get_env_file()


# =============================================================================
# Config Classes
# =============================================================================

class DatabaseCredentials(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_prefix="DATABASE_", extra="ignore")

    host: str = "localhost"
    port: int = 5432
    user: str | None = Field(default=None)
    password: SecretStr | None = Field(default=None)
    db_name: str = "catalog"

    @model_validator(mode="before")
    @classmethod
    def _load_secrets(cls, data: dict[str, Any]) -> dict[str, Any]:
        if not data.get("user"):
            data["user"] = get_secret("DATABASE_USER", "database-user")
        if not data.get("password"):
            data["password"] = get_secret("DATABASE_PASSWORD", "database-password")
        return data


class DatabaseConfig(BaseSettings):
    """Database configuration with connection pooling settings.

    ``DATABASE_DSN`` wins over the individual credential fields when set,
    e.g. ``sqlite+aiosqlite:///./catalog.db`` for a throwaway local database.
    """
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_prefix="DATABASE_", extra="ignore")

    dsn: str | None = None
    driver: str = "postgresql+asyncpg"
    pool_size: int = 5
    max_overflow: int = 10
    pool_timeout: int = 15
    pool_recycle: int = 900
    pool_pre_ping: bool = True
    echo: bool = False

    @property
    def credentials(self) -> DatabaseCredentials:
        return DatabaseCredentials()

    @property
    def url(self) -> str:
        """Build database URL from credentials."""
        if self.dsn:
            return self.dsn
        creds = self.credentials
        password = creds.password.get_secret_value() if creds.password else ""
        return f"{self.driver}://{creds.user}:{quote_plus(password)}@{creds.host}:{creds.port}/{creds.db_name}"

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class CORSConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_prefix="CORS_", extra="ignore")

    allow_origins: str = "http://localhost:5173,http://localhost:3000"
    allow_credentials: bool = True
    allow_methods: str = "*"
    allow_headers: str = "*"

    @property
    def origins_list(self) -> list[str]:
        return [o.strip() for o in self.allow_origins.split(",")]

    @property
    def methods_list(self) -> list[str]:
        return ["*"] if self.allow_methods == "*" else [m.strip() for m in self.allow_methods.split(",")]

    @property
    def headers_list(self) -> list[str]:
        return ["*"] if self.allow_headers == "*" else [h.strip() for h in self.allow_headers.split(",")]


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_prefix="LOG_", extra="ignore")

    level: str = "INFO"
    format: str = "console"  # console | json
    level_sqlalchemy: str = "WARNING"
    level_uvicorn_access: str = "INFO"


class FastAPIConfig(BaseSettings):
    """FastAPI application configuration."""
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_prefix="FASTAPI_", extra="ignore")

    title: str = "Catalog API"
    description: str = "Product catalog management API"
    version: str = "0.1.0"
    docs_url: str | None = "/docs"
    redoc_url: str | None = "/redoc"
    openapi_url: str | None = "/openapi.json"
    root_path: str = ""
    debug: bool = False

    @field_validator("docs_url", "redoc_url", "openapi_url")
    @classmethod
    def _disable_docs_in_prod(cls, v: str | None) -> str | None:
        # Docs URLs can be disabled by setting to empty string in env
        return v if v else None


class CatalogConfig(BaseSettings):
    """Catalog behaviour knobs."""
    model_config = SettingsConfigDict(env_file=ENV_FILE, env_prefix="CATALOG_", extra="ignore")

    default_page_size: int = 10
    max_page_size: int = 100
    default_currency: str = "KRW"
    hide_deleted_in_listing: bool = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    env: Environment = Field(default=Environment.LOCAL)
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=False)

    @field_validator("debug", "reload")
    @classmethod
    def _no_debug_in_prod(cls, v: bool, info) -> bool:
        if info.data.get("env") == Environment.PROD and v:
            raise ValueError(f"{info.field_name} cannot be True in production")
        return v

    @property
    def is_local(self) -> bool:
        return self.env == Environment.LOCAL


# =============================================================================
# Lazy Loaders (cached)
# =============================================================================

@lru_cache
def get_settings() -> Settings:
    return Settings()

@lru_cache
def get_database_config() -> DatabaseConfig:
    return DatabaseConfig()

@lru_cache
def get_cors_config() -> CORSConfig:
    return CORSConfig()

@lru_cache
def get_logging_config() -> LoggingConfig:
    return LoggingConfig()

@lru_cache
def get_fastapi_config() -> FastAPIConfig:
    return FastAPIConfig()

@lru_cache
def get_catalog_config() -> CatalogConfig:
    return CatalogConfig()


# =============================================================================
# Global Instances
# =============================================================================

settings = get_settings()
database_config = get_database_config()
cors_config = get_cors_config()
logging_config = get_logging_config()
fastapi_config = get_fastapi_config()
catalog_config = get_catalog_config()
