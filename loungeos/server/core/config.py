"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class BackupConfig(BaseModel):
    """Database backup configuration."""

    directory: str = Field(
        default="backups", alias="LOUNGEOS_BACKUP_DIR", description="Directory receiving backup files"
    )
    keep_count: int = Field(
        default=10,
        alias="LOUNGEOS_BACKUP_KEEP_COUNT",
        description="Number of most recent backups kept when pruning automatic backups",
    )
    poll_interval: float = Field(
        default=600.0,
        alias="LOUNGEOS_BACKUP_POLL_INTERVAL",
        description="Seconds between two checks of the backup scheduler",
    )
    scheduler_enabled: bool = Field(
        default=True,
        alias="LOUNGEOS_BACKUP_SCHEDULER_ENABLED",
        description="Run the automatic backup scheduler inside the server process",
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # LoungeOS Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="LoungeOS server host address to bind to",
        alias="LOUNGEOS_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="LoungeOS server port number",
        alias="LOUNGEOS_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="LoungeOS server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="LOUNGEOS_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory receiving the log file",
        alias="LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=True,
        description="Write logs to a file besides the console",
        alias="ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///loungeos.db",
        description="Async SQLAlchemy connection URL for the application database",
        alias="LOUNGEOS_DATABASE_URL",
    )

    # =====================================================================
    # Staff Configuration
    # =====================================================================
    default_password: str = Field(
        default="password123",
        description="Initial password given to newly created staff members",
        alias="LOUNGEOS_DEFAULT_PASSWORD",
    )

    # =====================================================================
    # Backup Configuration
    # =====================================================================
    backup_dir: str = Field(default="backups", alias="LOUNGEOS_BACKUP_DIR")
    backup_keep_count: int = Field(default=10, alias="LOUNGEOS_BACKUP_KEEP_COUNT")
    backup_poll_interval: float = Field(default=600.0, alias="LOUNGEOS_BACKUP_POLL_INTERVAL")
    backup_scheduler_enabled: bool = Field(default=True, alias="LOUNGEOS_BACKUP_SCHEDULER_ENABLED")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def backup(self) -> BackupConfig:
        """Get backup configuration from environment variables."""
        return BackupConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
