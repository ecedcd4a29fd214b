"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class MongoDBConfig(BaseModel):
    """MongoDB connection configuration."""

    uri: str = Field(
        default="mongodb://localhost:27017", alias="MONGODB_URI", description="MongoDB connection string"
    )
    database: str = Field(default="wordboard", alias="MONGODB_DATABASE", description="Database holding the boards")
    timeout_ms: int = Field(
        default=5000,
        alias="MONGODB_TIMEOUT_MS",
        ge=1,
        description="Server selection timeout in milliseconds",
    )

    model_config = {"populate_by_name": True}


class ManagementConfig(BaseModel):
    """Actuator (health/info/metrics) endpoint configuration."""

    base_path: str = Field(
        default="/actuator", alias="MANAGEMENT_BASE_PATH", description="Path prefix of the actuator endpoints"
    )
    show_details: Literal["always", "never"] = Field(
        default="always",
        alias="MANAGEMENT_HEALTH_SHOW_DETAILS",
        description="Whether health components expose their details",
    )
    disk_space_path: str = Field(
        default=".", alias="MANAGEMENT_HEALTH_DISKSPACE_PATH", description="Path checked by the disk space indicator"
    )
    disk_space_threshold: int = Field(
        default=10 * 1024 * 1024,
        alias="MANAGEMENT_HEALTH_DISKSPACE_THRESHOLD",
        ge=0,
        description="Minimum free bytes before the disk space indicator reports DOWN",
    )

    model_config = {"populate_by_name": True}


class LogfireConfig(BaseModel):
    """Logfire tracing configuration."""

    enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED", description="Enable Logfire tracing")
    token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN", description="Logfire write token")
    environment: str = Field(
        default="development", alias="LOGFIRE_ENVIRONMENT", description="Deployment environment name"
    )
    service_name: str = Field(
        default="wordboard-server", alias="LOGFIRE_SERVICE_NAME", description="Service name reported to Logfire"
    )
    service_version: str = Field(
        default="1.0.0.dev0", alias="LOGFIRE_SERVICE_VERSION", description="Service version reported to Logfire"
    )
    trace_fastapi: bool = Field(default=True, alias="LOGFIRE_TRACE_FASTAPI", description="Instrument FastAPI")
    trace_pymongo: bool = Field(default=True, alias="LOGFIRE_TRACE_PYMONGO", description="Instrument PyMongo")

    model_config = {"populate_by_name": True}


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


class AppInfoConfig(BaseModel):
    """Build information published by the info endpoint."""

    group: str = Field(default="org.example", alias="APP_GROUP", description="Project group identifier")
    name: str = Field(default="wordboard", alias="APP_NAME", description="Project name")
    version: str = Field(default="1.0.0.dev0", alias="APP_VERSION", description="Project version")
    description: str = Field(
        default="Scrabble and word play board storage",
        alias="APP_DESCRIPTION",
        description="Short project description",
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
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="WORDBOARD_SERVER_HOST",
    )
    server_port: int = Field(
        default=8080,
        description="Server port number",
        alias="WORDBOARD_SERVER_PORT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="WORDBOARD_LOG_LEVEL",
    )
    log_format: Literal["simple", "detailed", "json"] = Field(
        default="detailed",
        description="Log line format",
        alias="WORDBOARD_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory receiving the log file when file logging is on",
        alias="WORDBOARD_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write a DEBUG level log file in addition to the console",
        alias="WORDBOARD_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # MongoDB Configuration
    # =====================================================================
    mongodb_uri: str = Field(default="mongodb://localhost:27017", alias="MONGODB_URI")
    mongodb_database: str = Field(default="wordboard", alias="MONGODB_DATABASE")
    mongodb_timeout_ms: int = Field(default=5000, alias="MONGODB_TIMEOUT_MS", ge=1)

    # =====================================================================
    # Management Configuration
    # =====================================================================
    management_base_path: str = Field(default="/actuator", alias="MANAGEMENT_BASE_PATH")
    management_health_show_details: Literal["always", "never"] = Field(
        default="always", alias="MANAGEMENT_HEALTH_SHOW_DETAILS"
    )
    management_health_diskspace_path: str = Field(default=".", alias="MANAGEMENT_HEALTH_DISKSPACE_PATH")
    management_health_diskspace_threshold: int = Field(
        default=10 * 1024 * 1024, alias="MANAGEMENT_HEALTH_DISKSPACE_THRESHOLD", ge=0
    )

    # =====================================================================
    # Logfire Configuration
    # =====================================================================
    logfire_enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED")
    logfire_token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN")
    logfire_environment: str = Field(default="development", alias="LOGFIRE_ENVIRONMENT")
    logfire_service_name: str = Field(default="wordboard-server", alias="LOGFIRE_SERVICE_NAME")
    logfire_service_version: str = Field(default="1.0.0.dev0", alias="LOGFIRE_SERVICE_VERSION")
    logfire_trace_fastapi: bool = Field(default=True, alias="LOGFIRE_TRACE_FASTAPI")
    logfire_trace_pymongo: bool = Field(default=True, alias="LOGFIRE_TRACE_PYMONGO")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Application Information
    # =====================================================================
    app_group: str = Field(default="org.example", alias="APP_GROUP")
    app_name: str = Field(default="wordboard", alias="APP_NAME")
    app_version: str = Field(default="1.0.0.dev0", alias="APP_VERSION")
    app_description: str = Field(default="Scrabble and word play board storage", alias="APP_DESCRIPTION")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def mongodb(self) -> MongoDBConfig:
        """Get MongoDB configuration from environment variables."""
        return MongoDBConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def management(self) -> ManagementConfig:
        """Get actuator configuration from environment variables."""
        return ManagementConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logfire(self) -> LogfireConfig:
        """Get Logfire configuration from environment variables."""
        return LogfireConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def app_info(self) -> AppInfoConfig:
        """Get build information from environment variables."""
        return AppInfoConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
