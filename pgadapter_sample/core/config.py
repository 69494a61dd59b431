"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

The embedded PGAdapter overwrites ``PGADAPTER_HOST`` and ``PGADAPTER_PORT`` on the
live ``settings`` object once it knows the address Docker assigned to it, so the
grouped views below always reflect the running proxy.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="simple", alias="LOG_FORMAT", description="Log format (simple, detailed or json)"
    )
    file_dir: str = Field(default="logs", alias="LOG_FILE_DIR", description="Directory for the log file")
    enable_file: bool = Field(
        default=False, alias="ENABLE_FILE_LOGGING", description="Also write logs to a file"
    )

    model_config = {"populate_by_name": True}


class PGAdapterConfig(BaseModel):
    """Embedded PGAdapter configuration."""

    embedded: bool = Field(
        default=True,
        alias="PGADAPTER_EMBEDDED",
        description="Start PGAdapter together with the application",
    )
    image: str = Field(
        default="gcr.io/cloud-spanner-pg-adapter/pgadapter",
        alias="PGADAPTER_IMAGE",
        description="PGAdapter Docker image",
    )
    emulator_image: str = Field(
        default="gcr.io/cloud-spanner-pg-adapter/pgadapter-emulator",
        alias="PGADAPTER_EMULATOR_IMAGE",
        description="Docker image that bundles PGAdapter with the Spanner emulator",
    )
    use_bundled_emulator: bool = Field(
        default=False,
        alias="PGADAPTER_USE_BUNDLED_EMULATOR",
        description="Run the image that bundles PGAdapter and the emulator",
    )
    host: str = Field(default="localhost", alias="PGADAPTER_HOST", description="PGAdapter host address")
    port: int = Field(default=5432, alias="PGADAPTER_PORT", description="PGAdapter port number")

    model_config = {"populate_by_name": True}


class SpannerConfig(BaseModel):
    """Cloud Spanner database configuration."""

    project: str = Field(default="my-project", alias="SPANNER_PROJECT", description="Google Cloud project")
    instance: str = Field(default="my-instance", alias="SPANNER_INSTANCE", description="Spanner instance")
    database: str = Field(default="my-database", alias="SPANNER_DATABASE", description="Spanner database")
    emulator_host: Optional[str] = Field(
        default=None,
        alias="SPANNER_EMULATOR_HOST",
        description="Emulator address; when set PGAdapter is configured for the emulator",
    )
    credentials: Optional[str] = Field(
        default=None,
        alias="GOOGLE_APPLICATION_CREDENTIALS",
        description="Service account key file mounted into the PGAdapter container",
    )

    model_config = {"populate_by_name": True}


class DatabaseConfig(BaseModel):
    """SQLAlchemy connection configuration."""

    url: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Explicit database URL; derived from the PGAdapter address when empty",
    )
    echo: bool = Field(default=False, alias="DATABASE_ECHO", description="Echo SQL statements")
    auto_migrate: bool = Field(
        default=True, alias="DATABASE_AUTO_MIGRATE", description="Migrate the schema on startup"
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
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="simple", alias="LOG_FORMAT")
    log_file_dir: str = Field(default="logs", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(default=False, alias="ENABLE_FILE_LOGGING")

    # =====================================================================
    # PGAdapter Configuration
    # =====================================================================
    pgadapter_embedded: bool = Field(default=True, alias="PGADAPTER_EMBEDDED")
    pgadapter_image: str = Field(default="gcr.io/cloud-spanner-pg-adapter/pgadapter", alias="PGADAPTER_IMAGE")
    pgadapter_emulator_image: str = Field(
        default="gcr.io/cloud-spanner-pg-adapter/pgadapter-emulator", alias="PGADAPTER_EMULATOR_IMAGE"
    )
    pgadapter_use_bundled_emulator: bool = Field(default=False, alias="PGADAPTER_USE_BUNDLED_EMULATOR")
    pgadapter_host: str = Field(default="localhost", alias="PGADAPTER_HOST")
    pgadapter_port: int = Field(default=5432, alias="PGADAPTER_PORT")

    # =====================================================================
    # Cloud Spanner Configuration
    # =====================================================================
    spanner_project: str = Field(default="my-project", alias="SPANNER_PROJECT")
    spanner_instance: str = Field(default="my-instance", alias="SPANNER_INSTANCE")
    spanner_database: str = Field(default="my-database", alias="SPANNER_DATABASE")
    spanner_emulator_host: Optional[str] = Field(default=None, alias="SPANNER_EMULATOR_HOST")
    google_application_credentials: Optional[str] = Field(default=None, alias="GOOGLE_APPLICATION_CREDENTIALS")

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")
    database_auto_migrate: bool = Field(default=True, alias="DATABASE_AUTO_MIGRATE")

    # =====================================================================
    # HTTP Server Configuration
    # =====================================================================
    server_host: str = Field(default="127.0.0.1", alias="SERVER_HOST")
    server_port: int = Field(default=8000, alias="SERVER_PORT")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def pgadapter(self) -> PGAdapterConfig:
        """Get PGAdapter configuration."""
        return PGAdapterConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def spanner(self) -> SpannerConfig:
        """Get Cloud Spanner configuration."""
        return SpannerConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration.

        Without an explicit ``DATABASE_URL`` the URL points at the (possibly
        embedded) PGAdapter using the psycopg driver.
        """
        config = DatabaseConfig.model_validate(self.model_dump(by_alias=True))
        if config.url:
            return config
        url = f"postgresql+psycopg://{self.pgadapter_host}:{self.pgadapter_port}/{self.spanner_database}"
        return config.model_copy(update={"url": url})


settings = Settings()
