"""Root settings model for session storage configuration."""

from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]

DEFAULT_SESSION_TABLE_NAME = "shopify_sessions"
DEFAULT_PORT = 3211

# Module-level variable to store TOML config for settings source
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that reads from TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class PostgresSettings(BaseModel):
    """PostgreSQL connection and table settings."""

    database_url: str | None = Field(
        default=None,
        description="Full connection URL; takes precedence over discrete credentials",
    )
    host: str = Field(default="localhost", description="Database host")
    database: str = Field(default="shopify", description="Database name")
    user: str = Field(default="shopify", description="Database user")
    password: str = Field(default="", description="Database password")
    session_table_name: str = Field(
        default=DEFAULT_SESSION_TABLE_NAME, description="Session table name"
    )
    port: int = Field(default=DEFAULT_PORT, gt=0, description="Database port knob")

    def dsn(self) -> str:
        """Return the connection URL, building one from credentials if unset."""
        if self.database_url:
            return self.database_url
        return (
            f"postgres://{quote(self.user, safe='')}:{quote(self.password, safe='')}"
            f"@{self.host}/{quote(self.database, safe='')}"
        )


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration, optional)
    3. config/{SHOPIFY_SESSION_ENV}.toml (environment overrides, optional)
    4. SHOPIFY_SESSION_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOPIFY_SESSION_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default="json", description="Log renderer")
    redact_pii: bool = Field(default=True, description="Redact secrets in logs")

    postgres: PostgresSettings = Field(
        default_factory=PostgresSettings,
        description="PostgreSQL storage configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: constructor arguments, then env vars, then TOML."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
