"""
Configuration module for gremlin-script.

Uses pydantic-settings for environment-based configuration of the script
service and the reserved property tokens written into generated scripts.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The reserved property tokens must match what the backing graph store
    uses for element ids and labels:
    - gremlin_id_property: property written in place of an entity's id field
    - gremlin_label_property: property the label filter asserts on
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # SERVICE CONFIGURATION
    # ===========================================
    gremlin_script_port: int = Field(default=8082, description="Service port")
    log_file_path: str | None = Field(
        default=None,
        description="Rotating JSON log file (console only when unset)",
    )

    # ===========================================
    # SCRIPT CONFIGURATION
    # ===========================================
    gremlin_id_property: str = Field(
        default="id",
        description="Reserved id property used for the entity id field",
    )
    gremlin_label_property: str = Field(
        default="label",
        description="Reserved label property used by the label filter",
    )

    # ===========================================
    # FEATURE FLAGS
    # ===========================================
    enable_script_api: bool = Field(
        default=True,
        description="Serve POST /v1/scripts/find",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
