"""
Application Settings
===================

Renderer settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Dict, List, Union
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import json


DEFAULT_TEMPLATE = (
    '<div{options}><span class="label">{label}</span><span class="value">{value}</span></div>'
)


class Settings(BaseSettings):
    """Microformat renderer settings with environment variable support."""

    # Application Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )

    # Microformat Configuration
    root_prefix: str = Field(default="h-", description="Required prefix of root microformat types")
    default_template: str = Field(
        default=DEFAULT_TEMPLATE, description="Template used when an attribute sets none"
    )
    container_tag: str = Field(default="div", description="Default microformat container tag")
    default_format: str = Field(default="text", description="Format applied when none is given")
    max_embed_depth: int = Field(
        default=16, ge=0, description="Maximum nesting depth of embedded microformats"
    )

    # Formatter Configuration
    coordinate_format: str = Field(default="%02.6f", description="Default DMS coordinate format")
    coordinate_symbols: List[str] = Field(
        default=["°", "′", "″"], description="Degree, minute and second symbols"
    )
    hemispheres: Dict[str, str] = Field(
        default={"n": "N", "e": "E", "s": "S", "w": "W"},
        description="Text representations of the hemispheres",
    )
    date_format: str = Field(default="%b %d, %Y", description="strftime format for dates")
    datetime_format: str = Field(
        default="%b %d, %Y %H:%M:%S", description="strftime format for date/times"
    )
    boolean_format: List[str] = Field(
        default=["No", "Yes"], description="Text for false and true values"
    )
    null_display: str = Field(default="", description="Text displayed for missing values")

    # Monitoring Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("root_prefix")
    @classmethod
    def validate_root_prefix(cls, v: str) -> str:
        """Root prefix must be non-empty."""
        if not v:
            raise ValueError("Root prefix cannot be empty")
        return v

    @field_validator("coordinate_symbols", mode="before")
    @classmethod
    def parse_coordinate_symbols(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse coordinate symbols from a JSON list or comma-separated string."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                try:
                    v = json.loads(v)
                except json.JSONDecodeError:
                    pass
            if isinstance(v, str):
                v = [symbol.strip() for symbol in v.split(",")]
        if len(v) != 3:
            raise ValueError("Exactly three coordinate symbols are required")
        return v

    @field_validator("hemispheres")
    @classmethod
    def validate_hemispheres(cls, v: Dict[str, str]) -> Dict[str, str]:
        """All four hemisphere keys must be present."""
        missing = {"n", "e", "s", "w"} - set(v)
        if missing:
            raise ValueError(f"Missing hemisphere keys: {sorted(missing)}")
        return v

    @field_validator("boolean_format")
    @classmethod
    def validate_boolean_format(cls, v: List[str]) -> List[str]:
        """Boolean format is a [false, true] pair."""
        if len(v) != 2:
            raise ValueError("Boolean format must contain exactly two entries")
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="MICROFORMATS_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
