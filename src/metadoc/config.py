"""Configuration management for metadoc."""

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")
    file: Optional[Path] = Field(default=None, description="Log file path")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class ConverterConfig(BaseModel):
    """Configuration for the metadata converter."""

    register_default_extensions: bool = Field(default=True, description="Register the built-in parsers (e.g. the 'mongo' data store) on construction.")
    seal_extensions_on_first_use: bool = Field(default=True, description="Seal the extension registry when the first conversion runs. Later registrations are logged as warnings.")


class Config(BaseSettings):
    """Main configuration for metadoc. Loads from environment variables prefixed with METADOC_."""

    model_config = SettingsConfigDict(
        env_prefix='METADOC_',
        env_nested_delimiter='__', # e.g., METADOC_LOGGING__LEVEL
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    converter: ConverterConfig = Field(default_factory=ConverterConfig)

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        This does not layer with environment variables.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
