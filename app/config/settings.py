"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum
from pathlib import Path


DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ConverterSettings(BaseSettings):
    """Conversion pipeline data sources"""

    # Built-in mapping tables
    phrase_map_path: str = Field(
        default=str(DATA_DIR / "phrase_map.json"),
        description="JSON object of multi-word phrase replacements"
    )
    exceptions_map_path: str = Field(
        default=str(DATA_DIR / "spelling_exceptions.json"),
        description="JSON object of words the translator must not change"
    )

    # Base translator table
    translation_table_path: str = Field(
        default=str(DATA_DIR / "us_to_uk.json"),
        description="JSON object of US to UK word spellings"
    )

    # Validation dictionaries (one word per line, optionally gzipped)
    us_dictionary_language: Optional[str] = Field(
        default="en",
        description="pyspellchecker bundled dictionary used as the US base word set"
    )
    us_dictionary_path: str = Field(
        default=str(DATA_DIR / "dictionaries" / "en_us.txt"),
        description="Words added to the US base dictionary"
    )
    gb_dictionary_path: str = Field(default=str(DATA_DIR / "dictionaries" / "en_gb_ise.txt.gz"))

    # Persisted corrections
    corrections_path: str = Field(default="data/corrections.json")

    max_text_length: int = Field(default=1_000_000, ge=1)

    model_config = {"env_prefix": "CONVERTER_"}


class CorsSettings(BaseSettings):
    """CORS configuration"""

    origins: List[str] = Field(default_factory=lambda: ["*"])
    allow_credentials: bool = Field(default=True)
    allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "DELETE"]
    )
    allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('origins', mode='before')
    @classmethod
    def parse_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "CORS_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="NZ Spelling Converter API")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")
    log_file: Optional[str] = Field(default=None)

    # Nested Settings
    converter: ConverterSettings = Field(default_factory=ConverterSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def get_corrections_path(self) -> Path:
        """Get absolute path of the persisted corrections file"""
        return Path(self.converter.corrections_path).resolve()

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.cors.origins,
            "allow_credentials": self.cors.allow_credentials,
            "allow_methods": self.cors.allow_methods,
            "allow_headers": self.cors.allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings

