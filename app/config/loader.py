"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env = Environment(environment.lower())

        env_file_path = Path(f".env.{env.value}")
        if env_file_path.exists():
            return Settings(_env_file=str(env_file_path), environment=env)

        logger.warning(f"Environment file {env_file_path} not found, using default settings")
        return Settings(environment=env)

    @staticmethod
    def get_available_environments() -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(".").glob(".env.*"):
            if env_file.name.endswith(".sample"):
                continue
            env_files.append(env_file.name.replace(".env.", ""))
        return sorted(env_files)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration exists and its data files are readable.

        Args:
            environment: Environment name to validate

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            env = Environment(environment.lower())
        except ValueError:
            return False

        if not Path(f".env.{env.value}").exists():
            return False

        try:
            settings = ConfigLoader.load_environment_config(environment)
        except ValueError as e:
            logger.error(f"Configuration for {environment} failed validation: {e}")
            return False

        data_files = [
            settings.converter.phrase_map_path,
            settings.converter.exceptions_map_path,
            settings.converter.translation_table_path,
            settings.converter.us_dictionary_path,
            settings.converter.gb_dictionary_path,
        ]
        missing = [path for path in data_files if not Path(path).is_file()]
        if missing:
            logger.error(f"Missing converter data files: {missing}")
            return False
        return True

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        default_settings = Settings()

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={default_settings.app_name}
APP_VERSION={default_settings.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={default_settings.host}
PORT={default_settings.port}
RELOAD={'true' if env == Environment.DEVELOPMENT else 'false'}
WORKERS={1 if env == Environment.DEVELOPMENT else 4}

# Logging Configuration
LOG_LEVEL={default_settings.log_level.value}
LOG_FORMAT={'text' if env == Environment.DEVELOPMENT else 'json'}

# Converter Configuration
CONVERTER_PHRASE_MAP_PATH={default_settings.converter.phrase_map_path}
CONVERTER_EXCEPTIONS_MAP_PATH={default_settings.converter.exceptions_map_path}
CONVERTER_TRANSLATION_TABLE_PATH={default_settings.converter.translation_table_path}
CONVERTER_US_DICTIONARY_LANGUAGE={default_settings.converter.us_dictionary_language}
CONVERTER_US_DICTIONARY_PATH={default_settings.converter.us_dictionary_path}
CONVERTER_GB_DICTIONARY_PATH={default_settings.converter.gb_dictionary_path}
CONVERTER_CORRECTIONS_PATH={default_settings.converter.corrections_path}

# CORS Configuration
CORS_ORIGINS=*
"""

        with open(output_path, "w") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
