"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .settings import Settings, Environment, load_settings

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

        env_file = ConfigLoader.env_file_for(env.value)
        if env_file is None:
            logger.warning(f"Environment file .env.{env.value} not found, using default settings")

        return load_settings(env_file, environment=env)

    @staticmethod
    def env_file_for(environment: str) -> Optional[str]:
        """Path of the .env.<environment> file, or None when it does not exist"""
        env_file = Path(f".env.{Environment(environment.lower()).value}")
        return str(env_file) if env_file.exists() else None

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
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={default_settings.host}
PORT={default_settings.port}

# Logging Configuration
LOG_LEVEL={default_settings.log_level.value}
LOG_FORMAT={'text' if env == Environment.DEVELOPMENT else 'json'}

# Reverse geocoding (leave empty to use placeholder locations)
OPENCAGE_API_KEY=

# Chat-completion provider
AI_PROVIDER_BASE_URL={default_settings.ai_provider.base_url}

# Security Configuration
SECURITY_CORS_ORIGINS=*
"""

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
