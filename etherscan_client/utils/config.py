"""
config.py

This module contains global configuration parameters loaded from environment variables.
It ensures centralized management of the settings used by the Etherscan client, its
logging and its optional Sentry reporting.

All configuration values are loaded from environment variables with sensible defaults.
"""

import os
from typing import Any, Dict

SUPPORTED_NETWORKS = ("mainnet", "sepolia", "goerli")
SUPPORTED_KEY_CASINGS = ("lower", "preserve")


class Config:
    """
    Configuration class that loads all settings from environment variables.

    Attributes:
        API_KEY (str): The Etherscan API key.
        NETWORK (str): The explorer deployment to talk to ('mainnet', 'sepolia', 'goerli').
        KEY_CASING (str): The parameter key casing policy ('lower' or 'preserve').
        REQUEST_TIMEOUT (float): The timeout for HTTP requests in seconds.
        ENVIRONMENT (str): The application environment (e.g., 'development', 'production').
        LOG_LEVEL (str): The logging level for the application.
        LOG_FILE (str): Optional path of a log file; console only when empty.
        SENTRY_DSN (str): The DSN for Sentry error tracking.
        SENTRY_ENABLED (bool): A flag to enable or disable Sentry.
        SENTRY_ENVIRONMENT (str): The Sentry environment.
        SENTRY_TRACES_SAMPLE_RATE (float): The traces sample rate for Sentry.
    """

    def __init__(self):
        """
        Initializes the configuration from environment variables.
        """
        # Etherscan API Configuration
        self.API_KEY = os.getenv("ETHERSCAN_API_KEY", "")
        self.NETWORK = os.getenv("ETHERSCAN_NETWORK", "mainnet").lower()
        self.KEY_CASING = os.getenv("ETHERSCAN_KEY_CASING", "lower").lower()

        # Request Configuration
        self.REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

        # Environment Settings
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FILE = os.getenv("LOG_FILE", "")

        # Sentry Configuration
        self.SENTRY_DSN = os.getenv("SENTRY_DSN", "")
        self.SENTRY_ENABLED = os.getenv("SENTRY_ENABLED", "false").lower() == "true"
        self.SENTRY_ENVIRONMENT = os.getenv("SENTRY_ENVIRONMENT", self.ENVIRONMENT)
        self.SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0"))

    def validate(self, require_api_key: bool = True) -> bool:
        """
        Validates that the required configuration values are set.

        Args:
            require_api_key (bool): False when the key is supplied some other way.

        Returns:
            bool: True if the configuration is valid.

        Raises:
            ValueError: If a required configuration is missing or invalid.
        """
        errors = []

        if require_api_key and not self.API_KEY:
            errors.append("ETHERSCAN_API_KEY is required but not set")

        if self.NETWORK not in SUPPORTED_NETWORKS:
            errors.append(
                f"ETHERSCAN_NETWORK must be one of {', '.join(SUPPORTED_NETWORKS)}"
            )

        if self.KEY_CASING not in SUPPORTED_KEY_CASINGS:
            errors.append(
                f"ETHERSCAN_KEY_CASING must be one of {', '.join(SUPPORTED_KEY_CASINGS)}"
            )

        if self.REQUEST_TIMEOUT <= 0:
            errors.append("REQUEST_TIMEOUT must be positive")

        if self.SENTRY_ENABLED and not self.SENTRY_DSN:
            errors.append("SENTRY_DSN is required when SENTRY_ENABLED is true")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        return True

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the configuration to a dictionary, with the API key masked.

        Returns:
            Dict[str, Any]: A dictionary containing all configuration values.
        """
        values = {
            key: value
            for key, value in self.__dict__.items()
            if not key.startswith("_")
        }
        if values.get("API_KEY"):
            values["API_KEY"] = "***"
        return values


# Global configuration instance
_config = None


def get_config() -> Config:
    """
    Gets the global configuration instance.

    This function ensures that the configuration is loaded only once and returns
    the same instance on subsequent calls.

    Returns:
        Config: The global configuration object.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drops the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None


LOG_LEVEL = get_config().LOG_LEVEL
