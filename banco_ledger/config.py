"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BancoConfig(BaseSettings):
    """Banco ledger configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANCO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Interest rates applied per call to apply_interest
    savings_interest_rate: Decimal = Field(default=Decimal("0.02"), ge=0, le=1)
    checking_interest_rate: Decimal = Field(default=Decimal("0.005"), ge=0, le=1)

    # Directory configuration
    first_account_id: int = Field(default=1, ge=1)

    # Display configuration
    timestamp_format: str = "%d/%m/%Y %H:%M"


# Global configuration instance
config = BancoConfig()


def get_config() -> BancoConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BancoConfig:
    """Reload configuration from environment"""
    global config
    config = BancoConfig()
    return config
