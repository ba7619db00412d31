"""Configuration loading for the ticketing system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticketing.core.models import MAX_TICKETS


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Pricing
    adult_ticket_price: int = Field(
        default=25,
        description="Flat price of one adult ticket",
    )
    child_ticket_price: int = Field(
        default=15,
        description="Flat price of one child ticket",
    )
    currency: str = Field(
        default="GBP",
        description="Currency code reported by the payment adapter",
    )

    # Purchase limits
    max_tickets_per_purchase: int = Field(
        default=MAX_TICKETS,
        description="Maximum number of tickets (all types) in one purchase",
    )

    # Third-party service adapters
    seat_reservation_backend: Literal["stdout"] = Field(
        default="stdout",
        description="Seat reservation adapter type",
    )
    payment_backend: Literal["stdout"] = Field(
        default="stdout",
        description="Payment adapter type",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose adapter output",
    )

    @field_validator("adult_ticket_price", "child_ticket_price")
    @classmethod
    def validate_price(cls, v: int) -> int:
        """Ensure ticket prices are non-negative."""
        if v < 0:
            raise ValueError("ticket prices must be non-negative")
        return v

    @field_validator("max_tickets_per_purchase")
    @classmethod
    def validate_max_tickets(cls, v: int) -> int:
        """Ensure the ticket cap is positive."""
        if v <= 0:
            raise ValueError("max_tickets_per_purchase must be positive")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
