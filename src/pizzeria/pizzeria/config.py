"""Application configuration via pydantic-settings.

Reads from environment variables (prefixed ``PIZZERIA_``) and the .env file
at project root.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root is 4 levels up from this file:
# src/pizzeria/pizzeria/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

LOYALTY_POINTS_PER_ORDER = 10

DEFAULT_SEASONAL_SPECIALS = (
    "Pumpkin Spice Pizza",
    "Holiday Turkey Pizza",
    "20% Off on Commercial Credit Cards",
    "Buy 1 Thin Crust Pizza and get 1 Free",
    "25% off on Sundays for Large Pan Pizzas",
)


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        env_prefix="PIZZERIA_",
        extra="ignore",
    )

    # --- Pricing ---
    base_price: Decimal = Decimal("10.00")
    topping_price: Decimal = Decimal("1.50")
    special_surcharge: Decimal = Decimal("3.00")

    # --- Loyalty ---
    loyalty_points_per_order: int = Field(default=LOYALTY_POINTS_PER_ORDER, ge=0)

    # --- Promotions ---
    seasonal_specials: tuple[str, ...] = DEFAULT_SEASONAL_SPECIALS

    # --- Logging ---
    log_level: str = "INFO"
    log_to_file: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
