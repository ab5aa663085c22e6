from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]
PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Catalog
    catalog_path: Path = Field(
        default=PACKAGE_DIR / "data" / "assets-token.json",
        description="JSON file holding the asset catalog records",
    )

    # Precision
    amount_fraction_digits: int = Field(
        default=3,
        ge=0,
        le=18,
        description="Maximum fractional digits accepted while typing a source amount",
    )
    quote_decimal_places: int = Field(
        default=5,
        ge=0,
        description="Fixed decimal places used to display the destination amount",
    )
    rate_decimal_places: int = Field(
        default=2,
        ge=0,
        description="Fixed decimal places used in the exchange rate label",
    )

    # Asset picker
    picker_close_duration_ms: int = Field(
        default=250,
        ge=0,
        description="Length of the picker close animation; opens are ignored until it ends",
    )

    # Initial screen state
    default_source_symbol: str = Field(default="WBTC", description="Source asset on a fresh session")
    default_destination_symbol: str = Field(default="USD", description="Destination asset on a fresh session")
    default_source_amount: str = Field(default="0.005", description="Source amount text on a fresh session")

    @field_validator("default_source_symbol", "default_destination_symbol")
    @classmethod
    def _normalize_symbol(cls, value: Any) -> str:
        return str(value).strip().upper()

    @property
    def picker_close_duration_seconds(self) -> float:
        return self.picker_close_duration_ms / 1000.0


# Global settings instance
settings = Settings()
