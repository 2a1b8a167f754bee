import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CSV_URL = (
    "https://raw.githubusercontent.com/Arpit-Raj1/walmart-smart-inventory-management/"
    "main/public/40_product_walmart_india_sales_data__3.csv"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str

    # Source data
    seed_csv_url: str = DEFAULT_CSV_URL
    seed_http_timeout: float = Field(default=30.0, gt=0)

    # Logging
    seed_log_level: str = "INFO"

    # App
    app_name: str = "StockSeed"
    version: str = "1.0.0"

    @field_validator("seed_log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_settings() -> Settings:
    return Settings()
