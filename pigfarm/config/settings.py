from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pigfarm.domain.value_objects.breeding_config import BreedingConfig


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///pigfarm.db"
    farm_header: str = "X-Farm-ID"
    log_level: str = "INFO"
    environment: str = "dev"
    # CORS
    cors_allow_origins: str = "*"
    # Breeding rules (days unless noted)
    breeding_min_age_months: float = 4
    breeding_average_month_days: float = 30.42
    breeding_gestation_days: int = 114
    breeding_nesting_box_start_day: int = 110
    breeding_nesting_box_end_day: int = 112
    breeding_weaning_days: int = 42
    breeding_post_weaning_delay_days: int = 7
    breeding_fostering_day: int = 20
    breeding_max_alerts: int = 15
    # Overdue birth scan interval (seconds)
    overdue_scan_interval: int = 3600

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]

    def breeding_config(self) -> BreedingConfig:
        """Build the validated rule-engine configuration from BREEDING_* values."""
        return BreedingConfig(
            min_breeding_age_months=self.breeding_min_age_months,
            average_month_days=self.breeding_average_month_days,
            gestation_days=self.breeding_gestation_days,
            nesting_box_start_day=self.breeding_nesting_box_start_day,
            nesting_box_end_day=self.breeding_nesting_box_end_day,
            weaning_days=self.breeding_weaning_days,
            post_weaning_breeding_delay_days=self.breeding_post_weaning_delay_days,
            fostering_day=self.breeding_fostering_day,
            max_alerts=self.breeding_max_alerts,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
