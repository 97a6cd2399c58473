# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

BUNDLED_SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "employees.csv"


class Settings(BaseSettings):
    APP_NAME: str = "Employee Records API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "In-memory CRUD API for employee records."
    API_PREFIX: str = "/api/v1"

    LOG_LEVEL: str = "INFO"

    # Demo data loaded at startup
    SEED_DEMO_DATA: bool = True
    SEED_FILE: str = str(BUNDLED_SEED_FILE)
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def seed_path(self) -> Path:
        return Path(self.SEED_FILE).expanduser().resolve()


@lru_cache
def get_settings() -> Settings:
    return Settings()
