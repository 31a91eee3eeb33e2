from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Snapshot storage
    DATA_DIR: str = "./data"
    COVERAGE_FILE_PATTERN: str = "api_coverage_{date}.json"
    USAGE_FILE_PATTERN: str = "api_usage_{date}.json"

    # Queries
    MAX_RANGE_DAYS: int = 1830

    # HTTP
    CORS_ORIGINS: list[str] = ["*"]
    RATE_LIMIT: str = "120/minute"

    # App
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    API_PORT: int = 8400

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
