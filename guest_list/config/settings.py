from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    debug: bool = False
    language: str = "en"

    ENVIRONMENT: str = "Production"

    # Guest API
    api_base_url: str = "http://localhost:5000"
    request_timeout: float = 10.0

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
