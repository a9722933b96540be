"""Equipment Registry: Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # App
    APP_NAME: str = "Sistema de Refrigeradores"
    APP_VERSION: str = "3.0.0"

    # Timezone
    TIMEZONE: str = "America/Asuncion"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Store
    SEED_DEMO_DATA: bool = True
    DEFAULT_LATITUDE: float = -25.2637
    DEFAULT_LONGITUDE: float = -57.5759

    # Security
    BCRYPT_ROUNDS: int = 12

    # Pagination
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 200

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
