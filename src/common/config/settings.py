"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_DATABASE: str = os.getenv("DB_NAME", "attribute_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")
    DB_TABLE_PREFIX: str = os.getenv("DB_TABLE_PREFIX", "pds_")

    # Cache settings (minutes)
    CACHE_DEFAULT_TIME_MINUTES: int = int(os.getenv("CACHE_DEFAULT_TIME_MINUTES", "60"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
