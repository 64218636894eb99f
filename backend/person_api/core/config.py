import os
from typing import List


def _get_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Person API")
    API_VERSION: str = os.getenv("API_VERSION", "1.0.0")

    # sqlite for local runs, docker-compose points this at postgres
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./persons.db")
    SQL_ECHO: bool = _get_bool("SQL_ECHO")

    # logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "")  # empty = console only

    # comma separated list of origins allowed to call the api from a browser
    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:4200").split(",")
        if origin.strip()
    ]

    # pagination
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

settings = Settings()
