# app/core/config.py

from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Hello World API"
    APP_VERSION: str = "0.1.0"

    # Listening address
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    LOG_LEVEL: str = "INFO"

    # API documentation
    DOCS_URL: str = "/docs"
    OPENAPI_URL: str = "/api-doc/openapi.json"

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        """
        Values come from the environment first, then from .env
        in the directory the server is started from.
        """
        env_file = ".env"

settings = Settings()
