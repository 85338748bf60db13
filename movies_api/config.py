from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 1234
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:8080",
        "http://localhost:1234",
    ]
    LOG_LEVEL: str = "INFO"
    SEED_MOVIES: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
