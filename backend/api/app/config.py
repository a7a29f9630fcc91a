from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    # Database
    DATABASE_PATH: str = Field("database.db")

    # Server
    HOST: str = Field("0.0.0.0")
    PORT: int = Field(8080)
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # misc
    LOG_LEVEL: str = Field("INFO")
    DEFAULT_PAGE_SIZE: int = Field(10)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# instantiate settings
settings = Settings()

# expose module-level constants for easier imports
HOST = settings.HOST
PORT = settings.PORT
LOG_LEVEL = settings.LOG_LEVEL
