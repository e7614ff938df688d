from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Structural validation
    MAX_DEPTH: int = Field(default=100, ge=1)  # list_of/map_of nesting limit per invocation

    @property
    def max_depth(self) -> int:
        return self.MAX_DEPTH

    class Config:
        env_prefix = "VOUCH_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
