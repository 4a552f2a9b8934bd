from pydantic_settings import BaseSettings
from pydantic import field_validator
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server-Timing
    SERVER_TIMING_ENABLED: bool = True
    SERVER_TIMING_TAIL_LABEL: str = "app"

    @field_validator('SERVER_TIMING_TAIL_LABEL', mode='before')
    @classmethod
    def strip_tail_label(cls, v: str) -> str:
        """Blank labels disable the tail checkpoint."""
        if isinstance(v, str):
            return v.strip()
        return v

    # X-Response-Time
    RESPONSE_TIME_HEADER_ENABLED: bool = True

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
