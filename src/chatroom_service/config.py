from __future__ import annotations

from pydantic import ConfigDict, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Connection string without the database name, e.g. postgresql+asyncpg://user:pw@host:5432
    DATABASE_URL: str
    DATABASE_NAME: str = "chatroom"

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 300

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = ["*"]

    PRESENCE_STALE_SECONDS: float = 10.0
    PRESENCE_SWEEP_INTERVAL: float = 15.0
    PRESENCE_SWEEPER_ENABLED: bool = True

    @model_validator(mode="after")
    def _check_presence_timing(self) -> Settings:
        # Worst-case staleness is threshold + period only while period >= threshold
        if self.PRESENCE_SWEEP_INTERVAL < self.PRESENCE_STALE_SECONDS:
            raise ValueError(
                "PRESENCE_SWEEP_INTERVAL must be >= PRESENCE_STALE_SECONDS "
                f"(got {self.PRESENCE_SWEEP_INTERVAL} < {self.PRESENCE_STALE_SECONDS})"
            )
        if self.PRESENCE_STALE_SECONDS <= 0:
            raise ValueError("PRESENCE_STALE_SECONDS must be positive")
        return self

    @property
    def database_url(self) -> str:
        return f"{self.DATABASE_URL.rstrip('/')}/{self.DATABASE_NAME}"

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()  # type: ignore[call-arg]
